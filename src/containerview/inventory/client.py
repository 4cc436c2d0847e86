"""Async client for the device inventory REST API.

Only the two read queries used by the container views are implemented:
child additions of a device filtered by a query expression, and a single
managed object including its parent references.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from containerview.exceptions import MalformedResult, NotFound, Unavailable
from containerview.inventory.queries import clamp_page_size

logger = logging.getLogger(__name__)

MANAGED_OBJECTS_PATH = "/inventory/managedObjects"


class InventoryClient:
    """Issues inventory queries over HTTP.

    The underlying ``httpx.AsyncClient`` is created on first use and kept
    until :meth:`close` is called.
    """

    def __init__(
        self,
        base_url: str,
        auth: Optional[Tuple[str, str]] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout_seconds: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.auth = auth
        self.headers = headers or {"Accept": "application/json"}
        self.timeout_seconds = timeout_seconds
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_config(cls, cfg, transport: Optional[httpx.AsyncBaseTransport] = None):
        return cls(
            cfg.inventory_url,
            auth=cfg.auth(),
            headers=cfg.headers(),
            timeout_seconds=cfg.http_timeout_seconds,
            transport=transport,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                auth=self.auth,
                headers=self.headers,
                timeout=self.timeout_seconds,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def _get(self, path: str, params: Dict[str, Any], object_id: str) -> Dict[str, Any]:
        client = await self._get_client()
        try:
            response = await client.get(path, params=params)
        except httpx.TransportError as exc:
            raise Unavailable(
                f"Inventory unreachable: {exc}", context={"path": path}
            ) from exc

        if response.status_code == 404:
            raise NotFound(object_id)
        if response.is_error:
            raise Unavailable(
                f"Inventory request failed with status {response.status_code}",
                response.status_code,
                context={"path": path},
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise MalformedResult("Inventory response is not valid JSON") from exc
        if not isinstance(data, dict):
            raise MalformedResult("Inventory response must be a JSON object")
        return data

    async def fetch_children(
        self, device_id: str, predicate: str, page_size: int = 100
    ) -> List[Dict[str, Any]]:
        """Child additions of ``device_id`` matching the ``predicate`` query."""
        params = {
            "query": predicate,
            "pageSize": clamp_page_size(page_size),
            "withTotalPages": "true",
        }
        logger.debug("Querying child additions of %s: %s", device_id, params)
        payload = await self._get(
            f"{MANAGED_OBJECTS_PATH}/{device_id}/childAdditions", params, device_id
        )

        references = payload.get("references")
        if not isinstance(references, list):
            raise MalformedResult("Child additions response is missing 'references'")

        data = []
        for reference in references:
            managed_object = reference.get("managedObject") if isinstance(reference, dict) else None
            if isinstance(managed_object, dict):
                data.append(managed_object)
        return data

    async def fetch_with_parents(self, object_id: str) -> Dict[str, Any]:
        """Single managed object including its parent references."""
        return await self._get(
            f"{MANAGED_OBJECTS_PATH}/{object_id}", {"withParents": "true"}, object_id
        )
