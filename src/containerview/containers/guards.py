"""Visibility checks for the container views.

Both checks fail closed: anything that is not positively identified as a
container context, or any inventory error, denies access.
"""

from typing import Any, Mapping, Optional

from containerview.inventory.queries import CONTAINER_SERVICE_TYPES, QueryMode, container_query


def resolve_service_type(
    context: Optional[Mapping[str, Any]],
    parent_context: Optional[Mapping[str, Any]] = None,
) -> Optional[str]:
    """Service type of the nearest context that declares one."""
    for candidate in (context, parent_context):
        if candidate and candidate.get("serviceType"):
            return candidate["serviceType"]
    return None


def can_view_container_tab(service_type: Optional[str]) -> bool:
    return service_type in CONTAINER_SERVICE_TYPES


async def can_view_container_list(
    inventory, device_id: str, predicate: Optional[str] = None
) -> bool:
    """True when ``device_id`` has at least one container child addition.

    Errors raised by ``inventory`` are not caught.
    """
    if predicate is None:
        predicate = container_query(QueryMode.STRICT)
    rows = await inventory.fetch_children(device_id, predicate, page_size=1)
    return len(rows) > 0
