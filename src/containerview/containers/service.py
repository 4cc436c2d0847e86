import logging
from typing import FrozenSet, List, Optional, Tuple

from containerview.containers import guards
from containerview.containers.mapping import group_by_project, to_container, to_container_with_parent
from containerview.containers.models import (
    Container,
    ContainerGroup,
    ContainerParent,
    OperationResult,
    OperationStatus,
)
from containerview.exceptions import MalformedResult
from containerview.inventory.queries import MAX_PAGE_SIZE, QueryMode, container_query

logger = logging.getLogger(__name__)


class ContainerService:
    """Read access to the containers registered below a device.

    ``inventory`` is anything with the ``fetch_children`` and
    ``fetch_with_parents`` coroutines of
    :class:`containerview.inventory.client.InventoryClient`.
    """

    def __init__(self, inventory, mode: QueryMode = QueryMode.STRICT, page_size: int = MAX_PAGE_SIZE):
        self.inventory = inventory
        self.mode = QueryMode(mode)
        self.page_size = page_size

    @property
    def predicate(self) -> str:
        return container_query(self.mode)

    @property
    def expect_nested(self) -> bool:
        # strict queries only match objects carrying the container fragment
        return self.mode is QueryMode.STRICT

    async def get_containers(self, device_id: str) -> List[Container]:
        rows = await self.inventory.fetch_children(device_id, self.predicate, page_size=self.page_size)
        containers = []
        for row in rows:
            container = to_container(row, expect_nested=self.expect_nested)
            if container is None:
                logger.debug("Omitting unmappable managed object %s of device %s", row.get("id"), device_id)
                continue
            containers.append(container)
        return containers

    async def get_container_groups(self, device_id: str) -> List[ContainerGroup]:
        return group_by_project(await self.get_containers(device_id))

    async def get_container(self, object_id: str) -> Tuple[Container, ContainerParent]:
        raw = await self.inventory.fetch_with_parents(object_id)
        container, parent = to_container_with_parent(raw, expect_nested=self.expect_nested)
        if container is None:
            raise MalformedResult(
                f"Managed object '{object_id}' is not a container",
                context={"object_id": object_id},
            )
        return container, parent

    async def can_view_container_list(self, device_id: str) -> bool:
        return await guards.can_view_container_list(self.inventory, device_id, self.predicate)

    def capabilities(self) -> FrozenSet[str]:
        """Container operations this service can perform."""
        return frozenset()

    def _unsupported(self, operation: str, container: Optional[Container]) -> OperationResult:
        container_id = container.container_id if container else None
        logger.warning("Container operation '%s' is not supported (container %s)", operation, container_id)
        return OperationResult(
            operation=operation,
            status=OperationStatus.UNSUPPORTED,
            container_id=container_id,
            message=f"{operation.capitalize()} is not supported for containers",
        )

    def stop(self, container: Optional[Container]) -> OperationResult:
        return self._unsupported("stop", container)

    def remove(self, container: Optional[Container]) -> OperationResult:
        return self._unsupported("remove", container)
