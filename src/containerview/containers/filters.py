from typing import Iterable, List, Optional

from containerview.containers.models import UNINSTALLED_STATUS, Container, ContainerGroup


def _contains(value: Optional[str], query: str) -> bool:
    return bool(value) and query.lower() in value.lower()


def is_active(container: Container) -> bool:
    """Linked to an engine container and not marked as uninstalled."""
    return bool(container.container_id) and container.status != UNINSTALLED_STATUS


def matches_text(container: Optional[Container], query: Optional[str] = "") -> bool:
    if container is None or not is_active(container):
        return False
    query = query or ""
    return (
        _contains(container.image, query)
        or _contains(container.name, query)
        or _contains(container.container_id, query)
    )


def filter_containers(
    containers: Optional[Iterable[Container]],
    include_groups: bool,
    query: Optional[str] = "",
) -> List[Container]:
    if not containers:
        return []
    return [
        container
        for container in containers
        if (include_groups or not (container and container.project))
        and matches_text(container, query)
    ]


def matches_group(group: ContainerGroup, query: Optional[str] = "") -> bool:
    query = query or ""
    return _contains(group.project, query) or any(
        _contains(container.image, query) for container in group.containers
    )


def filter_groups(
    groups: Optional[Iterable[ContainerGroup]], query: Optional[str] = ""
) -> List[ContainerGroup]:
    if not groups:
        return []
    return [group for group in groups if matches_group(group, query)]
