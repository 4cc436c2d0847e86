"""Conversion of raw inventory objects into container view models."""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from containerview.containers.models import Container, ContainerGroup, ContainerParent
from containerview.inventory.queries import CONTAINER_FRAGMENT

logger = logging.getLogger(__name__)

# Engine-level fields and the inventory attribute each one is read from
ENGINE_FIELDS = {
    "container_id": "containerId",
    "ports": "ports",
    "command": "command",
    "networks": "networks",
    "filesystem": "filesystem",
    "image": "image",
    "running_for": "runningFor",
    "state": "state",
    "project": "projectName",
}


def _build(values: Dict[str, Any]) -> Optional[Container]:
    try:
        return Container(**values)
    except ValidationError as exc:
        logger.debug("Skipping managed object %s: %s", values.get("id"), exc)
        return None


def to_container(raw: Any, expect_nested: bool = False) -> Optional[Container]:
    """Map a managed object to a :class:`Container`.

    Engine fields are read from the ``container`` fragment when the object has
    one and from the object itself otherwise. ``id``, ``name``, ``status`` and
    ``lastUpdated`` always come from the object. Returns None when the object
    cannot be mapped, including when ``expect_nested`` is set and the fragment
    is missing.
    """
    if not isinstance(raw, Mapping) or raw.get("id") in (None, ""):
        return None

    fragment = raw.get(CONTAINER_FRAGMENT)
    if isinstance(fragment, Mapping):
        source = fragment
    elif expect_nested:
        return None
    else:
        source = raw

    values = {field: source.get(attribute) for field, attribute in ENGINE_FIELDS.items()}
    values.update(
        {
            "id": str(raw["id"]),
            "name": raw.get("name"),
            "status": raw.get("status"),
            "last_updated": raw.get("lastUpdated"),
        }
    )
    return _build(values)


def to_parent(raw: Any) -> ContainerParent:
    """The last addition parent of ``raw``; empty when it has none or it is malformed."""
    parents = raw.get("additionParents") if isinstance(raw, Mapping) else None
    references = parents.get("references") if isinstance(parents, Mapping) else None
    if not isinstance(references, list) or not references or not isinstance(references[-1], Mapping):
        return ContainerParent()

    parent = references[-1].get("managedObject")
    if not isinstance(parent, Mapping):
        return ContainerParent()
    try:
        return ContainerParent(name=parent.get("name"), id=parent.get("id"))
    except ValidationError as exc:
        logger.debug("Ignoring malformed addition parent of %s: %s", raw.get("id"), exc)
        return ContainerParent()


def to_container_with_parent(
    raw: Mapping, expect_nested: bool = False
) -> Tuple[Optional[Container], ContainerParent]:
    return to_container(raw, expect_nested=expect_nested), to_parent(raw)


def group_by_project(containers: Iterable[Container]) -> List[ContainerGroup]:
    """Group containers by project, in order of each project's first appearance.

    Containers without a project are not part of any group.
    """
    groups: Dict[str, List[Container]] = {}
    for container in containers:
        if container.project:
            groups.setdefault(container.project, []).append(container)
    return [ContainerGroup(project=project, containers=members) for project, members in groups.items()]
