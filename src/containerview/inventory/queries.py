from enum import Enum

SERVICE_TYPE_CONTAINER = "container"
SERVICE_TYPE_CONTAINER_GROUP = "container-group"
CONTAINER_SERVICE_TYPES = (SERVICE_TYPE_CONTAINER, SERVICE_TYPE_CONTAINER_GROUP)

# Fragment holding the container descriptor published by the edge agent
CONTAINER_FRAGMENT = "container"

MAX_PAGE_SIZE = 100


class QueryMode(str, Enum):
    """How strictly child additions are matched as containers.

    ``strict`` also requires the embedded container descriptor, so service
    entries that were registered without one (placeholders, other agents) are
    not treated as containers. ``legacy`` only compares the service type.
    """

    STRICT = "strict"
    LEGACY = "legacy"


def container_query(mode: QueryMode = QueryMode.STRICT) -> str:
    """Inventory query expression selecting container child additions."""
    mode = QueryMode(mode)
    if mode is QueryMode.LEGACY:
        return " or ".join(f"serviceType eq {t}" for t in CONTAINER_SERVICE_TYPES)

    service_types = " or ".join(f"serviceType eq '{t}'" for t in CONTAINER_SERVICE_TYPES)
    return f"({service_types}) and has({CONTAINER_FRAGMENT})"


def clamp_page_size(page_size: int) -> int:
    return max(1, min(MAX_PAGE_SIZE, int(page_size)))
