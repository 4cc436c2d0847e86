from containerview.inventory.client import InventoryClient
from containerview.inventory.queries import QueryMode, container_query

__all__ = ["InventoryClient", "QueryMode", "container_query"]
