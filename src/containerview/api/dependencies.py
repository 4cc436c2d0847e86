from containerview.config.settings import config
from containerview.containers.service import ContainerService
from containerview.inventory.client import InventoryClient


async def get_container_service():
    """One inventory client per request, closed once the response is sent."""
    async with InventoryClient.from_config(config) as inventory:
        yield ContainerService(inventory, mode=config.query_mode, page_size=config.page_size)
