import asyncio
import json

import click

from containerview.config.settings import config
from containerview.containers.filters import filter_containers, filter_groups
from containerview.containers.service import ContainerService
from containerview.exceptions import ContainerViewError, UnsupportedOperation
from containerview.inventory.client import InventoryClient


def run_with_service(action):
    """Run ``action(service)`` against a fresh inventory client."""

    async def runner():
        async with InventoryClient.from_config(config) as inventory:
            service = ContainerService(inventory, mode=config.query_mode, page_size=config.page_size)
            return await action(service)

    try:
        return asyncio.run(runner())
    except ContainerViewError as e:
        raise click.ClickException(e.message)


def echo_json(data):
    click.echo(json.dumps(data, indent=4, default=str))


@click.group()
@click.pass_context
def containers(ctx):
    """Inspect containers registered in the inventory"""
    pass


@containers.command(name="list")
@click.argument("device_id")
@click.option("-q", "--query", default="", help="Filter by image, name or container id.")
@click.option("--include-groups", is_flag=True, help="Include containers belonging to a project.")
def list_containers(device_id, query, include_groups):
    """List the active containers of a device."""
    result = run_with_service(lambda service: service.get_containers(device_id))
    for container in filter_containers(result, include_groups, query):
        project = f" [{container.project}]" if container.project else ""
        click.echo(f"{container.name} - {container.image} - {container.status}{project}")


@containers.command(name="groups")
@click.argument("device_id")
@click.option("-q", "--query", default="", help="Filter by project name or image.")
def list_groups(device_id, query):
    """List the container groups (projects) of a device."""
    groups = run_with_service(lambda service: service.get_container_groups(device_id))
    for group in filter_groups(groups, query):
        click.echo(f"{group.project} ({len(group.containers)} containers)")
        for container in group.containers:
            click.echo(f"  {container.name} - {container.image} - {container.status}")


@containers.command(name="show")
@click.argument("object_id")
def show_container(object_id):
    """Show a container and the device it runs on."""
    container, parent = run_with_service(lambda service: service.get_container(object_id))
    echo_json({"container": container.model_dump(by_alias=True), "parent": parent.model_dump()})


@containers.command(name="access")
@click.argument("device_id")
def check_access(device_id):
    """Check whether a device has any containers to show."""
    visible = run_with_service(lambda service: service.can_view_container_list(device_id))
    click.echo("visible" if visible else "not visible")
    if not visible:
        raise SystemExit(1)


@containers.command(name="stop")
@click.argument("object_id")
def stop_container(object_id):
    """Stop a container (not supported by the inventory)."""

    async def action(service):
        container, _ = await service.get_container(object_id)
        result = service.stop(container)
        if not result.supported:
            raise UnsupportedOperation(result.operation)
        return result

    run_with_service(action)
