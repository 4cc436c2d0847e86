import os

import click
import yaml

from containerview.cli.containers_cli import containers
from containerview.config.settings import config as settings

CONFIG_SEARCH_PATHS = (
    "config.yaml",
    "~/.config/containerview/config.yaml",
    "/etc/containerview/config.yaml",
)


def find_config_file(explicit=None):
    if explicit:
        return explicit
    for path in CONFIG_SEARCH_PATHS:
        path = os.path.expanduser(path)
        if os.path.exists(path):
            return path
    return None


def load_config_file(path):
    with open(path, "r") as f:
        values = yaml.safe_load(f) or {}
    if not isinstance(values, dict):
        raise click.FileError(path, hint="configuration must be a mapping")
    try:
        settings.update(values.get("containerview", values))
    except ValueError as e:
        raise click.FileError(path, hint=str(e))


@click.group()
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to the configuration file.")
@click.version_option(package_name="containerview")
@click.pass_context
def main(ctx, config_path):
    """Container View CLI"""
    ctx.ensure_object(dict)
    path = find_config_file(config_path)
    if path:
        load_config_file(path)
    ctx.obj["config_path"] = path


main.add_command(containers)


@main.command()
@click.option('--host', default='127.0.0.1', help='The host to bind to.')
@click.option('--port', default=8000, help='The port to bind to.')
def server(host, port):
    """Run the FastAPI server."""
    import uvicorn

    from containerview.api.server import app
    uvicorn.run(app, host=host, port=port)
