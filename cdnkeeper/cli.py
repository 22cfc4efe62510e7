"""Command-line interface for cdnkeeper.

The ``cdnkeeper`` command group is implemented with Click. Each subcommand
builds a `cdnkeeper.client.Client` from the configuration profile selected
with ``--profile`` (or the ``CDNKEEPER_PROFILE`` environment variable).
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Optional

import click

from cdnkeeper.client import Client
from cdnkeeper.config import config as config_profiles
from cdnkeeper.config import get_config
from cdnkeeper.exceptions import CdnKeeperError
from cdnkeeper.purge import purge_key
from cdnkeeper.resources.backend import list_backends
from cdnkeeper.resources.service import list_services
from cdnkeeper.resources.version import (
    activate_version,
    clone_version,
    latest_version,
    list_versions,
    validate_version,
)
from cdnkeeper.version import get_version

__all__ = [
    "main",
    "version_command",
    "services_command",
    "versions_command",
    "activate_command",
    "clone_command",
    "validate_command",
    "backends_command",
    "purge_command",
]


@click.group()
@click.option(
    "--profile",
    type=click.Choice(sorted(config_profiles.keys())),
    envvar="CDNKEEPER_PROFILE",
    default=None,
    help="Configuration profile (default: the 'default' profile).",
)
@click.pass_context
def main(ctx: click.Context, profile: Optional[str]) -> None:
    """Manage Fastly CDN services."""
    profile_config = get_config(profile)
    profile_config.configure_logging()
    ctx.obj = profile_config


def with_client(f: Callable[..., Any]) -> Callable[..., Any]:
    """Pass a `Client` built from the selected profile as the first
    argument, and report API errors as command failures.
    """

    @click.pass_obj
    @functools.wraps(f)
    def wrapper(profile_config: Any, *args: Any, **kwargs: Any) -> Any:
        with Client.from_config(profile_config) as client:
            try:
                return f(client, *args, **kwargs)
            except CdnKeeperError as e:
                raise click.ClickException(str(e)) from e

    return wrapper


@main.command("version")
def version_command() -> None:
    """Print the cdnkeeper version."""
    click.echo(get_version())


@main.command("services")
@with_client
def services_command(client: Client) -> None:
    """List services (ID, active version and name)."""
    for service in list_services(client):
        click.echo(
            f"{service.id}\t{service.active_version or '-'}\t{service.name}"
        )


@main.command("versions")
@click.argument("service_id")
@click.option(
    "--latest", is_flag=True, help="Only print the most recent version."
)
@with_client
def versions_command(client: Client, service_id: str, latest: bool) -> None:
    """List the versions of a service."""
    if latest:
        version = latest_version(client, service_id)
        versions = [version] if version is not None else []
    else:
        versions = list_versions(client, service_id)
    for version in versions:
        flags = []
        if version.active:
            flags.append("active")
        if version.locked:
            flags.append("locked")
        click.echo(
            f"{version.number}\t{','.join(flags) or '-'}\t"
            f"{version.comment or ''}"
        )


@main.command("activate")
@click.argument("service_id")
@click.argument("version", type=int)
@with_client
def activate_command(client: Client, service_id: str, version: int) -> None:
    """Activate a service version."""
    activated = activate_version(client, service_id, version)
    click.echo(f"Activated version {activated.number} of {service_id}")


@main.command("clone")
@click.argument("service_id")
@click.argument("version", type=int)
@with_client
def clone_command(client: Client, service_id: str, version: int) -> None:
    """Clone a service version into a new, editable version."""
    cloned = clone_version(client, service_id, version)
    click.echo(f"Cloned version {version} to version {cloned.number}")


@main.command("validate")
@click.argument("service_id")
@click.argument("version", type=int)
@with_client
def validate_command(client: Client, service_id: str, version: int) -> None:
    """Validate a service version's configuration.

    Exits with status 1 if the configuration is invalid.
    """
    valid, message = validate_version(client, service_id, version)
    if valid:
        click.echo(f"Version {version} is valid")
    else:
        raise click.ClickException(
            f"Version {version} is invalid: {message}".rstrip(": ")
        )


@main.command("backends")
@click.argument("service_id")
@click.argument("version", type=int)
@with_client
def backends_command(client: Client, service_id: str, version: int) -> None:
    """List the backends of a service version (name, address and port)."""
    for backend in list_backends(client, service_id, version):
        click.echo(f"{backend.name}\t{backend.address}\t{backend.port}")


@main.command("purge")
@click.argument("service_id")
@click.argument("key")
@click.option("--soft", is_flag=True, help="Mark content stale instead.")
@with_client
def purge_command(
    client: Client, service_id: str, key: str, soft: bool
) -> None:
    """Purge content tagged with a surrogate key."""
    result = purge_key(client, service_id, key, soft=soft)
    click.echo(f"Purged {key}: {result.status} ({result.id})")
