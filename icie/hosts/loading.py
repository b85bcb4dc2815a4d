"""Loading of editor hosts from entry points."""

from collections.abc import Mapping
from contextlib import AbstractAsyncContextManager
from importlib.metadata import entry_points
from typing import Any

from icie.hosts.base import EditorHost
from icie.hosts.manifest import HostManifest

ENTRY_POINT_GROUP = "icie.hosts"


class HostNotFoundError(Exception):
    """Raised when a host is not found."""


def available_hosts() -> list[str]:
    """Return the keys of all registered hosts, sorted."""
    return sorted(entry.name for entry in entry_points(group=ENTRY_POINT_GROUP))


def load_host_manifest(key: str) -> HostManifest[Any]:
    """Load a host manifest by key.

    Raises:
        HostNotFoundError: If no host with the given key is registered

    """
    for entry in entry_points(group=ENTRY_POINT_GROUP, name=key):
        manifest: HostManifest[Any] = entry.load()
        return manifest

    raise HostNotFoundError(
        f"Host '{key}' not found. Available hosts: {available_hosts()}"
    )


def open_host(
    key: str, config_data: Mapping[str, Any]
) -> AbstractAsyncContextManager[EditorHost]:
    """Validate a host's configuration and return its managed instance.

    Args:
        key: Host key, e.g. "terminal"
        config_data: Decoded JSON configuration for that host

    Returns:
        Context manager yielding the host

    Raises:
        HostNotFoundError: If no host with the given key is registered
        pydantic.ValidationError: If the configuration does not match the host

    """
    manifest = load_host_manifest(key)
    return manifest.host_factory(manifest.config_cls.model_validate(config_data))
