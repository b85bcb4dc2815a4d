"""Terminal host manifest."""

from icie.hosts.manifest import HostManifest
from icie.hosts.terminal.config import TerminalHostConfig
from icie.hosts.terminal.host import TerminalHost

terminal_manifest = HostManifest(
    config_cls=TerminalHostConfig,
    host_factory=TerminalHost.from_config,
)
