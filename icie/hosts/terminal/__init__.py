"""Terminal host module."""

from icie.hosts.terminal.config import TerminalHostConfig
from icie.hosts.terminal.host import TerminalHost
from icie.hosts.terminal.manifest import terminal_manifest

__all__ = ["TerminalHost", "TerminalHostConfig", "terminal_manifest"]
