"""Configuration for the terminal host."""

from pathlib import Path

from icie.models.base import Model


class TerminalHostConfig(Model):
    """Configuration for the terminal host.

    Without an editor the active document and workspace root are given
    explicitly. Relative paths are resolved against the working directory.
    """

    active_document: Path | None = None
    workspace_root: Path | None = None
