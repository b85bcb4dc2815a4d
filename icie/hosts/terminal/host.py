"""Terminal host implementation."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from icie.hosts.base import EditorHost
from icie.hosts.terminal.config import TerminalHostConfig
from icie.models.context import WorkspaceContext
from icie.models.events import Notification, ProgressEvent

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class TerminalHost(EditorHost):
    """Host for running commands outside of an editor.

    Files are edited elsewhere and already on disk, so saving is a no-op.
    Progress and notifications are written to the log.
    """

    config: TerminalHostConfig

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: TerminalHostConfig
    ) -> AsyncGenerator["TerminalHost", None]:
        """Create host from configuration."""
        yield cls(config=config)

    def workspace_context(self) -> WorkspaceContext:
        """Return the configured document and root as absolute paths."""
        document = self.config.active_document
        root = self.config.workspace_root
        return WorkspaceContext(
            active_document=document.resolve() if document else None,
            workspace_root=root.resolve() if root else None,
        )

    async def save_all(self) -> bool:
        """Nothing is held in memory, report success."""
        return True

    def report_progress(self, event: ProgressEvent) -> None:
        """Log progress events."""
        log.info("%s [%3d%%] %s", event.title, event.percent, event.message)

    def notify(self, notification: Notification) -> None:
        """Log notifications at a level matching their severity."""
        level = logging.ERROR if notification.level == "error" else logging.INFO
        log.log(level, "%s", notification.message)
