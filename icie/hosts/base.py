"""Abstract base class for editor hosts."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from icie.models.context import WorkspaceContext
from icie.models.events import Notification, ProgressEvent


@dataclass(frozen=True, kw_only=True)
class EditorHost(ABC):
    """Abstract base for the editor the orchestrators run inside.

    The host owns the document and workspace model and the user interface.
    The orchestrators only read context from it, ask it to persist open
    documents, and push progress and notification events to it.
    """

    @abstractmethod
    def workspace_context(self) -> WorkspaceContext:
        """Return the current active document and workspace root."""

    @abstractmethod
    async def save_all(self) -> bool:
        """Save all open documents with unsaved changes.

        Returns:
            True if every document was saved

        """

    @abstractmethod
    def report_progress(self, event: ProgressEvent) -> None:
        """Display progress of a running operation."""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Display a message to the user."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        self.notify(Notification(level="info", message=message))

    def show_error(self, message: str) -> None:
        """Display an error message."""
        self.notify(Notification(level="error", message=message))
