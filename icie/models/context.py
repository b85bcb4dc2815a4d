"""Models for the workspace context supplied by the editor host."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

ContextErrorKind = Literal["no-active-document", "no-workspace-root"]

CONTEXT_ERROR_MESSAGES: dict[ContextErrorKind, str] = {
    "no-active-document": "no active document",
    "no-workspace-root": "no workspace root",
}


@dataclass(frozen=True, kw_only=True)
class WorkspaceContext:
    """Snapshot of the host's current file and project root.

    Either value may be missing. A fresh snapshot is taken for every
    orchestration run since the active file can change between commands.
    """

    active_document: Path | None = None
    workspace_root: Path | None = None


@dataclass(frozen=True, kw_only=True)
class ContextError:
    """Required workspace context is not available."""

    kind: ContextErrorKind

    @property
    def message(self) -> str:
        """Human-readable description of the missing context."""
        return CONTEXT_ERROR_MESSAGES[self.kind]
