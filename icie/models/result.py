"""Models for external tool invocations and build outcomes."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from icie.models.context import ContextError


@dataclass(frozen=True, kw_only=True)
class ToolInvocation:
    """A single run of the external compiler-driver."""

    tool_path: Path
    args: Sequence[str]

    @property
    def argv(self) -> list[str]:
        """Full argument vector passed to the process."""
        return [str(self.tool_path), *self.args]


@dataclass(frozen=True, kw_only=True)
class ToolOutput:
    """Captured output of a tool run that exited successfully."""

    exit_code: int = 0
    stdout: bytes = field(default=b"", repr=False)
    stderr: bytes = field(default=b"", repr=False)


@dataclass(frozen=True, kw_only=True)
class ToolError:
    """A tool run that could not be started or reported failure.

    ``exit_code`` is negative when the process was terminated by a signal
    and ``None`` when it never started.
    """

    kind: Literal["launch-failed", "non-zero-exit"]
    message: str
    exit_code: int | None = None
    stdout: bytes = field(default=b"", repr=False)
    stderr: bytes = field(default=b"", repr=False)


BuildStatus = Literal["succeeded", "failed", "aborted"]


@dataclass(frozen=True, kw_only=True)
class BuildOutcome:
    """Terminal state of one build run."""

    status: BuildStatus
    source: Path | None = None
    error: ContextError | ToolError | None = None

    @property
    def succeeded(self) -> bool:
        """Whether the build produced a fresh executable."""
        return self.status == "succeeded"
