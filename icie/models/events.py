"""Models for events emitted to the host's user interface."""

from dataclasses import dataclass
from typing import Literal

BuildPhase = Literal[
    "saving-documents",
    "compiling",
    "succeeded",
    "failed",
]


@dataclass(frozen=True, kw_only=True)
class ProgressEvent:
    """Progress of a long-running operation, reported on phase transitions."""

    title: str
    phase: BuildPhase
    percent: int
    message: str


@dataclass(frozen=True, kw_only=True)
class Notification:
    """User-visible message."""

    level: Literal["info", "error"]
    message: str
