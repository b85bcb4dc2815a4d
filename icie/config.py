"""Configuration for the build and test orchestrators."""

from pathlib import Path

from pydantic import Field, field_validator

from icie.models.base import Model


class IcieConfig(Model):
    """Orchestrator settings, loaded from JSON on the command line."""

    tool_path: Path | None = Field(
        default=None,
        description="Compiler-driver executable (defaults to ~/.cargo/bin/ci)",
    )
    executable_suffix: str = Field(
        default=".e", description="Suffix of the compiled artifact"
    )
    tests_directory: str | None = Field(
        default=None,
        description="Tests directory relative to the workspace root "
        "(None means the workspace root itself)",
    )

    @field_validator("executable_suffix")
    @classmethod
    def _check_suffix(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2 or "/" in value:
            raise ValueError(f"Invalid executable suffix '{value}'")
        return value
