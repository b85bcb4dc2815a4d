"""Base model for settings parsed from command line JSON."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable settings model that rejects unknown keys.

    Settings arrive as free-form JSON, a misspelled key must fail instead of
    silently falling back to a default.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
