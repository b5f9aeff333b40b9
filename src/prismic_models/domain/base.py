"""Base class for immutable content API value objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen value object; unknown keys are rejected rather than dropped."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_assignment=True)
