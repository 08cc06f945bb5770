"""Base configuration class with strict validation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """Base model that rejects unknown fields.

    Every config in the project inherits from this so a typo in a YAML key
    (`heal_bellow: 40`) fails loudly instead of silently keeping a default.
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_default=True,
        str_strip_whitespace=True,
    )
