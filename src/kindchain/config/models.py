"""Pydantic models for the two ``kindchain.toml`` sections.

The file is sparse: anything it leaves out keeps the default declared
here, and a missing file is the same as an empty one.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from kindchain.domain.kind import DEFAULT_SEPARATOR


class KindsConfig(BaseModel):
    """[kinds] section."""

    model_config = {"frozen": True}

    separator: str = DEFAULT_SEPARATOR

    @field_validator("separator")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            msg = f"separator must be exactly one character, got {value!r}"
            raise ValueError(msg)
        return value


class KindchainConfig(BaseModel):
    """Parsed ``kindchain.toml``.

    ``values`` keys are kind paths written with ``kinds.separator``.
    ``KindService.resolve`` stores each one under its top-level id, so
    ``"rectCorner/rect" = "red"`` sets the value for ``rectCorner``.
    """

    model_config = {"frozen": True}

    kinds: KindsConfig = Field(default_factory=KindsConfig)
    values: dict[str, str] = Field(default_factory=dict)
