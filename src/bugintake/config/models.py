"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, bugintake.toml only contains
overrides. A project needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from bugintake.domain.sections import FIELD_ORDER, REQUIRED_FIELDS

# --- bugintake.toml sections ---


class IntakeConfig(BaseModel):
    """[intake] section."""

    model_config = {"frozen": True}

    required: list[str] = Field(default_factory=lambda: sorted(REQUIRED_FIELDS))
    strip_comments: bool = True

    @field_validator("required")
    @classmethod
    def _known_fields(cls, value: list[str]) -> list[str]:
        unknown = [name for name in value if name not in FIELD_ORDER]
        if unknown:
            msg = f"unknown report field(s): {', '.join(unknown)}"
            raise ValueError(msg)
        # description and expected_behavior are always required.
        merged = set(value) | REQUIRED_FIELDS
        return [name for name in FIELD_ORDER if name in merged]


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)
