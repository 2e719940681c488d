"""
Shared pydantic base models.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

# Surrogate keys are Postgres bigserial columns.
MAX_ID = 2**63 - 1


class TrimmedModel(BaseModel):
    """
    Request model that strips surrounding whitespace from every string.

    Blank strings become None so optional text fields are stored as NULL and
    required ones fail validation instead of persisting "".
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value
