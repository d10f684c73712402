"""
Base configuration shared by all document models.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class BaseContractModel(BaseModel):
    """
    Base model for decoded API-contract objects.

    Documents are built once per run and never mutated afterwards, so all
    models are frozen. Unknown keys in the source document are ignored and
    explicit nulls fall back to the field default.
    """

    model_config = ConfigDict(
        frozen=True,  # Read-only once decoded
        extra="ignore",  # Swagger carries many fields we never inspect
        populate_by_name=True,  # Allow field population by name as well as alias
        str_strip_whitespace=False,  # Names and refs are compared verbatim
    )

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        """Treat `key: null` the same as a missing key."""
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


__all__ = ["BaseContractModel"]
