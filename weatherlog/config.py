"""
Configuration management for weatherlog.

Defaults match the classic layout (data/store.txt, totals over `high`);
both can be overridden from the environment.
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError, field_validator

from weatherlog.errors import ConfigError
from weatherlog.models import FIELDS

DEFAULT_STORE = Path("data") / "store.txt"
DEFAULT_NUMERIC_FIELD = "high"


class Config(BaseModel):
    """Application configuration."""

    store_path: Path = DEFAULT_STORE

    # Field summed by `summary`; None reports the record count only
    numeric_field: Optional[str] = DEFAULT_NUMERIC_FIELD

    @field_validator("numeric_field")
    @classmethod
    def _known_field(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in FIELDS:
            raise ValueError(f"numeric field must be one of {', '.join(FIELDS)}, got {v!r}")
        return v

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from WEATHERLOG_* environment variables."""
        numeric_field: Optional[str] = os.getenv("WEATHERLOG_NUMERIC_FIELD", DEFAULT_NUMERIC_FIELD)
        if numeric_field.strip().lower() in ("", "none"):
            numeric_field = None
        try:
            return cls(
                store_path=os.getenv("WEATHERLOG_STORE") or DEFAULT_STORE,
                numeric_field=numeric_field,
            )
        except ValidationError as e:
            raise ConfigError(f"invalid configuration: {e.errors()[0]['msg']}") from e
