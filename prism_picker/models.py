"""
PRISM — Data Models
Persisted settings, validated with Pydantic.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, field_validator

from .catalog import CATALOGS
from .themes import BASE_THEME


class PrismConfig(BaseModel):
    # Last committed theme (None = nothing committed yet)
    theme: Optional[str] = None
    # Shown while no catalog theme is active
    base_theme: str = BASE_THEME
    default_catalog: str = "dark"
    last_modified: Optional[str] = None

    @field_validator("default_catalog")
    @classmethod
    def validate_catalog(cls, v: str) -> str:
        key = v.strip().lower()
        if key not in CATALOGS:
            raise ValueError(f"default_catalog must be one of: {', '.join(CATALOGS)}")
        return key

    @field_validator("base_theme")
    @classmethod
    def validate_base_theme(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("base_theme cannot be empty")
        return v.strip()
