"""Configuration models and YAML loader for the LinkedIn URL tools."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from src.core.schemas import JobFilters


class BuilderDefaults(BaseModel):
    """Filters applied to saved searches that leave them unset."""

    time_posted: int | None = Field(default=86400, ge=0)
    sort_by: str | None = "DD"


class ModifierConfig(BaseModel):
    """Defaults for rewriting existing URLs."""

    default_seconds: int = Field(default=3600, ge=1)


class SavedSearch(BaseModel):
    """A named set of filters to build a URL from."""

    name: str = ""
    filters: JobFilters

    @field_validator("name")
    @classmethod
    def name_stripped(cls, v: str) -> str:
        return v.strip()


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    defaults: BuilderDefaults = Field(default_factory=BuilderDefaults)
    modifier: ModifierConfig = Field(default_factory=ModifierConfig)
    searches: list[SavedSearch] = Field(default_factory=list)

    def resolve_filters(self, search: SavedSearch) -> JobFilters:
        """Return the search's filters with defaults filled in for unset fields."""
        explicit = search.filters.model_fields_set
        updates: dict[str, Any] = {}
        if "time_posted" not in explicit:
            updates["time_posted"] = self.defaults.time_posted
        if "sort_by" not in explicit:
            updates["sort_by"] = self.defaults.sort_by
        return search.filters.model_copy(update=updates)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)
