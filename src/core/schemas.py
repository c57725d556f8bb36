"""Core data models for the LinkedIn URL tools."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# A multi-select filter is either a single code or an ordered list of codes.
FilterCodes = int | list[int]


class JobFilters(BaseModel):
    """Structured filters for a fresh LinkedIn job search.

    Fields accept either the Python name or the LinkedIn query parameter
    name (``f_TPR``, ``f_WT``, ``f_WRA``, ``f_E``, ``sortBy``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    keywords: str = ""
    location: str | None = None
    time_posted: int | None = Field(default=None, alias="f_TPR")
    job_type: FilterCodes | None = Field(default=None, alias="f_WT")
    work_mode: FilterCodes | None = Field(default=None, alias="f_WRA")
    experience_level: FilterCodes | None = Field(default=None, alias="f_E")
    sort_by: str | None = Field(default=None, alias="sortBy")

    @field_validator("keywords", mode="before")
    @classmethod
    def keywords_none_as_empty(cls, v: object) -> object:
        return "" if v is None else v


class FilterValidation(BaseModel):
    """Outcome of validating a JobFilters before building a URL."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    error: str | None = None


class URLValidation(BaseModel):
    """Outcome of validating a user-supplied LinkedIn URL.

    ``warning`` is non-blocking: the URL is still valid.
    """

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    error: str | None = None
    warning: str | None = None
    is_job_search_path: bool | None = None


class FilterOption(BaseModel):
    """A single entry of a filter catalog."""

    model_config = ConfigDict(frozen=True)

    value: int | str
    label: str


class TimePreset(BaseModel):
    """A quick choice for the "posted within" filter."""

    model_config = ConfigDict(frozen=True)

    label: str
    seconds: int = Field(ge=1)
