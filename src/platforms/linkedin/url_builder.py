"""LinkedIn job search URL builder.

Pure functions, no network access.
"""

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote_plus, urlencode

from src.core.errors import InvalidInputError
from src.core.schemas import FilterCodes, FilterValidation, JobFilters

logger = logging.getLogger(__name__)

BASE_URL = "https://www.linkedin.com/jobs/search/"
MIN_KEYWORDS_LENGTH = 2


def build_linkedin_job_url(filters: JobFilters | Mapping[str, Any]) -> str:
    """Build a LinkedIn job search URL from filters.

    Parameters are emitted in a fixed order (keywords, location, f_TPR,
    f_WT, f_WRA, f_E, sortBy). Optional filters that are unset, zero or
    empty are omitted entirely.

    Args:
        filters: JobFilters instance, or a mapping validated into one.

    Returns:
        Fully qualified LinkedIn search URL.

    Raises:
        InvalidInputError: If keywords are missing or blank.
    """
    filters = _coerce(filters)

    keywords = filters.keywords.strip()
    if not keywords:
        raise InvalidInputError

    params: dict[str, str] = {"keywords": keywords}

    location = (filters.location or "").strip()
    if location:
        params["location"] = location

    if filters.time_posted is not None and filters.time_posted > 0:
        params["f_TPR"] = f"r{filters.time_posted}"

    for name, codes in (
        ("f_WT", filters.job_type),
        ("f_WRA", filters.work_mode),
        ("f_E", filters.experience_level),
    ):
        encoded = _encode_codes(codes)
        if encoded is not None:
            params[name] = encoded

    if filters.sort_by:
        params["sortBy"] = filters.sort_by

    url = f"{BASE_URL}?{urlencode(params, quote_via=quote_plus)}"
    logger.debug("Built LinkedIn search URL with params %s", list(params))
    return url


def validate_filters(filters: JobFilters | Mapping[str, Any]) -> FilterValidation:
    """Check filters before building; never raises."""
    keywords = _keywords_of(filters).strip()

    if not keywords:
        return FilterValidation(is_valid=False, error="Please enter a job designation or keywords")

    if len(keywords) < MIN_KEYWORDS_LENGTH:
        return FilterValidation(
            is_valid=False,
            error=f"Keywords must be at least {MIN_KEYWORDS_LENGTH} characters long",
        )

    return FilterValidation(is_valid=True)


def get_filter_summary(filters: JobFilters | Mapping[str, Any]) -> str:
    """Short display label, e.g. '"Python Developer" in Karachi'."""
    filters = _coerce(filters)
    parts: list[str] = []

    if filters.keywords:
        parts.append(f'"{filters.keywords}"')
    if filters.location:
        parts.append(f"in {filters.location}")

    return " ".join(parts) or "Job search"


def _encode_codes(codes: FilterCodes | None) -> str | None:
    """Comma-join a list of codes, or stringify a positive scalar.

    List members are passed through as given; only an empty list is dropped.
    """
    if codes is None:
        return None
    if isinstance(codes, list):
        return ",".join(str(c) for c in codes) if codes else None
    return str(codes) if codes > 0 else None


def _coerce(filters: JobFilters | Mapping[str, Any]) -> JobFilters:
    if isinstance(filters, JobFilters):
        return filters
    return JobFilters.model_validate(dict(filters))


def _keywords_of(filters: JobFilters | Mapping[str, Any]) -> str:
    if isinstance(filters, JobFilters):
        return filters.keywords
    value = filters.get("keywords")
    return value if isinstance(value, str) else ""
