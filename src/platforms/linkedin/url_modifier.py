"""Rewrite the "posted within" filter (f_TPR) of an existing LinkedIn URL.

Pure functions, no network access. Every query parameter other than
f_TPR keeps its position and its existing escapes; characters that are
illegal in a query (such as a raw space) come back percent-encoded.
"""

import logging
import math
import re
from urllib.parse import quote_plus, unquote_plus

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from src.core.errors import InvalidURLFormatError, NotLinkedInDomainError
from src.core.schemas import URLValidation

logger = logging.getLogger(__name__)

RECENCY_PARAM = "f_TPR"
LINKEDIN_DOMAIN = "linkedin.com"
JOB_SEARCH_PATH = "/jobs/search"

NOT_JOB_SEARCH_WARNING = (
    "URL doesn't appear to be a job search page. It will still work, but results may vary."
)

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)
_HTTP_URL = TypeAdapter(AnyHttpUrl)


def modify_linkedin_job_search_url(url: str, seconds: object) -> str:
    """Set f_TPR on a LinkedIn URL, replacing any existing value.

    Args:
        url: LinkedIn URL; ``https://`` is assumed when no scheme is given.
        seconds: Recency window. Floored, and clamped to at least 1;
            non-numeric values count as 0.

    Returns:
        The URL with exactly one ``f_TPR=r<seconds>`` parameter.

    Raises:
        InvalidURLFormatError: If the URL cannot be parsed.
        NotLinkedInDomainError: If the host is not a linkedin.com host.
    """
    fixed_seconds = clamp_seconds(seconds)
    normalized = normalize_url(url)
    parsed = _parse(normalized)

    if not _is_linkedin_host(parsed):
        raise NotLinkedInDomainError

    # Rebuild from the validated URL so the output matches the host that was checked
    base = str(parsed).partition("#")[0].partition("?")[0]
    query = _set_query_param(parsed.query or "", RECENCY_PARAM, f"r{fixed_seconds}")

    result = f"{base}?{query}"
    if parsed.fragment is not None:
        result += f"#{parsed.fragment}"

    logger.debug("Set %s=r%d on %s", RECENCY_PARAM, fixed_seconds, parsed.host)
    return result


def validate_linkedin_url(url: str | None) -> URLValidation:
    """Check a user-supplied URL; never raises.

    A LinkedIn URL outside /jobs/search is still valid but carries a warning.
    """
    if not url or not url.strip():
        return URLValidation(is_valid=False, error="Please enter a URL")

    try:
        parsed = _parse(normalize_url(url))
    except InvalidURLFormatError:
        return URLValidation(is_valid=False, error="Invalid URL format")

    if not _is_linkedin_host(parsed):
        return URLValidation(is_valid=False, error="Not a LinkedIn URL")

    if JOB_SEARCH_PATH not in (parsed.path or ""):
        return URLValidation(is_valid=True, warning=NOT_JOB_SEARCH_WARNING, is_job_search_path=False)

    return URLValidation(is_valid=True, is_job_search_path=True)


def normalize_url(url: str) -> str:
    """Trim and prepend ``https://`` unless an http(s) scheme is present."""
    normalized = url.strip()
    if not _SCHEME_RE.match(normalized):
        normalized = f"https://{normalized}"
    return normalized


def clamp_seconds(seconds: object) -> int:
    """Floor to an integer of at least 1; junk, NaN and infinity count as 0.

    Integers (and integer strings) are used exactly, with no upper bound.
    """
    if isinstance(seconds, int) and not isinstance(seconds, bool):
        return max(1, seconds)
    if isinstance(seconds, str):
        try:
            return max(1, int(seconds.strip()))
        except ValueError:
            pass

    try:
        number = float(seconds)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        number = 0.0
    if not math.isfinite(number):
        number = 0.0
    return max(1, math.floor(number))


def _parse(normalized: str) -> AnyHttpUrl:
    try:
        return _HTTP_URL.validate_python(normalized)
    except ValidationError as e:
        logger.debug("Rejected URL %r: %s", normalized, e.errors()[0]["msg"])
        raise InvalidURLFormatError from e


def _is_linkedin_host(parsed: AnyHttpUrl) -> bool:
    return LINKEDIN_DOMAIN in (parsed.host or "")


def _set_query_param(query: str, name: str, value: str) -> str:
    """Last-write-wins set on a raw query string.

    The first occurrence of ``name`` takes the new value in place, later
    occurrences are dropped, and the parameter is appended if absent.
    Other segments are kept verbatim.
    """
    replacement = f"{quote_plus(name)}={quote_plus(value)}"
    segments: list[str] = []
    occurrences = 0

    for segment in query.split("&"):
        if not segment:
            continue
        if unquote_plus(segment.partition("=")[0]) != name:
            segments.append(segment)
            continue
        if occurrences == 0:
            segments.append(replacement)
        occurrences += 1

    if occurrences == 0:
        segments.append(replacement)
    elif occurrences > 1:
        logger.debug("Collapsed %d %s parameters into one", occurrences, name)

    return "&".join(segments)
