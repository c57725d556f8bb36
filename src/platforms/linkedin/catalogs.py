"""LinkedIn filter catalogs and "posted within" presets.

Read-only, process-wide constants. Codes are the values LinkedIn expects
in the ``f_WT``, ``f_WRA``, ``f_E`` and ``sortBy`` query parameters.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from src.core.schemas import FilterOption, TimePreset

logger = logging.getLogger(__name__)

JOB_TYPES: Mapping[str, FilterOption] = MappingProxyType({
    "FULL_TIME": FilterOption(value=1, label="Full-time"),
    "PART_TIME": FilterOption(value=2, label="Part-time"),
    "CONTRACT": FilterOption(value=3, label="Contract"),
    "TEMPORARY": FilterOption(value=4, label="Temporary"),
    "INTERNSHIP": FilterOption(value=5, label="Internship"),
    "VOLUNTEER": FilterOption(value=6, label="Volunteer"),
})

WORK_MODES: Mapping[str, FilterOption] = MappingProxyType({
    "REMOTE": FilterOption(value=1, label="Remote"),
    "ON_SITE": FilterOption(value=2, label="On-site"),
    "HYBRID": FilterOption(value=3, label="Hybrid"),
})

EXPERIENCE_LEVELS: Mapping[str, FilterOption] = MappingProxyType({
    "INTERNSHIP": FilterOption(value=1, label="Internship"),
    "ENTRY_LEVEL": FilterOption(value=2, label="Entry level"),
    "ASSOCIATE": FilterOption(value=3, label="Associate"),
    "MID_SENIOR": FilterOption(value=4, label="Mid-Senior level"),
    "DIRECTOR": FilterOption(value=5, label="Director"),
    "EXECUTIVE": FilterOption(value=6, label="Executive"),
})

SORT_OPTIONS: Mapping[str, FilterOption] = MappingProxyType({
    "RECENT": FilterOption(value="DD", label="Most recent"),
    "RELEVANCE": FilterOption(value="R", label="Most relevant"),
})

TIME_PRESETS: tuple[TimePreset, ...] = (
    TimePreset(label="15m", seconds=900),
    TimePreset(label="30m", seconds=1800),
    TimePreset(label="1h", seconds=3600),
    TimePreset(label="2h", seconds=7200),
    TimePreset(label="6h", seconds=21600),
    TimePreset(label="12h", seconds=43200),
    TimePreset(label="24h", seconds=86400),
    TimePreset(label="3d", seconds=259200),
    TimePreset(label="7d", seconds=604800),
)


def get_time_preset(label: str) -> TimePreset:
    """Return the preset for a label such as "24h".

    Raises:
        ValueError: If no preset carries that label.
    """
    key = label.lower().strip()
    for preset in TIME_PRESETS:
        if preset.label == key:
            return preset
    valid = ", ".join(p.label for p in TIME_PRESETS)
    msg = f"Unknown time preset '{label}'. Available: {valid}"
    raise ValueError(msg)


def resolve_option(catalog: Mapping[str, FilterOption], name: str) -> int | str | None:
    """Map a user-facing catalog name to its LinkedIn code.

    Accepts the symbolic name in any case with ``-``/space/``_`` separators
    ("remote", "mid-senior", "Full time"), the label ("Mid-Senior level"),
    or the code itself ("4"). Unknown names are logged and return None.
    """
    raw = name.strip()
    key = raw.upper().replace("-", "_").replace(" ", "_")

    option = catalog.get(key)
    if option is None:
        option = next(
            (o for o in catalog.values() if o.label.lower() == raw.lower() or str(o.value) == raw),
            None,
        )
    if option is None:
        logger.warning("Unknown filter value '%s', skipping", name)
        return None
    return option.value
