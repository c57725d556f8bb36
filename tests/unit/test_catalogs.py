"""Tests for filter catalogs, time presets and name resolution."""

import pytest

from src.platforms.linkedin.catalogs import (
    EXPERIENCE_LEVELS,
    JOB_TYPES,
    SORT_OPTIONS,
    TIME_PRESETS,
    WORK_MODES,
    get_time_preset,
    resolve_option,
)


class TestCatalogValues:
    def test_job_types(self) -> None:
        assert {k: v.value for k, v in JOB_TYPES.items()} == {
            "FULL_TIME": 1,
            "PART_TIME": 2,
            "CONTRACT": 3,
            "TEMPORARY": 4,
            "INTERNSHIP": 5,
            "VOLUNTEER": 6,
        }
        assert JOB_TYPES["FULL_TIME"].label == "Full-time"

    def test_work_modes(self) -> None:
        assert WORK_MODES["REMOTE"].value == 1
        assert WORK_MODES["ON_SITE"].value == 2
        assert WORK_MODES["HYBRID"].value == 3
        assert WORK_MODES["ON_SITE"].label == "On-site"

    def test_experience_levels(self) -> None:
        assert [o.value for o in EXPERIENCE_LEVELS.values()] == [1, 2, 3, 4, 5, 6]
        assert EXPERIENCE_LEVELS["MID_SENIOR"].label == "Mid-Senior level"

    def test_sort_options(self) -> None:
        assert SORT_OPTIONS["RECENT"].value == "DD"
        assert SORT_OPTIONS["RELEVANCE"].value == "R"

    def test_catalogs_read_only(self) -> None:
        with pytest.raises(TypeError):
            JOB_TYPES["NEW"] = JOB_TYPES["FULL_TIME"]  # type: ignore[index]


class TestTimePresets:
    def test_span_and_order(self) -> None:
        seconds = [p.seconds for p in TIME_PRESETS]
        assert seconds[0] == 900
        assert seconds[-1] == 604800
        assert seconds == sorted(seconds)

    def test_labels(self) -> None:
        assert [p.label for p in TIME_PRESETS] == [
            "15m", "30m", "1h", "2h", "6h", "12h", "24h", "3d", "7d",
        ]

    def test_get_preset(self) -> None:
        assert get_time_preset("24h").seconds == 86400
        assert get_time_preset(" 7D ").seconds == 604800

    def test_unknown_preset(self) -> None:
        with pytest.raises(ValueError, match="Unknown time preset '5h'"):
            get_time_preset("5h")


class TestResolveOption:
    def test_symbolic_names(self) -> None:
        assert resolve_option(WORK_MODES, "remote") == 1
        assert resolve_option(WORK_MODES, "on-site") == 2
        assert resolve_option(EXPERIENCE_LEVELS, "mid-senior") == 4
        assert resolve_option(JOB_TYPES, "Full time") == 1

    def test_label(self) -> None:
        assert resolve_option(EXPERIENCE_LEVELS, "Entry level") == 2

    def test_code(self) -> None:
        assert resolve_option(JOB_TYPES, "3") == 3
        assert resolve_option(SORT_OPTIONS, "DD") == "DD"

    def test_unknown_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        assert resolve_option(WORK_MODES, "mars-office") is None
        assert "Unknown filter value 'mars-office'" in caplog.text
