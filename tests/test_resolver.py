from __future__ import annotations

import pytest

from core.domain.models import Activity
from core.errors import InvalidPatternError, NotFoundError
from core.services.resolver import ActivityResolver


def _catalog(*pairs: tuple[str, str]) -> tuple[Activity, ...]:
    return tuple(Activity(id=activity_id, name=name) for activity_id, name in pairs)


def test_first_match_in_catalog_order_wins() -> None:
    catalog = _catalog(("1", "Code Review"), ("2", "Code"))

    activity = ActivityResolver().resolve(catalog, "code")

    assert activity == Activity(id="1", name="Code Review")


def test_tie_break_ignores_name_and_id_ordering() -> None:
    catalog = _catalog(("9", "zeta planning"), ("1", "Alpha planning"), ("5", "planning"))

    activity = ActivityResolver().resolve(catalog, "PLANNING")

    assert activity.id == "9"


def test_single_match_is_returned() -> None:
    catalog = _catalog(("1", "Coding"), ("2", "Meeting"), ("3", "Lunch"))

    assert ActivityResolver().resolve(catalog, "meet").id == "2"


def test_match_is_unanchored_and_case_insensitive() -> None:
    catalog = _catalog(("1", "Weekly SYNC call"))

    assert ActivityResolver().resolve(catalog, "sync").id == "1"
    assert ActivityResolver().resolve(catalog, "^weekly").id == "1"


def test_regex_syntax_is_honoured() -> None:
    catalog = _catalog(("1", "Coding"), ("2", "Meeting"), ("3", "Mentoring"))

    assert ActivityResolver().resolve(catalog, "^me.*ing$").id == "2"
    assert ActivityResolver().resolve(catalog, "ment|lunch").id == "3"


def test_no_match_raises_not_found() -> None:
    catalog = _catalog(("1", "Meeting"))

    with pytest.raises(NotFoundError):
        ActivityResolver().resolve(catalog, "xyz")


def test_empty_catalog_raises_not_found() -> None:
    with pytest.raises(NotFoundError):
        ActivityResolver().resolve((), "anything")


def test_invalid_pattern_raises() -> None:
    with pytest.raises(InvalidPatternError):
        ActivityResolver().resolve(_catalog(("1", "Meeting")), "(unclosed")


def test_compile_accepts_precompiled_pattern() -> None:
    resolver = ActivityResolver()
    regex = resolver.compile("ting")

    assert resolver.resolve(_catalog(("1", "Coding"), ("2", "Meeting")), regex).id == "2"


def test_catalog_is_not_reordered() -> None:
    catalog = _catalog(("2", "b task"), ("1", "a task"))

    ActivityResolver().resolve(catalog, "task")

    assert [activity.id for activity in catalog] == ["2", "1"]
