"""Tests for table key parsing and best-match selection."""

from unittest import mock

import pytest

from courier.core.patterns import parse_key, select_best_match
from courier.errors import CourierError, InvalidTableKey


def _no_children(name: str):
    return None


@pytest.mark.parametrize(
    "key, event_pattern, child_name",
    [
        ("selected", "selected", None),
        ("me* childA", "me*", "childA"),
        ("  padded   child  ", "padded", "child"),
        ("*", "*", None),
    ],
)
def test_parse_key_splits_pattern_and_child(key, event_pattern, child_name):
    parsed = parse_key(key)

    assert parsed.event_pattern == event_pattern
    assert parsed.child_name == child_name


@pytest.mark.parametrize("key", ["", "   ", 3, None, ("a", "b")])
def test_parse_key_rejects_blank_and_non_string_keys(key):
    with pytest.raises(InvalidTableKey):
        parse_key(key)


@pytest.mark.parametrize(
    "pattern, name, matches",
    [
        ("message1", "message1", True),
        ("message1", "message10", False),
        ("message1", "amessage1", False),
        ("me*", "message1", True),
        ("me*", "me", True),
        ("*", "anything_at_all", True),
        ("me*ag*", "message1", True),
        ("*Selected", "contactSelected", True),
        ("me*", "me-ssage", False),
        ("giveInfo!", "giveInfo!", True),
        ("give.nfo", "giveInfo", False),
        ("message1", "message1\n", False),
    ],
)
def test_event_pattern_matches_whole_name(pattern, name, matches):
    assert bool(parse_key(pattern).regex.fullmatch(name)) is matches


def test_specificity_orders_qualifier_before_literal_count():
    assert parse_key("* childA").specificity > parse_key("selected").specificity
    assert parse_key("me*ag*").specificity > parse_key("me*").specificity
    assert parse_key("me*").specificity > parse_key("*").specificity


def test_best_match_prefers_more_literal_characters():
    table = {"*": "any", "me*": "prefix", "me*ag*": "longer"}

    match = select_best_match(table, "message1", object(), _no_children)

    assert match is not None
    assert match.key == "me*ag*"
    assert match.value == "longer"


def test_best_match_first_entry_wins_ties():
    table = {"me*": "first", "*e1": "second"}

    match = select_best_match(table, "message1", object(), _no_children)

    assert match.value == "first"


def test_best_match_returns_none_without_match():
    assert select_best_match({"other": 1}, "message1", object(), _no_children) is None
    assert select_best_match({}, "message1", object(), _no_children) is None


def test_child_qualified_key_requires_source_identity():
    source, other = object(), object()
    children = {"childA": source, "childB": other}
    table = {"selected": "plain", "s* childA": "fromA", "selected childB": "fromB"}

    match = select_best_match(table, "selected", source, children.get)

    assert match.value == "fromA"
    assert match.child_name == "childA"


def test_unknown_child_never_matches():
    table = {"selected ghost": "ghost", "selected": "plain"}

    match = select_best_match(table, "selected", object(), _no_children)

    assert match.value == "plain"


def test_child_lookup_only_happens_after_event_match():
    resolve_child = mock.MagicMock(return_value=None)
    table = {"other childA": 1, "selected childB": 2}

    select_best_match(table, "selected", object(), resolve_child)

    resolve_child.assert_called_once_with("childB")


def test_malformed_key_in_table_raises_courier_error():
    with pytest.raises(CourierError):
        select_best_match({"ok": 1, 7: 2}, "ok", object(), _no_children)
