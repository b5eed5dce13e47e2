"""Unit tests for the fluent Splitter and splitter presets."""

import pytest

import textsplit as tsp
from textsplit import SplitOption, Splitter, SplitStrategy
from textsplit.errors import InvalidArgumentError, StrategyError


# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def comma_splitter():
    """Return a splitter on commas that trims and drops empties."""
    return Splitter().by_char(",").strip(True).ignore_empty(True)


# Strategies
# ---------------------------------------------------------------------------


def test_split_without_strategy_raises():
    """A splitter with no strategy cannot split."""
    with pytest.raises(StrategyError):
        Splitter().split("a,b")


def test_by_char(comma_splitter):
    """Options set on the splitter apply to every token."""
    assert comma_splitter.split(" a, ,b") == ["a", "b"]
    assert comma_splitter.split(None) == []
    assert comma_splitter.options == SplitOption.TRIM | SplitOption.IGNORE_EMPTY


def test_by_chars_in_and_not_in():
    """Character membership and its complement select delimiters."""
    assert Splitter().by_chars_in(",;").split("a,b;c") == ["a", "b", "c"]
    assert Splitter().by_chars_not_in("abc").split("aXbYc") == ["a", "b", "c"]


def test_by_chars_not_in_none_excludes_nothing():
    """With no members every character is a delimiter."""
    assert Splitter().by_chars_not_in(None).split("ab") == ["", "", ""]


def test_by_chars_not_in_rejects_non_iterable():
    """The complement set is validated like a char set."""
    with pytest.raises(InvalidArgumentError):
        Splitter().by_chars_not_in(5)


def test_by_chars_satisfy():
    """A predicate selects delimiter characters."""
    assert Splitter().by_chars_satisfy(str.isdigit).split("a1b22c") == ["a", "b", "", "c"]


def test_by_substring_ignore_case():
    """ignore_case only changes substring matching."""
    assert Splitter().by_substring("AND").split("xandyANDz") == ["xandy", "z"]
    assert Splitter().by_substring("AND").ignore_case(True).split("xandyANDz") == [
        "x",
        "y",
        "z",
    ]


def test_by_whitespaces_always_drops_empty():
    """Whitespace splitting drops empties even when ignore_empty is off."""
    assert Splitter().by_whitespaces().ignore_empty(False).split(" a  b ") == ["a", "b"]
    assert Splitter().by_blanks().split("a\x00b") == ["a", "b"]


def test_by_char_types():
    """Character-type splitting honours camel_case."""
    assert Splitter().by_char_types().split("fooBar") == ["foo", "B", "ar"]
    assert Splitter().by_char_types().camel_case(True).split("fooBar") == ["foo", "Bar"]


def test_to_lines():
    """Line splitting drops the empty line after a final terminator."""
    assert Splitter().to_lines().split("a\nb\n") == ["a", "b"]
    assert Splitter().to_lines().split("") == [""]
    assert Splitter().to_lines().ignore_empty(True).split("") == []
    assert Splitter().to_lines().strip(True).split(" a \r\n b") == ["a", "b"]


def test_to_chars():
    """Each character becomes a token."""
    assert Splitter().to_chars().split("ab") == ["a", "b"]


def test_later_strategy_replaces_earlier():
    """Selecting a strategy replaces the previous one."""
    splitter = Splitter().by_char(",").by_char(";")
    assert splitter.strategy is SplitStrategy.CHAR
    assert splitter.split("a,b;c") == ["a,b", "c"]


def test_output_list_is_appended(comma_splitter):
    """Tokens are appended to a caller-supplied list."""
    out = ["x"]
    assert comma_splitter.split("a,b", out) is out
    assert out == ["x", "a", "b"]


# Strategy names and presets
# ---------------------------------------------------------------------------


def test_strategy_get():
    """Strategy names resolve case-insensitively."""
    assert SplitStrategy.get("char-types") is SplitStrategy.CHAR_TYPES
    assert SplitStrategy.get("LINES") is SplitStrategy.LINES
    with pytest.raises(StrategyError):
        SplitStrategy.get("regex")


def test_presets():
    """Presets return ready-to-use splitters."""
    assert tsp.get_splitter("camel-case").split("parseHTTPResponse") == [
        "parse",
        "HTTP",
        "Response",
    ]
    assert tsp.get_splitter("CSV").split("a,b") == ["a", "b"]
    assert tsp.get_splitter("words").split("  hello\tworld ") == ["hello", "world"]
    assert tsp.get_splitter("char_types").split("a1") == ["a", "1"]


def test_presets_are_independent():
    """Each call creates a fresh splitter."""
    first = tsp.get_splitter("csv").strip(True)
    second = tsp.get_splitter("csv")
    assert first is not second
    assert second.split(" a ") == [" a "]


def test_unknown_preset_raises():
    """Unknown preset names raise StrategyError listing the presets."""
    with pytest.raises(StrategyError) as exc_info:
        tsp.get_splitter("nope")
    assert exc_info.value.invalid_name == "nope"
    assert exc_info.value.available == tsp.list_splitters()
