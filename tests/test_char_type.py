"""Unit tests for character-type splitting and the character classifier."""

import pytest

import textsplit as tsp
from textsplit import CharClass, SplitOption

NONE = SplitOption.NONE
TRIM = SplitOption.TRIM
IGNORE_EMPTY = SplitOption.IGNORE_EMPTY
CAMEL_CASE = SplitOption.CAMEL_CASE


# Classifier
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("A", CharClass.UPPER),
        ("É", CharClass.UPPER),
        ("z", CharClass.LOWER),
        ("ß", CharClass.LOWER),
        ("7", CharClass.DIGIT),
        ("٣", CharClass.DIGIT),
        (" ", CharClass.OTHER),
        ("_", CharClass.OTHER),
        ("中", CharClass.OTHER),
    ],
)
def test_char_class(ch, expected):
    """Letters classify by case, decimal digits as DIGIT, the rest as OTHER."""
    assert tsp.char_class(ch) is expected


def test_blank_and_graph():
    """Control, format and separator characters are blank."""
    for ch in [" ", "\t", "\n", "\x00", "\u00a0", "\u200b", "\u2028", "\u007f"]:
        assert tsp.is_blank(ch), repr(ch)
        assert not tsp.is_graph(ch), repr(ch)
    for ch in ["a", ".", "中", "€"]:
        assert tsp.is_graph(ch), repr(ch)


def test_strip_blanks():
    """Only leading and trailing blanks are removed."""
    assert tsp.strip_blanks("\t a b  \n") == "a b"
    assert tsp.strip_blanks(" \t\n") == ""
    assert tsp.strip_blanks("") == ""
    assert tsp.strip_blanks("  a") == "a"
    assert tsp.strip_blanks("a\u2028") == "a"


def test_strip_blanks_long_runs():
    """Long interior and outer blank runs strip in one pass."""
    inner = "a" + " " * 200_000 + "b"
    assert tsp.strip_blanks(inner) == inner
    assert tsp.strip_blanks("\t" * 100_000 + inner + "\n" * 100_000) == inner
    assert tsp.strip_blanks(" " * 200_000) == ""


# Character-type splitting
# ---------------------------------------------------------------------------


def test_none_and_empty_sources():
    """None gives no tokens; "" gives one empty token unless ignored."""
    assert tsp.split_by_char_type(None) == []
    assert tsp.split_by_char_type("", IGNORE_EMPTY) == []
    assert tsp.split_by_char_type("") == [""]


@pytest.mark.parametrize(
    "options, expected",
    [
        (NONE, ["ab", " ", "de", " ", "fg"]),
        (IGNORE_EMPTY, ["ab", " ", "de", " ", "fg"]),
        (TRIM, ["ab", "", "de", "", "fg"]),
        (TRIM | IGNORE_EMPTY, ["ab", "de", "fg"]),
    ],
)
def test_spaces_with_options(options, expected):
    """Trim and ignore-empty apply uniformly to character-type tokens."""
    assert tsp.split_by_char_type("ab de fg", options) == expected


def test_other_characters_never_coalesce():
    """Each punctuation or whitespace character is a token of its own."""
    assert tsp.split_by_char_type("ab   de fg") == ["ab", " ", " ", " ", "de", " ", "fg"]
    assert tsp.split_by_char_type("ab:de:fg") == ["ab", ":", "de", ":", "fg"]
    assert tsp.split_by_char_type("a..b") == ["a", ".", ".", "b"]


@pytest.mark.parametrize(
    "source, default, camel",
    [
        ("number5", ["number", "5"], ["number", "5"]),
        ("fooBar", ["foo", "B", "ar"], ["foo", "Bar"]),
        ("foo2000Bar", ["foo", "2000", "B", "ar"], ["foo", "2000", "Bar"]),
        ("ASFRules", ["ASFR", "ules"], ["ASF", "Rules"]),
        ("parseHTTPResponse", ["parse", "HTTPR", "esponse"], ["parse", "HTTP", "Response"]),
        ("ABC1x", ["ABC", "1", "x"], ["ABC", "1", "x"]),
        ("ÉcoleNormale", ["É", "cole", "N", "ormale"], ["École", "Normale"]),
        ("abc١٢٣", ["abc", "١٢٣"], ["abc", "١٢٣"]),
    ],
)
def test_camel_case(source, default, camel):
    """Camel case moves the last upper-case letter into the following lower-case run."""
    assert tsp.split_by_char_type(source) == default
    assert tsp.split_by_char_type(source, CAMEL_CASE) == camel


def test_camel_case_model_field_matches_option():
    """The model's camel_case field and the CAMEL_CASE option are equivalent."""
    model = tsp.CharClassTransition(camel_case=True)
    assert tsp.split("ASFRules", model) == tsp.split_by_char_type("ASFRules", CAMEL_CASE)


def test_camel_case_option_ignored_by_other_models():
    """CAMEL_CASE has no effect outside character-type splitting."""
    assert tsp.split("fooBar,x", ",", CAMEL_CASE) == ["fooBar", "x"]


def test_range_start_is_not_a_boundary():
    """A class change at the start of a range does not emit an empty token."""
    assert tsp.split("ABfoo", tsp.CharClassTransition(), start=2) == ["foo"]
    assert tsp.split("xxfooBar", tsp.CharClassTransition(), start=2) == ["foo", "B", "ar"]


def test_class_boundaries():
    """Boundaries are yielded in order and never at the range start."""
    assert list(tsp.class_boundaries("parseHTTPResponse", 0, 17)) == [5, 10]
    assert list(tsp.class_boundaries("parseHTTPResponse", 0, 17, True)) == [5, 9]
    assert list(tsp.class_boundaries("xxfooBar", 2, 8)) == [5, 6]
    assert list(tsp.class_boundaries("a b", 0, 3)) == [1, 2]
    assert list(tsp.class_boundaries("", 0, 0)) == []


def test_class_boundaries_agree_with_match_at():
    """The scan reports exactly the positions match_at sees as zero-width matches."""
    text = "ASFRules parseHTTPResponse foo2000Bar ÉcoleNormale x.y"
    for camel_case in (False, True):
        model = tsp.CharClassTransition(camel_case=camel_case)
        expected = [
            pos for pos in range(1, len(text)) if tsp.match_at(model, text, pos) == 0
        ]
        assert list(tsp.class_boundaries(text, 0, len(text), camel_case)) == expected


def test_char_type_long_source():
    """Character-type splitting handles long single-class runs."""
    text = "a" * 100_000 + "B" + "c" * 100_000
    assert tsp.split_by_char_type(text) == ["a" * 100_000, "B", "c" * 100_000]
    assert tsp.split_by_char_type(text, CAMEL_CASE) == ["a" * 100_000, "B" + "c" * 100_000]
