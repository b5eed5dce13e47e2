"""
Locale-independent character classification.

Characters are grouped into four classes used by character-type splitting
(upper-case letters, lower-case letters, decimal digits and everything
else), and into blank / graph characters used when trimming tokens.
"""

from enum import Enum
from typing import Final

import regex as re

# control, format, surrogate, unassigned and separator categories
_BLANK_CLASS: Final[str] = r"[\p{Cc}\p{Cf}\p{Cs}\p{Cn}\p{Zs}\p{Zl}\p{Zp}]"

_BLANK_RE = re.compile(_BLANK_CLASS)
_LEADING_RE = re.compile(rf"{_BLANK_CLASS}*")
# (?r) searches right to left, starting at the end of the string
_TRAILING_RE = re.compile(rf"(?r){_BLANK_CLASS}+\Z")
_UPPER_RE = re.compile(r"\p{Lu}")
_LOWER_RE = re.compile(r"\p{Ll}")
_DIGIT_RE = re.compile(r"\p{Nd}")


class CharClass(str, Enum):
    """Character classes distinguished by character-type splitting."""

    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    OTHER = "other"


def char_class(ch: str) -> CharClass:
    """Return the class of the single character ``ch``."""
    if _UPPER_RE.match(ch):
        return CharClass.UPPER
    if _LOWER_RE.match(ch):
        return CharClass.LOWER
    if _DIGIT_RE.match(ch):
        return CharClass.DIGIT
    return CharClass.OTHER


def is_blank(ch: str) -> bool:
    """
    Return True if ``ch`` is a blank character.

    Blank characters are control, format, surrogate, unassigned and
    space/line/paragraph separator code points. Every other character is
    a graph character.
    """
    return _BLANK_RE.match(ch) is not None


def is_graph(ch: str) -> bool:
    """Return True if ``ch`` is a visible (non-blank) character."""
    return not is_blank(ch)


def is_whitespace(ch: str) -> bool:
    """Return True if ``ch`` is a whitespace character."""
    return ch.isspace()


def strip_blanks(s: str) -> str:
    """Remove leading and trailing blank characters from ``s``."""
    lo = _LEADING_RE.match(s).end()
    trailing = _TRAILING_RE.search(s, lo)
    hi = trailing.start() if trailing else len(s)
    return s[lo:hi]


__all__ = [
    "CharClass",
    "char_class",
    "is_blank",
    "is_graph",
    "is_whitespace",
    "strip_blanks",
]
