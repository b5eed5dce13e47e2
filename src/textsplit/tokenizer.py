"""
Splitting engine.

:func:`split` scans a source string left to right, asking the delimiter
model for a match at each position, and emits the text between matches
as tokens. The pending token is always emitted after the scan, so a
trailing delimiter produces a trailing empty token.
"""

import logging
from collections.abc import Iterable

from .chars import is_blank, is_whitespace, strip_blanks
from .delimiter import (
    CharClassTransition,
    CharPredicate,
    CharSet,
    DelimiterModel,
    SingleChar,
    Substring,
    class_boundaries,
    match_at,
    to_delimiter,
)
from .options import SplitOption
from .types import Token, Tokens

log = logging.getLogger(__name__)


def split(
    source: str | None,
    delimiter: DelimiterModel | str | None,
    options: SplitOption | int = SplitOption.NONE,
    *,
    start: int | None = None,
    end: int | None = None,
    output: Tokens | None = None,
) -> Tokens:
    """
    Split ``source`` into tokens separated by ``delimiter``.

    :param source: Text to split; ``None`` yields no tokens, ``""`` yields
                   one empty token (unless ``IGNORE_EMPTY`` is set).
    :param delimiter: A delimiter model, or a string coerced by
                      :func:`~textsplit.delimiter.to_delimiter`.
    :param options: ``TRIM`` strips blank characters from each token, then
                    ``IGNORE_EMPTY`` drops empty tokens. ``CAMEL_CASE``
                    applies to character-type splitting only.
    :param start: Inclusive start of the range to split; negative clamps to 0.
    :param end: Exclusive end of the range; values past the end clamp to
                ``len(source)``. An empty clamped range yields no tokens.
    :param output: List to append tokens to; its contents are kept.
    :returns: ``output`` (or a new list) with the tokens appended.
    """
    result: Tokens = [] if output is None else output
    if source is None:
        log.debug("split called with None source, no tokens produced")
        return result

    model = to_delimiter(delimiter)
    options = SplitOption(options)
    trim = SplitOption.TRIM in options
    ignore_empty = SplitOption.IGNORE_EMPTY in options
    if isinstance(model, CharClassTransition) and SplitOption.CAMEL_CASE in options:
        model = CharClassTransition(camel_case=True)

    lo, hi = _clamp_range(len(source), start, end)
    if (start is not None or end is not None) and lo >= hi:
        log.debug(f"empty split range [{start}, {end}) over {len(source)} chars")
        return result

    token_start = lo
    if isinstance(model, CharClassTransition):
        for pos in class_boundaries(source, lo, hi, model.camel_case):
            _emit(source[token_start:pos], trim, ignore_empty, result)
            token_start = pos
    else:
        pos = lo
        while pos < hi:
            width = match_at(model, source, pos, hi)
            # a boundary at the start of the current token would emit nothing
            if width is None or (width == 0 and pos == token_start):
                pos += 1
                continue
            _emit(source[token_start:pos], trim, ignore_empty, result)
            if width == 0:
                token_start = pos
                pos += 1
            else:
                pos += width
                token_start = pos

    _emit(source[token_start:hi], trim, ignore_empty, result)
    return result


def _clamp_range(length: int, start: int | None, end: int | None) -> tuple[int, int]:
    lo = 0 if start is None else max(0, start)
    hi = length if end is None else min(length, end)
    return lo, hi


def _emit(token: Token, trim: bool, ignore_empty: bool, output: Tokens) -> None:
    if trim:
        token = strip_blanks(token)
    if ignore_empty and not token:
        return
    output.append(token)


# convenience wrappers
# =========================================================================================


def split_by_char(
    source: str | None,
    char: str,
    options: SplitOption | int = SplitOption.NONE,
    *,
    start: int | None = None,
    end: int | None = None,
    output: Tokens | None = None,
) -> Tokens:
    """Split ``source`` on every occurrence of the single character ``char``."""
    return split(source, SingleChar(char), options, start=start, end=end, output=output)


def split_by_chars(
    source: str | None,
    chars: str | Iterable[str] | None,
    options: SplitOption | int = SplitOption.NONE,
    *,
    start: int | None = None,
    end: int | None = None,
    output: Tokens | None = None,
) -> Tokens:
    """
    Split ``source`` on any character contained in ``chars``.

    ``None`` or empty ``chars`` never match, so ``source`` is returned as
    a single token.
    """
    return split(source, CharSet(chars), options, start=start, end=end, output=output)


def split_by_substring(
    source: str | None,
    separator: str | None,
    options: SplitOption | int = SplitOption.NONE,
    *,
    ignore_case: bool = False,
    output: Tokens | None = None,
) -> Tokens:
    """
    Split ``source`` on a literal substring.

    Matches are leftmost and non-overlapping. An empty or ``None``
    separator leaves ``source`` as a single token.
    """
    if not separator:
        log.debug("empty substring separator, source kept as a single token")
    return split(source, Substring(separator, ignore_case), options, output=output)


def split_by_char_type(
    source: str | None,
    options: SplitOption | int = SplitOption.NONE,
    *,
    output: Tokens | None = None,
) -> Tokens:
    """
    Split ``source`` into runs of upper-case, lower-case and digit characters.

    Every other character becomes a token of its own. With ``CAMEL_CASE``
    the upper-case letter before a lower-case run starts a new token:

    .. code-block:: python

        split_by_char_type("ASFRules")                         # ["ASFR", "ules"]
        split_by_char_type("ASFRules", SplitOption.CAMEL_CASE)  # ["ASF", "Rules"]
        split_by_char_type("foo2000Bar")                       # ["foo", "2000", "B", "ar"]
    """
    return split(source, CharClassTransition(), options, output=output)


def split_whitespace(
    source: str | None,
    options: SplitOption | int = SplitOption.NONE,
    *,
    output: Tokens | None = None,
) -> Tokens:
    """Split ``source`` on whitespace; empty tokens are always dropped."""
    options = SplitOption(options) | SplitOption.IGNORE_EMPTY
    return split(source, CharPredicate(is_whitespace), options, output=output)


def split_blanks(
    source: str | None,
    options: SplitOption | int = SplitOption.NONE,
    *,
    output: Tokens | None = None,
) -> Tokens:
    """Split ``source`` on blank characters; empty tokens are always dropped."""
    options = SplitOption(options) | SplitOption.IGNORE_EMPTY
    return split(source, CharPredicate(is_blank), options, output=output)


def split_chars(
    source: str | None,
    options: SplitOption | int = SplitOption.NONE,
    *,
    output: Tokens | None = None,
) -> Tokens:
    """
    Split ``source`` into one token per character.

    With ``TRIM`` a blank character becomes an empty token, which
    ``IGNORE_EMPTY`` then drops.
    """
    result: Tokens = [] if output is None else output
    if source is None:
        return result
    options = SplitOption(options)
    trim = SplitOption.TRIM in options
    ignore_empty = SplitOption.IGNORE_EMPTY in options
    if not source:
        _emit("", trim, ignore_empty, result)
        return result
    for ch in source:
        _emit(ch, trim, ignore_empty, result)
    return result


__all__ = [
    "split",
    "split_by_char",
    "split_by_chars",
    "split_by_substring",
    "split_by_char_type",
    "split_whitespace",
    "split_blanks",
    "split_chars",
]
