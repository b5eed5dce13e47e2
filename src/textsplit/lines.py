"""Splitting text into lines."""

import logging

from .delimiter import LineBreak
from .options import SplitOption
from .tokenizer import split
from .types import Tokens

log = logging.getLogger(__name__)

LINE_TERMINATORS = ("\r\n", "\n", "\r")


def split_lines(
    source: str | None,
    *,
    trim: bool = False,
    ignore_empty: bool = False,
    drop_trailing_empty: bool = False,
    output: Tokens | None = None,
) -> Tokens:
    """
    Split ``source`` on ``\\r\\n``, ``\\n`` and ``\\r`` line terminators.

    :param trim: Strip blank characters from both ends of every line.
    :param ignore_empty: Drop every line that is empty (after trimming).
    :param drop_trailing_empty: Drop the empty line produced when ``source``
                                ends with a terminator (and the single empty
                                line of ``""``).
    :param output: List to append lines to; its contents are kept.
    """
    result: Tokens = [] if output is None else output
    if source is None:
        return result

    options = SplitOption.NONE
    if trim:
        options |= SplitOption.TRIM
    if ignore_empty:
        options |= SplitOption.IGNORE_EMPTY

    mark = len(result)
    split(source, LineBreak(), options, output=result)

    if drop_trailing_empty and _ends_on_terminator(source):
        # with ignore_empty the trailing line was never appended
        if len(result) > mark and result[-1] == "" and not ignore_empty:
            log.debug("dropping trailing empty line")
            result.pop()
    return result


def _ends_on_terminator(source: str) -> bool:
    return not source or source.endswith(LINE_TERMINATORS)


__all__ = ["LINE_TERMINATORS", "split_lines"]
