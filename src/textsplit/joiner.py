"""
Joining values into strings.

:func:`join` is the inverse of splitting: under default options,
``join(sep, split(s, sep)) == s`` whenever no token contains ``sep``.
Unlike splitting, a ``None`` source yields ``None`` rather than an empty
result, so callers can tell "no data" apart from "no values".
"""

import logging
from collections.abc import Iterable, Sequence
from itertools import islice
from typing import Any

from .errors import InvalidArgumentError

log = logging.getLogger(__name__)


def join(
    separator: str | None,
    source: Iterable[Any] | None,
    start: int | None = None,
    end: int | None = None,
) -> str | None:
    """
    Join the elements of ``source`` with ``separator``.

    Elements are rendered with ``str()``; ``None`` elements render as the
    empty string.

    :param separator: Text placed between elements; ``None`` means ``""``.
    :param source: A sequence, iterable or iterator of values.
    :param start: Index of the first element to join; negative clamps to 0.
    :param end: Index past the last element to join; clamps to the length.
                An empty or inverted range joins to ``""``.
    :returns: The joined string, or ``None`` if ``source`` is ``None``.
    :raises InvalidArgumentError: If ``source`` is a string or not iterable.
    """
    if source is None:
        log.debug("join called with None source")
        return None
    sep = "" if separator is None else str(separator)
    return sep.join(_render(value) for value in _select(source, start, end))


def _render(value: Any) -> str:
    return "" if value is None else str(value)


def _select(source: Iterable[Any], start: int | None, end: int | None) -> Iterable[Any]:
    """Return the elements of ``source`` within the clamped ``[start, end)`` range."""
    if isinstance(source, (str, bytes, bytearray)) or not isinstance(source, Iterable):
        raise InvalidArgumentError(
            "source must be a non-string iterable", name="source", value=source
        )
    lo = 0 if start is None else max(0, start)
    if isinstance(source, Sequence):
        hi = len(source) if end is None else min(len(source), end)
        return (source[i] for i in range(lo, hi))
    # iterators are consumed lazily; slicing past their end simply stops
    if end is not None and end <= lo:
        return ()
    return islice(source, lo, end)


class Joiner:
    """
    Incrementally builds a joined string.

    .. code-block:: python

        Joiner(", ", prefix="[", suffix="]").add_all([1, None, 3]).to_string()
        # "[1, , 3]"
        Joiner(",").ignore_null().add(None).to_string()
        # None
    """

    def __init__(
        self,
        separator: str | None = None,
        prefix: str | None = None,
        suffix: str | None = None,
    ) -> None:
        """Initialize with a separator and optional prefix and suffix (``None`` means ``""``)."""
        self.separator = "" if separator is None else str(separator)
        self.prefix = prefix or ""
        self.suffix = suffix or ""
        self._ignore_null = False
        self._null_text = ""
        # stays None until something is added, so to_string() can report "no data"
        self._values: list[str] | None = None

    def ignore_null(self, ignore_null: bool = True) -> "Joiner":
        """Set whether ``None`` values are skipped instead of rendered."""
        self._ignore_null = ignore_null
        return self

    def null_text(self, text: str) -> "Joiner":
        """
        Set the text rendered for ``None`` values.

        :raises InvalidArgumentError: If ``text`` is ``None``.
        """
        if text is None:
            raise InvalidArgumentError("null text cannot be None", name="text", value=text)
        self._null_text = text
        return self

    def add(self, value: Any) -> "Joiner":
        """Append a single value."""
        self._add(value)
        return self

    def add_all(
        self,
        values: Iterable[Any] | None,
        start: int | None = None,
        end: int | None = None,
    ) -> "Joiner":
        """
        Append the values of ``values`` within the clamped ``[start, end)`` range.

        ``None`` is ignored; any other iterable, even an empty one, marks
        the joiner as having data.
        """
        if values is None:
            return self
        selected = _select(values, start, end)
        self._ensure_values()
        for value in selected:
            self._add(value)
        return self

    def to_string(self) -> str | None:
        """Return the joined string, or ``None`` if nothing was ever added."""
        if self._values is None:
            return None
        return self.prefix + self.separator.join(self._values) + self.suffix

    def __str__(self) -> str:
        return self.to_string() or ""

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(separator={self.separator!r}, "
            f"prefix={self.prefix!r}, suffix={self.suffix!r})"
        )

    def _ensure_values(self) -> list[str]:
        if self._values is None:
            self._values = []
        return self._values

    def _add(self, value: Any) -> None:
        if value is None:
            if not self._ignore_null:
                self._ensure_values().append(self._null_text)
        else:
            self._ensure_values().append(str(value))


__all__ = ["join", "Joiner"]
