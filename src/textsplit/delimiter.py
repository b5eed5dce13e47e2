"""
Delimiter models for splitting.

A delimiter model is one of a closed set of frozen dataclasses. Matching
is dispatched on the variant with ``match`` in :func:`match_at`.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TypeAlias

from .chars import CharClass, char_class
from .errors import InvalidArgumentError
from .types import CharPredicateFn


@dataclass(frozen=True)
class SingleChar:
    """Delimiter is exactly one character."""

    char: str

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise InvalidArgumentError(
                "delimiter must be a single character", name="char", value=self.char
            )


@dataclass(frozen=True)
class CharSet:
    """
    Delimiter is any character in a set.

    ``chars`` may be a string or an iterable of single characters; ``None``
    or an empty set never matches.
    """

    chars: frozenset[str] = field(default_factory=frozenset)

    def __init__(self, chars: str | Iterable[str] | None = None) -> None:
        try:
            members = frozenset(chars) if chars is not None else frozenset()
        except TypeError:
            raise InvalidArgumentError(
                "delimiter set must be a string or an iterable of characters",
                name="chars",
                value=chars,
            )
        for ch in members:
            if not isinstance(ch, str) or len(ch) != 1:
                raise InvalidArgumentError(
                    "delimiter set members must be single characters",
                    name="chars",
                    value=ch,
                )
        object.__setattr__(self, "chars", members)


@dataclass(frozen=True)
class Substring:
    """
    Delimiter is a literal substring.

    An empty or ``None`` needle means "no delimiter": the whole source is
    one token.
    """

    needle: str = ""
    ignore_case: bool = False

    def __init__(self, needle: str | None = None, ignore_case: bool = False) -> None:
        object.__setattr__(self, "needle", needle or "")
        object.__setattr__(self, "ignore_case", ignore_case)


@dataclass(frozen=True)
class CharClassTransition:
    """Zero-width delimiter between adjacent characters of different class."""

    camel_case: bool = False


@dataclass(frozen=True)
class LineBreak:
    """Delimiter is a line terminator: ``\\r\\n``, ``\\n`` or ``\\r``."""


@dataclass(frozen=True)
class CharPredicate:
    """Delimiter is any character accepted by ``predicate``."""

    predicate: CharPredicateFn


DelimiterModel: TypeAlias = (
    SingleChar | CharSet | Substring | CharClassTransition | LineBreak | CharPredicate
)


def to_delimiter(value: "DelimiterModel | str | None") -> "DelimiterModel":
    """
    Coerce a plain value into a delimiter model.

    A one-character string becomes :class:`SingleChar`; any other string
    (or ``None``) becomes :class:`Substring`. Models pass through.
    """
    match value:
        case (
            SingleChar()
            | CharSet()
            | Substring()
            | CharClassTransition()
            | LineBreak()
            | CharPredicate()
        ):
            return value
        case str() if len(value) == 1:
            return SingleChar(value)
        case str() | None:
            return Substring(value)
    raise InvalidArgumentError(
        "delimiter must be a string or a delimiter model", name="delimiter", value=value
    )


def match_at(
    model: DelimiterModel, source: str, pos: int, end: int | None = None
) -> int | None:
    """
    Match ``model`` against ``source`` at ``pos``.

    :param end: Exclusive bound a match may not cross (default: ``len(source)``).
    :returns: Width of the match (``0`` for a zero-width boundary before
              ``pos``), or ``None`` when nothing matches.
    """
    if end is None:
        end = len(source)
    if pos < 0 or pos >= end:
        return None

    match model:
        case SingleChar(char=delim):
            return 1 if source[pos] == delim else None
        case CharSet(chars=delims):
            return 1 if source[pos] in delims else None
        case CharPredicate(predicate=accept):
            return 1 if accept(source[pos]) else None
        case Substring(needle=""):
            return None
        case Substring(needle=needle, ignore_case=False):
            return len(needle) if source.startswith(needle, pos, end) else None
        case Substring(needle=needle, ignore_case=True):
            width = len(needle)
            if pos + width > end:
                return None
            region = source[pos : pos + width]
            return width if all(map(_same_ignoring_case, region, needle)) else None
        case LineBreak():
            ch = source[pos]
            if ch == "\r":
                return 2 if pos + 1 < end and source[pos + 1] == "\n" else 1
            return 1 if ch == "\n" else None
        case CharClassTransition(camel_case=camel_case):
            return 0 if _is_class_boundary(source, pos, end, camel_case) else None
    raise InvalidArgumentError("unknown delimiter model", name="model", value=model)


def _same_ignoring_case(a: str, b: str) -> bool:
    # match width must equal len(needle)
    return a == b or a.upper() == b.upper() or a.lower() == b.lower()


def class_boundaries(
    source: str, start: int, end: int, camel_case: bool = False
) -> Iterator[int]:
    """
    Yield every position in ``(start, end)`` where a character-type token starts.

    Each character is classified once, so a full scan costs one
    classification per character. ``start`` itself is never a boundary.

    .. code-block:: python

        list(class_boundaries("parseHTTPResponse", 0, 17))        # [5, 10]
        list(class_boundaries("parseHTTPResponse", 0, 17, True))  # [5, 9]
    """
    classes = [char_class(ch) for ch in source[start:end]]
    for i in range(1, len(classes)):
        next_cls = classes[i + 1] if i + 1 < len(classes) else None
        if _classes_split(classes[i - 1], classes[i], next_cls, camel_case):
            yield start + i


def _is_class_boundary(source: str, pos: int, end: int, camel_case: bool) -> bool:
    """Return True if a token boundary falls between ``pos - 1`` and ``pos``."""
    if pos == 0:
        return False
    next_cls = None
    if camel_case and pos + 1 < end:
        next_cls = char_class(source[pos + 1])
    return _classes_split(
        char_class(source[pos - 1]), char_class(source[pos]), next_cls, camel_case
    )


def _classes_split(
    prev_cls: CharClass,
    cls: CharClass,
    next_cls: CharClass | None,
    camel_case: bool,
) -> bool:
    # every OTHER character is a token of its own
    if prev_cls is CharClass.OTHER or cls is CharClass.OTHER:
        return True
    if prev_cls is not cls:
        # camel case: an upper-case letter stays with the lower-case run after it
        return not (
            camel_case and prev_cls is CharClass.UPPER and cls is CharClass.LOWER
        )
    # camel case: the last letter of an upper-case run starts the next word
    return camel_case and cls is CharClass.UPPER and next_cls is CharClass.LOWER


__all__ = [
    "DelimiterModel",
    "SingleChar",
    "CharSet",
    "Substring",
    "CharClassTransition",
    "LineBreak",
    "CharPredicate",
    "to_delimiter",
    "match_at",
    "class_boundaries",
]
