"""Fluent splitter configuration and named presets."""

import logging
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Final

from .chars import is_blank, is_whitespace
from .delimiter import (
    CharClassTransition,
    CharPredicate,
    CharSet,
    DelimiterModel,
    SingleChar,
    Substring,
)
from .errors import StrategyError
from .lines import split_lines
from .options import SplitOption
from .tokenizer import split, split_chars
from .types import CharPredicateFn, Tokens

log = logging.getLogger(__name__)


class SplitStrategy(str, Enum):
    """How a :class:`Splitter` finds the boundaries between tokens."""

    CHAR = "char"
    CHARS_IN = "chars-in"
    CHARS_SATISFY = "chars-satisfy"
    SUBSTRING = "substring"
    WHITESPACES = "whitespaces"
    BLANKS = "blanks"
    CHAR_TYPES = "char-types"
    LINES = "lines"
    CHARS = "chars"

    @classmethod
    def get(cls, name: str) -> "SplitStrategy":
        """Get split strategy by name (case-insensitive)."""
        try:
            return cls[name.upper().replace("-", "_")]
        except KeyError:
            raise StrategyError(
                "unknown split strategy",
                invalid_name=name,
                available=[strategy.value for strategy in cls],
            )


class Splitter:
    """
    Splits strings according to a configured strategy and options.

    Each ``by_*`` / ``to_*`` call replaces the previously selected strategy;
    option toggles are kept.

    .. code-block:: python

        Splitter().by_char(",").strip(True).ignore_empty(True).split(" a, ,b")
        # ["a", "b"]
        Splitter().by_char_types().camel_case(True).split("fooBar")
        # ["foo", "Bar"]
    """

    def __init__(self) -> None:
        self._strategy: SplitStrategy | None = None
        self._model: DelimiterModel | None = None
        self._strip = False
        self._ignore_empty = False
        self._ignore_case = False
        self._camel_case = False

    @property
    def strategy(self) -> SplitStrategy | None:
        """The currently selected strategy, or ``None``."""
        return self._strategy

    def _use(self, strategy: SplitStrategy, model: DelimiterModel | None = None) -> "Splitter":
        self._strategy = strategy
        self._model = model
        return self

    # strategies
    # =========================================================================================

    def by_char(self, char: str) -> "Splitter":
        """Split on a single character."""
        return self._use(SplitStrategy.CHAR, SingleChar(char))

    def by_chars_in(self, chars: str | Iterable[str] | None) -> "Splitter":
        """Split on any character in ``chars``; ``None`` or empty never splits."""
        return self._use(SplitStrategy.CHARS_IN, CharSet(chars))

    def by_chars_not_in(self, chars: str | Iterable[str] | None) -> "Splitter":
        """Split on any character not in ``chars``."""
        members = CharSet(chars).chars
        return self._use(
            SplitStrategy.CHARS_SATISFY, CharPredicate(lambda ch: ch not in members)
        )

    def by_chars_satisfy(self, predicate: CharPredicateFn) -> "Splitter":
        """Split on any character accepted by ``predicate``."""
        return self._use(SplitStrategy.CHARS_SATISFY, CharPredicate(predicate))

    def by_substring(self, separator: str | None) -> "Splitter":
        """Split on a literal substring; ``None`` or empty never splits."""
        return self._use(SplitStrategy.SUBSTRING, Substring(separator))

    def by_whitespaces(self) -> "Splitter":
        """Split on whitespace runs; empty tokens are always dropped."""
        return self._use(SplitStrategy.WHITESPACES, CharPredicate(is_whitespace))

    def by_blanks(self) -> "Splitter":
        """Split on blank-character runs; empty tokens are always dropped."""
        return self._use(SplitStrategy.BLANKS, CharPredicate(is_blank))

    def by_char_types(self) -> "Splitter":
        """Split on character-class transitions (see :meth:`camel_case`)."""
        return self._use(SplitStrategy.CHAR_TYPES, CharClassTransition())

    def to_lines(self) -> "Splitter":
        """Split on ``\\r\\n``, ``\\n`` and ``\\r``."""
        return self._use(SplitStrategy.LINES)

    def to_chars(self) -> "Splitter":
        """Split into single characters."""
        return self._use(SplitStrategy.CHARS)

    # options
    # =========================================================================================

    def strip(self, strip: bool) -> "Splitter":
        """Set whether blank characters are stripped from each token."""
        self._strip = strip
        return self

    def ignore_empty(self, ignore_empty: bool) -> "Splitter":
        """Set whether empty tokens are dropped."""
        self._ignore_empty = ignore_empty
        return self

    def ignore_case(self, ignore_case: bool) -> "Splitter":
        """Set whether substring separators match case-insensitively."""
        self._ignore_case = ignore_case
        return self

    def camel_case(self, camel_case: bool) -> "Splitter":
        """Set whether character-type splitting keeps ``Bar`` together in ``fooBar``."""
        self._camel_case = camel_case
        return self

    @property
    def options(self) -> SplitOption:
        """The option flags equivalent to the current toggles."""
        options = SplitOption.NONE
        if self._strip:
            options |= SplitOption.TRIM
        if self._ignore_empty:
            options |= SplitOption.IGNORE_EMPTY
        if self._camel_case:
            options |= SplitOption.CAMEL_CASE
        return options

    def split(self, source: str | None, output: Tokens | None = None) -> Tokens:
        """
        Split ``source`` using the configured strategy.

        :param output: List to append tokens to; its contents are kept.
        :raises StrategyError: If no strategy has been selected.
        """
        options = self.options
        model = self._model
        match self._strategy:
            case None:
                raise StrategyError("no split strategy was specified")
            case SplitStrategy.LINES:
                return split_lines(
                    source,
                    trim=self._strip,
                    ignore_empty=self._ignore_empty,
                    # "" is one empty line; a final terminator adds none
                    drop_trailing_empty=bool(source),
                    output=output,
                )
            case SplitStrategy.CHARS:
                return split_chars(source, options, output=output)
            case SplitStrategy.WHITESPACES | SplitStrategy.BLANKS:
                options |= SplitOption.IGNORE_EMPTY
            case SplitStrategy.SUBSTRING if isinstance(model, Substring) and self._ignore_case:
                model = Substring(model.needle, ignore_case=True)
        return split(source, model, options, output=output)

    def __repr__(self) -> str:
        strategy = self._strategy.value if self._strategy else None
        return f"{self.__class__.__name__}(strategy={strategy!r}, options={self.options!r})"


# Splitter presets
# =========================================================================================

_PRESETS: Final[dict[str, Callable[[], Splitter]]] = {
    "whitespaces": lambda: Splitter().by_whitespaces(),
    "blanks": lambda: Splitter().by_blanks(),
    "char-types": lambda: Splitter().by_char_types(),
    "camel-case": lambda: Splitter().by_char_types().camel_case(True),
    "lines": lambda: Splitter().to_lines(),
    "chars": lambda: Splitter().to_chars(),
    "csv": lambda: Splitter().by_char(","),
    "words": lambda: Splitter().by_blanks().strip(True),
}


def list_splitters() -> list[str]:
    """Return names of all splitter presets."""
    return list(_PRESETS.keys())


def get_splitter(name: str) -> Splitter:
    """
    Create a pre-configured splitter by name.

    :param name: Preset identifier, e.g. "lines", "camel-case" or "csv".
    :raises StrategyError: If ``name`` is not a known preset.

    .. code-block:: python

        get_splitter("camel-case").split("parseHTTPResponse")
        # ["parse", "HTTP", "Response"]
    """
    key = name.lower().replace("_", "-")
    if key not in _PRESETS:
        raise StrategyError(
            "unknown splitter preset", invalid_name=name, available=list_splitters()
        )
    log.debug(f"creating splitter preset {key!r}")
    return _PRESETS[key]()


__all__ = [
    "SplitStrategy",
    "Splitter",
    "list_splitters",
    "get_splitter",
]
