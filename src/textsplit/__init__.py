"""textsplit: String splitting and joining library."""

from .chars import CharClass, char_class, is_blank, is_graph, is_whitespace, strip_blanks
from .delimiter import (
    CharClassTransition,
    CharPredicate,
    CharSet,
    DelimiterModel,
    LineBreak,
    SingleChar,
    Substring,
    class_boundaries,
    match_at,
    to_delimiter,
)
from .errors import (
    InvalidArgumentError,
    OptionError,
    StrategyError,
    TextSplitError,
)
from .joiner import Joiner, join
from .lines import split_lines
from .options import SplitOption, list_options
from .splitter import SplitStrategy, Splitter, get_splitter, list_splitters
from .tokenizer import (
    split,
    split_blanks,
    split_by_char,
    split_by_char_type,
    split_by_chars,
    split_by_substring,
    split_chars,
    split_whitespace,
)

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("textsplit")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "SplitOption",
    "DelimiterModel",
    "SingleChar",
    "CharSet",
    "Substring",
    "CharClassTransition",
    "LineBreak",
    "CharPredicate",
    "CharClass",
    "Splitter",
    "SplitStrategy",
    "Joiner",
    "TextSplitError",
    "InvalidArgumentError",
    "OptionError",
    "StrategyError",
    "split",
    "split_by_char",
    "split_by_chars",
    "split_by_substring",
    "split_by_char_type",
    "split_whitespace",
    "split_blanks",
    "split_chars",
    "split_lines",
    "join",
    "match_at",
    "class_boundaries",
    "to_delimiter",
    "char_class",
    "is_blank",
    "is_graph",
    "is_whitespace",
    "strip_blanks",
    "get_splitter",
    "list_splitters",
    "list_options",
]
