"""
Core types for splitting and joining.
"""

from collections.abc import Callable
from typing import TypeAlias

Token: TypeAlias = str
Tokens: TypeAlias = list[Token]
CharPredicateFn: TypeAlias = Callable[[str], bool]
