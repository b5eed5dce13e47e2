"""Post-processing options for split operations."""

import logging
from enum import IntFlag

import regex as re

from .errors import OptionError

log = logging.getLogger(__name__)

_NAME_SEP = re.compile(r"\s*[|,]\s*")


class SplitOption(IntFlag):
    """
    Bit flags controlling how split tokens are post-processed.

    Flags combine with ``|``. ``CAMEL_CASE`` only affects character-type
    splitting and is ignored by every other delimiter model.
    """

    NONE = 0
    TRIM = 1
    IGNORE_EMPTY = 2
    CAMEL_CASE = 4

    @classmethod
    def get(cls, name: str) -> "SplitOption":
        """
        Parse option names (case-insensitive) joined by ``|`` or ``,``.

        :param name: e.g. ``"trim|ignore-empty"``; an empty string is ``NONE``.
        :raises OptionError: If any name is not a known option.
        """
        result = cls.NONE
        for part in _NAME_SEP.split(name.strip()):
            if not part:
                continue
            try:
                result |= cls[part.upper().replace("-", "_")]
            except KeyError:
                log.debug(f"unknown split option {part!r} in {name!r}")
                raise OptionError(
                    f"Unknown split option. Valid options: {', '.join(list_options())}",
                    invalid_name=part,
                )
        return result


def list_options() -> list[str]:
    """Return names of all split options."""
    return [name.lower() for name in SplitOption.__members__]


__all__ = ["SplitOption", "list_options"]
