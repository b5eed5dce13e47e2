"""Custom exception hierarchy for textsplit errors."""


class TextSplitError(Exception):
    """Base exception for all textsplit errors."""


class InvalidArgumentError(TextSplitError, ValueError):
    """Raised when a caller passes an argument of the wrong shape."""

    def __init__(
        self,
        message: str,
        *,
        name: str | None = None,
        value: object = None,
    ) -> None:
        """Initialize with optional argument name and value that get appended to the message."""
        extra = " "
        if name:
            extra += f"(argument: {name}) "
            extra += f"(got {value!r}) "
        super().__init__(message + extra.rstrip())
        self.name = name
        self.value = value


class OptionError(TextSplitError):
    """Raised when a split option name cannot be resolved."""

    def __init__(self, message: str, *, invalid_name: str | None = None) -> None:
        if invalid_name:
            message = f"{message} (got {invalid_name!r})"
        super().__init__(message)
        self.invalid_name = invalid_name


class StrategyError(TextSplitError):
    """Raised when splitter strategy selection fails."""

    def __init__(
        self,
        message: str,
        *,
        invalid_name: str | None = None,
        available: list[str] | None = None,
    ) -> None:
        extra = " "
        if invalid_name:
            extra += f"(available: {available}) (got {invalid_name}) "
        super().__init__(message + extra.rstrip())
        self.invalid_name = invalid_name
        self.available = available
