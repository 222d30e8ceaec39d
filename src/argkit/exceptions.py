"""Custom exceptions for argkit."""


class ArgkitError(Exception):
    """Base exception for argkit errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def is_positional_key(key: str) -> bool:
    """Return True when *key* names a positional slot (decimal digits only)."""
    return bool(key) and all(ch.isdecimal() for ch in key)


class ArgumentNotFoundError(ArgkitError, LookupError):
    """Raised when a positional or named argument is not present."""

    def __init__(self, key: str):
        self.key = key
        self.positional = is_positional_key(key)
        if self.positional:
            message = f"The positional argument for position {key} wasn't found."
        else:
            message = f'The named argument "{key}" wasn\'t found.'
        super().__init__(message)


class InvalidArgumentValueError(ArgkitError, ValueError):
    """Raised when an argument exists but its value is unusable."""

    def __init__(
        self,
        key: str,
        value: str | None = None,
        target_type: str | None = None,
        message: str | None = None,
    ):
        if message is None:
            if target_type is None:
                message = f'The value for argument "{key}" was blank.'
            else:
                message = (
                    f'The value for argument "{key}" was "{value}" '
                    f"which is invalid for type:{target_type}."
                )
        super().__init__(message)
        self.key = key
        self.value = value
        self.target_type = target_type


class ArgumentValidationError(InvalidArgumentValueError):
    """Raised when a validation predicate rejects an argument value."""

    def __init__(self, key: str, value: str, error_message: str | None = None):
        message = error_message or f'The value for argument "{key}" failed validation.'
        super().__init__(key, value, message=f"{message} (argument: {key})")
        self.error_message = error_message


class UsageError(ArgkitError):
    """Raised when the argkit command line is used incorrectly."""

    def __init__(self, option: str, message: str):
        super().__init__(f"Invalid option '{option}': {message}")
        self.option = option
