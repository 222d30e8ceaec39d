"""Argument set container for argkit."""

import re
from decimal import Decimal
from types import MappingProxyType
from typing import Callable, Generic, Mapping, Optional, TypeVar

from .argument_map import CaseInsensitiveDict
from .exceptions import (
    ArgkitError,
    ArgumentNotFoundError,
    ArgumentValidationError,
    InvalidArgumentValueError,
    is_positional_key,
)
from .types import ArgumentMap, Validator

T = TypeVar("T")


class LookupResult(Generic[T]):
    """Outcome of a lookup: either a value or the error explaining its absence."""

    def __init__(self, value: Optional[T] = None, error: Optional[ArgkitError] = None):
        self.value = value
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self, throw_if_unable: bool = False) -> Optional[T]:
        """Return the value, or raise/return None depending on *throw_if_unable*."""
        if self.error is None:
            return self.value
        if throw_if_unable:
            raise self.error
        return None


INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|nan|inf|infinity)",
    re.IGNORECASE,
)
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


def _require_pattern(pattern: re.Pattern, value: str) -> str:
    """Only plain ASCII number syntax is accepted, no underscores or other digits."""
    text = value.strip()
    if not pattern.fullmatch(text):
        raise ValueError(f"not a number: {value!r}")
    return text


def _to_integer(value: str) -> int:
    return int(_require_pattern(INTEGER_PATTERN, value))


def _to_float(value: str) -> float:
    return float(_require_pattern(FLOAT_PATTERN, value))


def _to_decimal(value: str) -> Decimal:
    return Decimal(_require_pattern(DECIMAL_PATTERN, value))


class ArgumentSet:
    """Read-only collection of positional and named arguments."""

    def __init__(self, arguments: ArgumentMap):
        if not arguments:
            raise ValueError("ArgumentSet requires at least one argument")
        self._arguments = CaseInsensitiveDict(arguments)

    def _lookup(self, key: str) -> LookupResult[str]:
        """Find the raw value for *key*, rejecting missing and blank values."""
        if key not in self._arguments:
            return LookupResult(error=ArgumentNotFoundError(key))
        value = self._arguments[key]
        if not value or value.isspace():
            return LookupResult(error=InvalidArgumentValueError(key, value))
        return LookupResult(value)

    def _convert(
        self, key: str, converter: Callable[[str], T], type_name: str
    ) -> LookupResult[T]:
        """Look up *key* and convert its value with *converter*."""
        found = self._lookup(key)
        if not found.ok:
            return LookupResult(error=found.error)
        try:
            return LookupResult(converter(found.value))
        except ValueError:
            return LookupResult(
                error=InvalidArgumentValueError(key, found.value, type_name)
            )

    def get_value(self, key: str, throw_if_unable: bool = False) -> str | None:
        """
        Retrieve the value of an argument by key.

        Args:
            key: Flag name, or the position as a string ("0" for the first
                positional argument and so on)
            throw_if_unable: Raise instead of returning None

        Returns:
            The raw value, or None if it is missing or blank and
            *throw_if_unable* is False

        Raises:
            ArgumentNotFoundError: If the key was not found
            InvalidArgumentValueError: If the value was blank
        """
        return self._lookup(key).unwrap(throw_if_unable)

    def get_value_as_integer(
        self, key: str, throw_if_unable: bool = False
    ) -> int | None:
        """Retrieve the value of an argument converted to an int."""
        return self._convert(key, _to_integer, "Integer").unwrap(throw_if_unable)

    def get_value_as_float(
        self, key: str, throw_if_unable: bool = False
    ) -> float | None:
        """Retrieve the value of an argument converted to a float."""
        return self._convert(key, _to_float, "Float").unwrap(throw_if_unable)

    def get_value_as_decimal(
        self, key: str, throw_if_unable: bool = False
    ) -> Decimal | None:
        """Retrieve the value of an argument converted to a Decimal."""
        return self._convert(key, _to_decimal, "Decimal").unwrap(throw_if_unable)

    def validate(
        self,
        key: str,
        validator: Validator = None,
        error_message: str | None = None,
    ) -> None:
        """
        Validate the value of an argument by key.

        Raises:
            ArgumentNotFoundError: If the key is not found
            InvalidArgumentValueError: If the value is blank
            ArgumentValidationError: If *validator* returns False
        """
        value = self._lookup(key).unwrap(throw_if_unable=True)
        if validator is not None and not validator(value):
            raise ArgumentValidationError(key, value, error_message)

    def inner_map_view(self) -> ArgumentMap:
        """Return a read-only view of the underlying arguments."""
        return MappingProxyType(self._arguments)

    def positionals(self) -> list[str]:
        """Return the positional values in order."""
        values = []
        while str(len(values)) in self._arguments:
            values.append(self._arguments[str(len(values))])
        return values

    def named(self) -> dict[str, str]:
        """Return the named arguments keyed by flag name."""
        return {
            key: value
            for key, value in self._arguments.items()
            if not is_positional_key(key)
        }

    def __contains__(self, key):
        """Allow checking if an argument exists using 'in' operator."""
        return key in self._arguments

    def __getitem__(self, key):
        """Allow dictionary-style access to raw values."""
        if key not in self._arguments:
            raise ArgumentNotFoundError(key)
        return self._arguments[key]

    def __iter__(self):
        return iter(self._arguments)

    def __len__(self):
        return len(self._arguments)

    def __eq__(self, other):
        """Allow comparison with a dictionary or another ArgumentSet."""
        if isinstance(other, ArgumentSet):
            return self._arguments == other._arguments
        if isinstance(other, Mapping):
            return self._arguments == other
        return NotImplemented

    def __repr__(self):
        return f"ArgumentSet({dict(self._arguments.items())!r})"

    def get(self, key, default=None):
        """Allow .get() access to raw values."""
        return self._arguments.get(key, default)

    def keys(self):
        """Allow access to argument keys."""
        return self._arguments.keys()

    def values(self):
        """Allow access to argument values."""
        return self._arguments.values()

    def items(self):
        """Allow access to argument items."""
        return self._arguments.items()
