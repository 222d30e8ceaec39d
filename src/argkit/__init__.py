"""Command line tokenizer and typed argument accessor."""

from .argument_set import ArgumentSet
from .exceptions import (
    ArgkitError,
    ArgumentNotFoundError,
    ArgumentValidationError,
    InvalidArgumentValueError,
)
from .parser import parse_arguments, split

__all__ = [
    "ArgkitError",
    "ArgumentNotFoundError",
    "ArgumentSet",
    "ArgumentValidationError",
    "InvalidArgumentValueError",
    "parse_arguments",
    "split",
]
