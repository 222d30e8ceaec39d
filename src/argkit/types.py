"""
Type aliases for argkit.

This module provides centralized type definitions used throughout the library
to ensure consistency and maintainability.

Type Aliases:
    TokenList: List of tokens produced by the tokenizer
    ArgumentMap: Mapping of argument keys to their raw string values
    FlagTuple: Tuple representing a flag name and its value
    SplitResult: Tuple of two token lists (before/after separator)
    Validator: Predicate applied to a raw argument value
    ExitCode: Integer representing exit codes
"""

from typing import Callable, List, Mapping, Optional, Tuple

TokenList = List[str]
"""List of string tokens, in the order they were encountered."""

ArgumentMap = Mapping[str, str]
"""Mapping from argument key ("0", "1", ... or flag name) to its raw value."""

FlagTuple = Tuple[str, str]
"""Tuple representing a flag name and its value (e.g., ('p', '') or ('f', 'text.txt'))."""

SplitResult = Tuple[TokenList, TokenList]
"""Result of splitting tokens at separator (before, after)."""

Validator = Optional[Callable[[str], bool]]
"""Optional predicate that receives a raw value and returns whether it is acceptable."""

ExitCode = int
"""Integer representing process exit codes (0 for success, non-zero for errors)."""
