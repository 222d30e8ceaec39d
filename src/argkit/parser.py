"""Public parsing entry points for argkit."""

from typing import Sequence

from .argument_processor import ArgumentProcessor
from .argument_set import ArgumentSet
from .tokenizer import Tokenizer
from .types import TokenList


def split(text: str | None) -> TokenList:
    """Split a raw command line string into tokens, respecting quotes."""
    return Tokenizer.split(text)


def parse_arguments(source: str | Sequence[str] | None) -> ArgumentSet | None:
    """
    Parse a command line into an ArgumentSet.

    Args:
        source: A raw command line string, which is tokenized first, or a
            sequence of already split tokens

    Returns:
        The parsed arguments, or None when the input holds no arguments
    """
    if source is None:
        return None
    tokens = split(source) if isinstance(source, str) else list(source)
    if not tokens:
        return None

    arguments = ArgumentProcessor.classify(tokens)
    if arguments is None:
        return None
    return ArgumentSet(arguments)
