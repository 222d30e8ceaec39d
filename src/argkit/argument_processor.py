"""Argument classification functionality for argkit."""

from typing import Sequence

from .argument_map import CaseInsensitiveDict
from .environment_helper import debug_log
from .types import FlagTuple, SplitResult, TokenList

FLAG_PREFIX = "-"
SEPARATOR = "--"


class ArgumentProcessor:
    """Handles argument classification and manipulation."""

    @staticmethod
    def is_flag(token: str) -> bool:
        """Check whether a token looks like a flag (starts with a dash)."""
        return token.startswith(FLAG_PREFIX)

    @staticmethod
    def flag_name(token: str) -> str:
        """Strip every leading dash from *token*, so ``-x`` and ``--x`` agree."""
        return token.lstrip(FLAG_PREFIX).strip()

    @staticmethod
    def split_at_separator(tokens: Sequence[str]) -> SplitResult:
        """Split tokens at the first '--' separator (which is dropped)."""
        tokens = list(tokens)
        if SEPARATOR in tokens:
            idx = tokens.index(SEPARATOR)
            return tokens[:idx], tokens[idx + 1 :]
        return tokens, []

    @staticmethod
    def separate_positionals_and_flags(
        tokens: Sequence[str],
    ) -> tuple[TokenList, list[FlagTuple]]:
        """
        Split tokens into (positionals, flags).

        * `positionals` - the leading tokens that do not begin with a dash,
          trimmed. Collection stops at the first flag.
        * `flags` - list of tuples ``(name, value)`` for every later token that
          begins with a dash. *value* is the following token if it does
          **not** start with a dash; otherwise the empty string.

        Tokens after the first flag that are neither a flag nor a flag's value
        are discarded.
        """
        positionals: TokenList = []
        flags: list[FlagTuple] = []

        i = 0
        while i < len(tokens) and not ArgumentProcessor.is_flag(tokens[i]):
            positionals.append(tokens[i].strip())
            i += 1

        while i < len(tokens):
            current = tokens[i].strip()

            # Stray value with no flag in front of it.
            if not ArgumentProcessor.is_flag(current):
                debug_log(f"classify: skipping stray token {current!r}")
                i += 1
                continue

            name = ArgumentProcessor.flag_name(current)

            # Switch-style flag: nothing follows, or another flag does.
            if i + 1 == len(tokens) or ArgumentProcessor.is_flag(tokens[i + 1]):
                flags.append((name, ""))
                i += 1
                continue

            flags.append((name, tokens[i + 1].strip()))
            i += 2

        return positionals, flags

    @staticmethod
    def classify(tokens: Sequence[str]) -> CaseInsensitiveDict | None:
        """
        Classify tokens into a case-insensitive map of arguments.

        Positional arguments are keyed by their index ("0", "1", ...), named
        arguments by their flag name. A repeated flag overwrites the earlier
        value. Returns None when there is nothing to classify.
        """
        if not tokens:
            return None

        positionals, flags = ArgumentProcessor.separate_positionals_and_flags(tokens)

        results = CaseInsensitiveDict()
        for index, value in enumerate(positionals):
            results[str(index)] = value
        for name, value in flags:
            if name in results:
                debug_log(
                    f"classify: '{name}' given more than once, "
                    f"replacing {results[name]!r} with {value!r}"
                )
            results[name] = value

        debug_log(
            f"classify: {len(positionals)} positional(s), {len(flags)} flag(s)"
        )
        return results or None
