"""Command line tokenization for argkit."""

from .environment_helper import debug_log
from .types import TokenList

QUOTE = '"'


class Tokenizer:
    """Splits raw command line strings into tokens."""

    @staticmethod
    def split(text: str | None) -> TokenList:
        """
        Split *text* into tokens, respecting double-quoted spans.

        * Runs of whitespace separate tokens and are discarded.
        * Everything between a pair of double quotes becomes one token,
          verbatim. There is no escape processing.
        * A quote that is never closed ends tokenization; the tokens found
          before it are returned and the dangling fragment is dropped.
        * A quote inside a bare word is kept as part of that word.

        The input is scanned once, left to right.
        """
        tokens: TokenList = []
        if not text or text.isspace():
            return tokens

        length = len(text)
        i = 0
        while i < length:
            char = text[i]

            if char.isspace():
                i += 1
                continue

            # Quoted span - jump straight to the closing quote.
            if char == QUOTE:
                closing = text.find(QUOTE, i + 1)
                if closing == -1:
                    debug_log(
                        f"split: unterminated quote at offset {i}, "
                        f"keeping {len(tokens)} token(s)"
                    )
                    break
                tokens.append(text[i + 1 : closing])
                i = closing + 1
                continue

            # Bare word - runs until the next whitespace character.
            start = i
            while i < length and not text[i].isspace():
                i += 1
            tokens.append(text[start:i])

        debug_log(f"split: {len(tokens)} token(s) from {length} character(s)")
        return tokens
