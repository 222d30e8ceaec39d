#!/usr/bin/env python3
"""Command line front end for argkit."""

import json
import logging
import math
import sys
from decimal import Decimal
from typing import Optional

from .argument_processor import ArgumentProcessor
from .argument_set import ArgumentSet
from .environment_helper import debug_log
from .exceptions import ArgkitError, UsageError
from .parser import parse_arguments, split
from .types import ExitCode, TokenList

KNOWN_OPTIONS = ("json", "tokens", "raw", "get", "type", "strict", "help")
VALUE_TYPES = ("str", "int", "float", "decimal")
NO_ARGUMENTS = 2


def print_help() -> None:
    """Print concise help message about argkit functionality."""
    help_text = """argkit - command line tokenizer and argument inspector
Usage:
  argkit -- command -p value --flag "two words"     # Classify pre-split tokens
  argkit --raw -- 'command -p "a b" -v'             # Tokenize a raw string first
  argkit --tokens --raw -- 'my name is "Tacitus"'   # Show tokens only
  argkit --json -- command -p value                 # JSON output
  argkit --get p --type int -- command -p 42        # Typed lookup of one key
  argkit --get 0 --strict -- command                # Fail instead of printing nothing

  Positional arguments are keyed 0, 1, ...; flags by name without dashes.
  Set ARGKIT_DEBUG=1 for debug output on stderr.
"""
    print(help_text)


class Options:
    """Front end options, read from the arguments before '--'."""

    def __init__(self, arguments: Optional[ArgumentSet] = None):
        self.json = False
        self.tokens = False
        self.raw = False
        self.strict = False
        self.help = False
        self.get: str | None = None
        self.value_type = "str"
        if arguments is not None:
            self._load(arguments)

    def _load(self, arguments: ArgumentSet) -> None:
        positionals = arguments.positionals()
        if positionals:
            raise UsageError(positionals[0], "unexpected argument before '--'")
        for key in arguments.keys():
            if key.lower() not in KNOWN_OPTIONS:
                raise UsageError(key, "unknown option")

        self.json = "json" in arguments
        self.tokens = "tokens" in arguments
        self.raw = "raw" in arguments
        self.strict = "strict" in arguments
        self.help = "help" in arguments

        if "get" in arguments:
            self.get = arguments.get_value("get")
            if self.get is None:
                raise UsageError("--get", "requires a key")

        if "type" in arguments:
            value_type = arguments.get_value("type")
            if value_type is None or value_type.lower() not in VALUE_TYPES:
                raise UsageError(
                    "--type", f"expected one of {', '.join(VALUE_TYPES)}"
                )
            self.value_type = value_type.lower()


class Application:
    """Main application orchestrator."""

    def run(self, args: TokenList) -> ExitCode:
        """Run the application with the given arguments."""
        # Handle help request
        if not args or args[0] in ("-h", "--help"):
            print_help()
            return 0

        option_tokens, input_tokens = ArgumentProcessor.split_at_separator(args)
        options = Options(parse_arguments(option_tokens))
        debug_log(f"run: options={vars(options)}, input={input_tokens}")

        if options.help:
            print_help()
            return 0

        tokens = split(" ".join(input_tokens)) if options.raw else input_tokens

        if options.tokens:
            self._print_tokens(tokens, options)
            return 0

        arguments = parse_arguments(tokens)
        if arguments is None:
            logging.error("No arguments found in input")
            return NO_ARGUMENTS

        if options.get is not None:
            return self._print_value(arguments, options)

        self._print_arguments(arguments, options)
        return 0

    @staticmethod
    def _print_tokens(tokens: TokenList, options: Options) -> None:
        if options.json:
            print(json.dumps(tokens))
            return
        for token in tokens:
            print(token)

    @staticmethod
    def _print_arguments(arguments: ArgumentSet, options: Options) -> None:
        if options.json:
            print(json.dumps(dict(arguments.items())))
            return
        for key, value in arguments.items():
            print(f"{key}={value}")

    @staticmethod
    def _print_value(arguments: ArgumentSet, options: Options) -> ExitCode:
        getters = {
            "str": arguments.get_value,
            "int": arguments.get_value_as_integer,
            "float": arguments.get_value_as_float,
            "decimal": arguments.get_value_as_decimal,
        }
        value = getters[options.value_type](options.get, options.strict)
        if value is None:
            return NO_ARGUMENTS

        if options.json:
            # JSON has no NaN/Infinity, and Decimal is not serializable.
            if isinstance(value, Decimal) or (
                isinstance(value, float) and not math.isfinite(value)
            ):
                value = str(value)
            print(json.dumps(value, allow_nan=False))
        else:
            print(value)
        return 0


def main() -> ExitCode:
    """Main entry point."""
    try:
        app = Application()
        return app.run(sys.argv[1:])
    except ArgkitError as e:
        logging.error(str(e))
        return 1
    except Exception as e:
        logging.error(f"Unexpected error: {e}")
        return 1
