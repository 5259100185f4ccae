# Argtoken — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgvParser`, the driver loop that feeds an argument
vector through the token classifier one token at a time.

The parser only dispatches: it classifies each token, looks up the option
registered under the token's key and asks that option to coerce the token.
Every coercion rule lives in `argtoken.parser.coercion`.

Key Features:
- Declarative option registration via `add_option()`
- `--help` handling through `HelpRequested`
- `--` stops parsing and collects the remaining tokens under `varargs`
- Unknown flags and unexpected positionals rejected with `UnknownOption`
- First failure aborts the whole parse

Public Interface:
- `add_option(...)`: Register a named string, number or boolean flag.
- `parse(...)`: Return a `ParseResult` holding the options dict or the error.
- `parse_args(...)`: Same as `parse`, but raise on failure.
- `run(...)`: Parse `sys.argv` and exit with the mapped code on failure.

Example Usage:
    parser = ArgvParser(program="deploy")
    parser.add_option("env", help="target environment")
    parser.add_option("retries", type="number", fallback={"enabled": 3})
    parser.add_option("dry-run", type="boolean", default=False)

    parser.parse_args(["--env=prod", "--retries", "--no-dry-run"])
    # {'env': 'prod', 'retries': 3, 'dry_run': False}
"""
from __future__ import annotations

import sys
from copy import deepcopy
from typing import Any, Mapping

from argtoken.exceptions import HelpRequested, OptionDefinitionError
from argtoken.exit import exit_with
from argtoken.logger import logger
from argtoken.parser.fallback import FallbackPolicy
from argtoken.parser.option import Option, OptionType
from argtoken.parser.result import ParseResult, attempt
from argtoken.parser.token import FLAG_PREFIX, NEGATION_PREFIX, classify

RESERVED_NAMES = frozenset({"help"})
VARARGS_DEST = "varargs"
POSITIONALS_DEST = "positionals"


class ArgvParser:
    """
    Option registry and token-by-token driver for a single program.

    It is not a replacement for argparse: there are no short flags, no
    two-token `--flag value` forms and no repeated values. Each token is
    classified on its own and later occurrences of a flag overwrite earlier ones.
    """

    def __init__(
        self,
        program: str = "",
        description: str = "",
        help_text: str = "",
        allow_positionals: bool = False,
        require_varargs: bool = False,
    ) -> None:
        self.program: str = program
        self.description: str = description
        self.allow_positionals: bool = allow_positionals
        self.require_varargs: bool = require_varargs
        self._help_text: str = help_text
        self._options: dict[str, Option] = {}
        self._dest_set: set[str] = set()

    @property
    def options(self) -> list[Option]:
        return list(self._options.values())

    def _validate_name(self, name: str) -> str:
        if not isinstance(name, str):
            raise OptionDefinitionError(f"Option name must be a string, got {name!r}")
        if not name:
            raise OptionDefinitionError("Option name cannot be empty")
        if name.startswith("-"):
            raise OptionDefinitionError(
                f"Option name '{name}' must not include the '{FLAG_PREFIX}' prefix"
            )
        if name.startswith(NEGATION_PREFIX):
            raise OptionDefinitionError(
                f"Option name '{name}' must not start with '{NEGATION_PREFIX}'; "
                "negation is handled automatically"
            )
        if "=" in name:
            raise OptionDefinitionError(f"Option name '{name}' must not contain '='")
        if name in RESERVED_NAMES:
            raise OptionDefinitionError(f"Option name '{name}' is reserved")
        if name in self._options:
            raise OptionDefinitionError(f"Option '{name}' is already defined")
        return name

    def _get_dest(self, name: str, dest: str | None) -> str:
        dest = dest or name.replace("-", "_")
        if not dest.isidentifier():
            raise OptionDefinitionError(f"Invalid dest '{dest}'")
        if dest in self._dest_set or dest in (VARARGS_DEST, POSITIONALS_DEST):
            raise OptionDefinitionError(f"Destination '{dest}' is already defined")
        return dest

    def add_option(
        self,
        name: str,
        type: str | OptionType = OptionType.STRING,
        dest: str | None = None,
        fallback: FallbackPolicy | Mapping[Any, Any] | None = None,
        default: Any = None,
        help: str = "",
        message: str | None = None,
    ) -> Option:
        """
        Register a named flag.

        Args:
            name (str): Flag name without prefix, e.g. "dry-run" for `--dry-run`.
            type (str | OptionType): "string", "number" or "boolean" (or an alias).
            dest (str | None): Result key. Defaults to `name` with "-" replaced by "_".
            fallback (FallbackPolicy | Mapping | None): Fallback values by slot.
            default (Any): Result value when the flag is not given.
            help (str): Help text for the generated OPTIONS block.
            message (str | None): Error message replacing the generated one.

        Returns:
            Option: The registered option.

        Raises:
            OptionDefinitionError: If the name, dest, type or fallback is invalid.
        """
        name = self._validate_name(name)
        dest = self._get_dest(name, dest)
        try:
            option_type = OptionType(type)
            policy = FallbackPolicy.coerce(fallback)
        except ValueError as error:
            raise OptionDefinitionError(f"Invalid option '{name}': {error}") from error
        if option_type is OptionType.BOOLEAN and policy:
            raise OptionDefinitionError(
                f"Boolean option '{name}' does not use fallback values"
            )

        option = Option(
            name=name,
            dest=dest,
            type=option_type,
            fallback=policy,
            default=default,
            help=help,
            message=message,
        )
        self._options[name] = option
        self._dest_set.add(dest)
        logger.debug("Registered option '%s' (%s) -> '%s'", name, option_type, dest)
        return option

    def get_option(self, name: str) -> Option | None:
        """Return the option registered under `name`, if any."""
        return self._options.get(name)

    @property
    def help_text(self) -> str:
        """The explicit help text, or a generated USAGE/OPTIONS block."""
        if self._help_text:
            return self._help_text
        lines = ["USAGE:", f"{self.program or 'program'} [...options]"]
        if self.description:
            lines.extend(["", self.description])
        lines.extend(["", "OPTIONS:", "--help", "  output usage information"])
        for option in self._options.values():
            lines.extend(["", option.get_usage_text()])
            if option.help:
                lines.append(f"  {option.help}")
        lines.extend(["", "--", "  Process remaining arguments without any parsing"])
        return "\n".join(lines)

    def parse(self, args: list[str] | None = None) -> ParseResult[dict[str, Any]]:
        """
        Parse an argument vector, stopping at the first failure.

        Args:
            args (list[str] | None): Raw tokens, without the program name.

        Returns:
            ParseResult[dict[str, Any]]: The options dict keyed by dest, or the
            `ArgumentError` that stopped parsing.
        """
        args = list(args or [])
        result: dict[str, Any] = {
            option.dest: deepcopy(option.default) for option in self._options.values()
        }
        if self.allow_positionals:
            result[POSITIONALS_DEST] = []

        for index, raw in enumerate(args):
            token = classify(raw)

            if token.is_sentinel:
                remaining = args[index + 1 :]
                if self.require_varargs and not remaining:
                    return attempt(token.error, "when --, provide at least one argument")
                result[VARARGS_DEST] = remaining
                logger.debug("Sentinel reached, %d remaining argument(s)", len(remaining))
                break

            if token.is_positional:
                if not self.allow_positionals:
                    return attempt(token.unknown)
                result[POSITIONALS_DEST].append(token.value)
                continue

            if token.key == "help":
                return ParseResult.failure(HelpRequested(self.help_text))

            option = self._options.get(token.key)
            if option is None:
                logger.debug("Unknown option %r", raw)
                return attempt(token.unknown)

            coerced = attempt(option.coerce, token)
            if not coerced.ok:
                return ParseResult.failure(coerced.error)  # type: ignore[arg-type]
            result[option.dest] = coerced.value

        return ParseResult.success(result)

    def parse_args(self, args: list[str] | None = None) -> dict[str, Any]:
        """
        Parse an argument vector into a dict keyed by option dest.

        Raises:
            ArgumentError: On the first invalid or unknown token, or `--help`.
        """
        return self.parse(args).unwrap()

    def run(self, args: list[str] | None = None) -> dict[str, Any]:
        """
        Parse `args` (default: `sys.argv[1:]`) and exit the process on failure.

        Help requests exit 0 and argument errors exit 22, after the help text
        and error are written to stderr.
        """
        if args is None:
            args = sys.argv[1:]
        result = self.parse(args)
        if not result.ok:
            exit_with(self.help_text, result.error)
        return result.value  # type: ignore[return-value]

    def __str__(self) -> str:
        names = ", ".join(self._options)
        return f"ArgvParser(program={self.program!r}, options=[{names}])"
