# Argtoken — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ClassifiedToken` and `classify()`, the single-token classifier at the
heart of argtoken.

A raw token from `sys.argv` is exactly one of:
- the stop-parsing sentinel `--`
- a flag (`--key`, `--key=value`, `--no-key`, `--no-key=value`)
- a positional argument (anything else, including `-x` and `-`)

Classification is a total function: any string yields a well-formed record.
Only the first `=` separates a flag's key from its value, and `--key=` (empty
value) is kept distinct from `--key` (no value) because fallback resolution
depends on it.

Example:
    classify("--no-color=")
    # ClassifiedToken(raw='--no-color=', key='color', value='',
    #                 is_flag=True, is_inverted=True)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping, NoReturn

from argtoken.exceptions import InvalidArgumentValue, UnknownOption
from argtoken.parser import coercion

if TYPE_CHECKING:
    from argtoken.parser.fallback import FallbackPolicy

FLAG_PREFIX = "--"
NEGATION_PREFIX = "no-"
SENTINEL = FLAG_PREFIX


@dataclass(frozen=True)
class ClassifiedToken:
    """
    A single command-line token after classification.

    Attributes:
        raw (str): The original token, kept for error messages.
        key (str): "" for a positional, the flag name for a flag, "--" for the sentinel.
        value (str | None): The positional text, the text after "=" for a flag, or None.
        is_flag (bool): True if the token started with "--" and is not the sentinel.
        is_inverted (bool): True if the flag name carried the "no-" prefix.
    """

    raw: str
    key: str
    value: str | None = None
    is_flag: bool = False
    is_inverted: bool = False

    @property
    def is_sentinel(self) -> bool:
        return self.key == SENTINEL and not self.is_flag

    @property
    def is_positional(self) -> bool:
        return not self.is_flag and not self.is_sentinel

    @property
    def is_empty(self) -> bool:
        """True for `--key=` style tokens with an explicitly blank value."""
        return self.value == ""

    def error(self, message: str) -> NoReturn:
        """Raise an `InvalidArgumentValue` with a custom message."""
        raise InvalidArgumentValue(message)

    def unknown(self) -> NoReturn:
        """Raise an `UnknownOption` describing this token."""
        if self.is_flag:
            raise UnknownOption(f"Unknown flag: {self.raw}")
        raise UnknownOption(f"Unknown argument {self.raw}")

    def string(
        self,
        policy: FallbackPolicy | Mapping[Any, Any] | None = None,
        message: str | None = None,
    ) -> Any:
        """Resolve this token as a string. See `coercion.coerce_string`."""
        return coercion.coerce_string(self, policy, message)

    def number(
        self,
        policy: FallbackPolicy | Mapping[Any, Any] | None = None,
        message: str | None = None,
    ) -> Any:
        """Resolve this token as a number. See `coercion.coerce_number`."""
        return coercion.coerce_number(self, policy, message)

    def boolean(self, message: str | None = None) -> bool:
        """Resolve this token as a boolean. See `coercion.coerce_boolean`."""
        return coercion.coerce_boolean(self, message)


def classify(raw: str) -> ClassifiedToken:
    """
    Classify a single raw command-line token.

    Args:
        raw (str): One element of an argument vector.

    Returns:
        ClassifiedToken: The structured record. Never raises for string input.
    """
    if raw == SENTINEL:
        return ClassifiedToken(raw=raw, key=SENTINEL)

    if raw.startswith(FLAG_PREFIX):
        key, separator, value = raw[len(FLAG_PREFIX) :].partition("=")
        inverted = key.startswith(NEGATION_PREFIX)
        if inverted:
            key = key[len(NEGATION_PREFIX) :]
        return ClassifiedToken(
            raw=raw,
            key=key,
            value=value if separator else None,
            is_flag=True,
            is_inverted=inverted,
        )

    return ClassifiedToken(raw=raw, key="", value=raw)
