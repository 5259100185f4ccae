# Argtoken — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value resolution and typed coercion for classified tokens.

Resolution picks either the token's own value or a `FallbackPolicy` slot:

| value        | inverted | outcome                          |
|--------------|----------|----------------------------------|
| None         | False    | ENABLED, else fail               |
| None         | True     | DISABLED, else fail              |
| ""           | False    | DISABLED_EMPTY, else fail        |
| ""           | True     | ENABLED_EMPTY, else fail         |
| non-empty s  | either   | s, policy ignored                |

Functions:
- resolve_fallback: Apply the table above.
- coerce_string: Resolve, returning the value unchanged.
- coerce_number: Resolve, then convert to `int` or `float`.
- coerce_boolean: Interpret truthy/falsey words, honoring negation. Ignores policies.
- parse_number: Convert a string with `Number()`-like rules, or return None.

All failures raise `InvalidArgumentValue`; nothing is recovered here.
"""
from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Any, Mapping

from argtoken.exceptions import InvalidArgumentValue
from argtoken.logger import logger
from argtoken.parser.fallback import FallbackPolicy, FallbackSlot

if TYPE_CHECKING:
    from argtoken.parser.token import ClassifiedToken

TRUTHY: frozenset[str] = frozenset({"true", "1", "yes", "y", "on"})
FALSEY: frozenset[str] = frozenset({"false", "0", "no", "n", "off"})

_RADIX_LITERAL = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")
_INFINITY = "Infinity"


def resolve_fallback(
    token: ClassifiedToken,
    required_message: str,
    policy: FallbackPolicy | Mapping[Any, Any] | None = None,
) -> Any:
    """
    Return the token's literal value, or the fallback slot that applies.

    Args:
        token (ClassifiedToken): The classified token.
        required_message (str): Message for the error raised when no fallback applies.
        policy (FallbackPolicy | Mapping | None): Fallback values by slot.

    Returns:
        Any: The non-empty token value verbatim, or the selected fallback value.

    Raises:
        InvalidArgumentValue: If the token has no usable value and the slot is absent.
    """
    if token.value:
        return token.value

    slot = FallbackSlot.for_state(token.is_inverted, token.is_empty)
    fallback = FallbackPolicy.coerce(policy).get(slot)
    if fallback is None:
        logger.debug("No '%s' fallback for %r", slot, token.raw)
        raise InvalidArgumentValue(required_message)
    logger.debug("Using '%s' fallback for %r: %r", slot, token.raw, fallback)
    return fallback


def coerce_string(
    token: ClassifiedToken,
    policy: FallbackPolicy | Mapping[Any, Any] | None = None,
    message: str | None = None,
) -> Any:
    """Resolve `token` as a string value, or a caller-supplied fallback."""
    if message is None:
        example = f"--{token.key}=string" if token.is_flag else "<string>"
        message = f"Argument {token.raw} must have a string value, e.g. {example}"
    return resolve_fallback(token, message, policy)


def coerce_number(
    token: ClassifiedToken,
    policy: FallbackPolicy | Mapping[Any, Any] | None = None,
    message: str | None = None,
) -> int | float:
    """
    Resolve `token` as a number.

    Numeric fallbacks are returned as-is; string values go through
    `parse_number`.

    Raises:
        InvalidArgumentValue: If no value applies or it is not a number.
    """
    if message is None:
        example = f"--{token.key}=123" if token.is_flag else "123"
        message = f"Argument {token.raw} must have a number value, e.g. {example}"
    value = resolve_fallback(token, message, policy)

    number: int | float | None = None
    if isinstance(value, str):
        number = parse_number(value)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        number = None if math.isnan(value) else value
    if number is None:
        raise InvalidArgumentValue(message)
    return number


def coerce_boolean(token: ClassifiedToken, message: str | None = None) -> bool:
    """
    Resolve `token` as a boolean.

    A bare flag is True and a bare negated flag is False. An explicit value
    must be one of `TRUTHY` or `FALSEY` (case-sensitive) and is flipped when
    the flag is negated.

    Raises:
        InvalidArgumentValue: If the value is not a recognized boolean word.
    """
    value = token.value
    if not value:
        return not token.is_inverted
    if value in TRUTHY:
        return not token.is_inverted
    if value in FALSEY:
        return token.is_inverted

    if message is None:
        if token.is_flag:
            example = f"--{token.key} or --no-{token.key} or --{token.key}=yes"
        else:
            example = "yes"
        message = f"Argument {token.raw} must have a boolean value, e.g. {example}"
    raise InvalidArgumentValue(message)


def parse_number(text: str) -> int | float | None:
    """
    Convert `text` to a number, returning None when it is not one.

    Surrounding whitespace is ignored. Decimal integers and 0x/0o/0b literals
    give `int`; decimal fractions and exponents give `float`; "Infinity" with an
    optional sign gives an infinite float. NaN, digit separators and non-ASCII
    digits are rejected.
    """
    stripped = text.strip()
    if not stripped or not stripped.isascii() or "_" in stripped:
        return None
    if _RADIX_LITERAL.fullmatch(stripped):
        return int(stripped, 0)
    try:
        return int(stripped)
    except ValueError:
        pass

    unsigned = stripped.lstrip("+-")
    if unsigned.isalpha() and unsigned != _INFINITY:
        return None
    try:
        number = float(stripped)
    except ValueError:
        return None
    if math.isnan(number):
        return None
    return number
