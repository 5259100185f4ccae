"""
Argtoken

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argv_parser import ArgvParser
from .coercion import (
    FALSEY,
    TRUTHY,
    coerce_boolean,
    coerce_number,
    coerce_string,
    parse_number,
    resolve_fallback,
)
from .fallback import FallbackPolicy, FallbackSlot
from .option import Option, OptionType
from .result import ParseResult, attempt
from .token import ClassifiedToken, classify

__all__ = [
    "ArgvParser",
    "ClassifiedToken",
    "FallbackPolicy",
    "FallbackSlot",
    "Option",
    "OptionType",
    "ParseResult",
    "attempt",
    "classify",
    "coerce_boolean",
    "coerce_number",
    "coerce_string",
    "parse_number",
    "resolve_fallback",
    "TRUTHY",
    "FALSEY",
]
