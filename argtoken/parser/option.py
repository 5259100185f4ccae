# Argtoken — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionType` and `Option`, the declarative description of one named
flag handled by `ArgvParser`.

`OptionType` accepts config-friendly aliases:
    OptionType("str")   → OptionType.STRING
    OptionType("int")   → OptionType.NUMBER
    OptionType("flag")  → OptionType.BOOLEAN
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from argtoken.parser.fallback import FallbackPolicy
from argtoken.parser.token import ClassifiedToken


class OptionType(Enum):
    """
    The value type an option coerces its token to.

    Members:
        STRING: Keep the raw value (`--name=value`).
        NUMBER: Convert to int or float (`--count=3`).
        BOOLEAN: Interpret `--flag`, `--no-flag` and `--flag=yes` style values.

    Aliases:
        - "str" → "string"
        - "int", "float", "num" → "number"
        - "bool", "flag" → "boolean"
    """

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"

    @classmethod
    def choices(cls) -> list[OptionType]:
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "int": "number",
            "float": "number",
            "num": "number",
            "bool": "boolean",
            "flag": "boolean",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


@dataclass
class Option:
    """
    Represents one named flag.

    Attributes:
        name (str): Flag name without the `--` prefix (e.g. "dry-run").
        dest (str): Key used in the parsed result.
        type (OptionType): Value type the token is coerced to.
        fallback (FallbackPolicy): Values for `--name`, `--no-name`, `--name=`
            and `--no-name=`. Ignored for boolean options.
        default (Any): Value used when the flag does not appear at all.
        help (str): Help text for the generated usage block.
        message (str | None): Custom error message replacing the generated one.
    """

    name: str
    dest: str
    type: OptionType = OptionType.STRING
    fallback: FallbackPolicy = field(default_factory=FallbackPolicy)
    default: Any = None
    help: str = ""
    message: str | None = None

    def coerce(self, token: ClassifiedToken) -> Any:
        """Coerce a classified token according to this option's type."""
        if self.type is OptionType.BOOLEAN:
            return token.boolean(self.message)
        if self.type is OptionType.NUMBER:
            return token.number(self.fallback, self.message)
        return token.string(self.fallback, self.message)

    def get_usage_text(self) -> str:
        """Return the flag as it appears in the OPTIONS block."""
        if self.type is OptionType.BOOLEAN:
            return f"--[no-]{self.name}[=<boolean>]"
        return f"--{self.name}=<{self.type.value}>"
