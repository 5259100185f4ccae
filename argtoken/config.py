# Argtoken — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for argtoken option definitions.

A config file describes one `ArgvParser` and its options:

    program: deploy
    description: Ship the current build.
    require_varargs: false
    options:
      - name: env
        help: target environment
      - name: retries
        type: number
        fallback:
          enabled: 3
          disabledEmpty: 0
      - name: dry-run
        type: boolean
        default: false
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from argtoken.exceptions import ConfigError, OptionDefinitionError
from argtoken.logger import logger
from argtoken.parser.argv_parser import ArgvParser
from argtoken.parser.fallback import FallbackPolicy
from argtoken.parser.option import OptionType


class RawFallback(BaseModel):
    """Fallback slots for one option; camelCase keys are accepted."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    enabled: Any = None
    disabled: Any = None
    enabled_empty: Any = Field(default=None, alias="enabledEmpty")
    disabled_empty: Any = Field(default=None, alias="disabledEmpty")

    def to_policy(self) -> FallbackPolicy:
        return FallbackPolicy(
            enabled=self.enabled,
            disabled=self.disabled,
            enabled_empty=self.enabled_empty,
            disabled_empty=self.disabled_empty,
        )


class RawOption(BaseModel):
    """Raw option model for argtoken configuration."""

    model_config = ConfigDict(extra="forbid")

    name: str
    type: OptionType = OptionType.STRING
    dest: str | None = None
    default: Any = None
    help: str = ""
    message: str | None = None
    fallback: RawFallback = Field(default_factory=RawFallback)

    @field_validator("name", mode="before")
    @classmethod
    def strip_flag_prefix(cls, value: Any) -> Any:
        if isinstance(value, str) and value.startswith("--"):
            return value[2:]
        return value

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return OptionType(value)
        return value


class ParserConfig(BaseModel):
    """Top-level argtoken configuration."""

    model_config = ConfigDict(extra="forbid")

    program: str = ""
    description: str = ""
    help_text: str = ""
    allow_positionals: bool = False
    require_varargs: bool = False
    options: list[RawOption] = Field(default_factory=list)

    def build(self) -> ArgvParser:
        """Create an `ArgvParser` with every configured option registered."""
        parser = ArgvParser(
            program=self.program,
            description=self.description,
            help_text=self.help_text,
            allow_positionals=self.allow_positionals,
            require_varargs=self.require_varargs,
        )
        for raw_option in self.options:
            parser.add_option(
                raw_option.name,
                type=raw_option.type,
                dest=raw_option.dest,
                fallback=raw_option.fallback.to_policy(),
                default=raw_option.default,
                help=raw_option.help,
                message=raw_option.message,
            )
        return parser


def find_config() -> Path | None:
    """Return the first existing config file from the standard locations."""
    candidates = [
        Path.cwd() / "argtoken.yaml",
        Path.cwd() / "argtoken.toml",
        Path.cwd() / ".argtoken.yaml",
        Path.cwd() / ".argtoken.toml",
    ]
    if os.environ.get("ARGTOKEN_CONFIG"):
        candidates.append(Path(os.environ["ARGTOKEN_CONFIG"]))
    candidates.extend(
        [
            Path.home() / ".config" / "argtoken" / "argtoken.yaml",
            Path.home() / ".config" / "argtoken" / "argtoken.toml",
        ]
    )
    return next((path for path in candidates if path.is_file()), None)


def load_config(file_path: Path | str) -> dict[str, Any]:
    """
    Read a YAML or TOML config file into a dictionary.

    Raises:
        ConfigError: If the file is missing, has an unsupported suffix, cannot be
        parsed, or does not contain a mapping.
    """
    path = Path(file_path)
    if not path.is_file():
        raise ConfigError(f"No such config file: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse '{file_path}': {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a mapping with a list of options.\n"
            "Example:\n"
            "program: 'mytool'\n"
            "options:\n"
            "  - name: 'verbose'\n"
            "    type: 'boolean'"
        )
    return raw_config


def loader(file_path: Path | str) -> ArgvParser:
    """
    Load an `ArgvParser` from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file.

    Returns:
        ArgvParser: A parser with all configured options registered.

    Raises:
        ConfigError: If the file cannot be read or its contents are invalid.
    """
    raw_config = load_config(file_path)
    try:
        parser = ParserConfig.model_validate(raw_config).build()
    except (ValidationError, OptionDefinitionError) as error:
        raise ConfigError(f"Invalid configuration in '{file_path}': {error}") from error
    logger.debug("Loaded %d option(s) from '%s'", len(parser.options), file_path)
    return parser
