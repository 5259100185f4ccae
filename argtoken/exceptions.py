# Argtoken — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argtoken.

Argument errors carry the process exit code they map to, so a top-level
handler (see `argtoken.exit`) can terminate with the right status without
inspecting the error type.

Exception Hierarchy:
- ArgtokenError
    ├── ArgumentError            (exit_code=22, code="EINVAL")
    │   ├── InvalidArgumentValue
    │   ├── UnknownOption
    │   └── HelpRequested        (exit_code=0)
    ├── OptionDefinitionError
    └── ConfigError
"""


class ArgtokenError(Exception):
    """Base exception for argtoken."""


class ArgumentError(ArgtokenError):
    """
    Raised when a command-line token cannot be turned into a value.

    Attributes:
        message (str): Human-readable description of the failure.
        exit_code (int): Process exit code, 22 (EINVAL) unless overridden.
        code (str): Errno-style code, always "EINVAL".
    """

    exit_code: int = 22
    code: str = "EINVAL"

    def __init__(self, message: str = "", exit_code: int | None = None):
        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidArgumentValue(ArgumentError):
    """Exception raised when a value is missing or fails type coercion."""


class UnknownOption(ArgumentError):
    """Exception raised when a token does not match any registered option."""


class HelpRequested(ArgumentError):
    """Raised to output the help text and exit cleanly.

    The message is the help text itself.
    """

    exit_code = 0


class OptionDefinitionError(ArgtokenError):
    """Exception raised when an option is registered with an invalid definition."""


class ConfigError(ArgtokenError):
    """Exception raised when a parser configuration file cannot be loaded."""
