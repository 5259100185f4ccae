"""
Argtoken

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import os
import sys
from typing import Any

from argtoken.config import find_config, loader
from argtoken.console import console
from argtoken.exceptions import ConfigError
from argtoken.exit import catch, exit_with
from argtoken.parser import ArgvParser
from argtoken.utils import setup_logging

HELP = """
    USAGE:
    argtoken [...options]

    OPTIONS:
    --help
      output usage information

    --string=<string>
      a string option

    --number=<number>
      a number option

    --[no-]boolean[=<boolean>]
      a boolean option

    --
      Process remaining arguments without any parsing"""


def get_demo_parser() -> ArgvParser:
    """Build the parser used when no config file is found."""
    parser = ArgvParser(program="argtoken", help_text=HELP, require_varargs=True)
    parser.add_option(
        "string",
        fallback={
            "enabled": "when --string, use this value, otherwise throw",
            "disabled": "when --no-string, use this value, otherwise throw",
            "enabled_empty": "when --no-string=, use this value, otherwise throw",
            "disabled_empty": "when --string=, use this value, otherwise throw",
        },
        help="a string option",
    )
    parser.add_option(
        "number",
        type="number",
        fallback={
            "enabled": 1,
            "disabled": -1,
            "enabled_empty": 0,
            "disabled_empty": 0,
        },
        help="a number option",
    )
    parser.add_option("boolean", type="boolean", help="a boolean option")
    return parser


def get_parser() -> ArgvParser:
    config_path = find_config()
    if config_path:
        return loader(config_path)
    return get_demo_parser()


def main(argv: list[str] | None = None) -> Any:
    if os.environ.get("ARGTOKEN_DEBUG"):
        setup_logging(console_log_level=logging.DEBUG)

    if argv is None:
        argv = sys.argv[1:]

    try:
        parser = get_parser()
    except ConfigError as error:
        exit_with("", error)

    @catch(parser.help_text)
    def run() -> int:
        options = parser.parse_args(argv)
        console.print(options)
        return 0

    return run()


if __name__ == "__main__":
    sys.exit(main())
