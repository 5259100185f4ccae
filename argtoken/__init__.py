"""
Argtoken

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ArgumentError,
    HelpRequested,
    InvalidArgumentValue,
    UnknownOption,
)
from .parser import ArgvParser, ClassifiedToken, FallbackPolicy, classify

logger = logging.getLogger("argtoken")

__version__ = "0.1.0"

__all__ = [
    "ArgvParser",
    "ArgumentError",
    "ClassifiedToken",
    "FallbackPolicy",
    "HelpRequested",
    "InvalidArgumentValue",
    "UnknownOption",
    "classify",
]
