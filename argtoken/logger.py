# Argtoken — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for argtoken."""
import logging

logger: logging.Logger = logging.getLogger("argtoken")
