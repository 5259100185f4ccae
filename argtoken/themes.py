# Argtoken — (c) 2025 rtj.dev LLC — MIT Licensed
"""Color constants used for rich console output."""


class OneColors:
    """One Dark palette subset used for diagnostics."""

    DARK_RED = "#BE5046"
