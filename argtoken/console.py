# Argtoken — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for argtoken.

`console` writes parsed results to stdout. `error_console` writes help text
and diagnostics to stderr.
"""
from rich.console import Console

console = Console()
error_console = Console(stderr=True)
