"""
ftf CLI - Command-line interface.
"""

from ftf.cli.main import cli, main

__all__ = ["cli", "main"]
