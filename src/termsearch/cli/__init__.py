"""
Command-line interface for termsearch.

Exposes the ``termsearch`` click group and its ``find`` command.
"""

from .main import cli, main

__all__ = [
    "cli",
    "main",
]
