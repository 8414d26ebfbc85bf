"""
CLI package for name_validator.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from name_validator.cli.app import app, main

__all__ = [
    "app",
    "main",
]
