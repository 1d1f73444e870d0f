"""Command line interface package."""

from filemisc.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
