"""Display management for CLI interface."""

from filemisc.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
