"""
Summary: Shared UI-facing data structures for CLI presentation layers.
Why: Provide lightweight value objects without introducing import cycles.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class CommandResult:
    """Outcome of one CLI command."""

    success: bool
    message: str
    output: str | None = None


__all__ = ["CommandResult"]
