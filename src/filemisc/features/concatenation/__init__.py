"""Byte-exact file concatenation."""

from .concat import concat

__all__ = ["concat"]
