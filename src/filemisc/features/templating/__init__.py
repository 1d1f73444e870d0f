"""Templated file copy."""

from .copy_file import Replacements, copy_file, replacement_map

__all__ = ["Replacements", "copy_file", "replacement_map"]
