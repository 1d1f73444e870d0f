"""Directory reset and flattening."""

from .clean import clean_dir
from .flatten import flatten

__all__ = ["clean_dir", "flatten"]
