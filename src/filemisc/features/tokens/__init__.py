"""Token (marker) files."""

from .token_files import has_token, read_token, write_token

__all__ = ["has_token", "read_token", "write_token"]
