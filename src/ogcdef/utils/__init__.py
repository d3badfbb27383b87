"""Common utility functions for ogcdef."""

from ogcdef.utils.hashing import calculate_file_sha256, format_sha256
from ogcdef.utils.timestamps import get_iso_timestamp

__all__ = [
    "get_iso_timestamp",
    "calculate_file_sha256",
    "format_sha256",
]
