"""Utility functions for hashing and logging."""

from saltdigest.utils.hash import compute_file_hash, compute_hash, sha512, to_hex
from saltdigest.utils.logger import get_logger, log_event

__all__ = [
    "sha512",
    "to_hex",
    "compute_hash",
    "compute_file_hash",
    "get_logger",
    "log_event",
]
