"""Salted SHA-512 digests of text, bytes, streams and files."""

from saltdigest.core.digest import DigestResult, SaltedDigest

__version__ = "0.1.0"

__all__ = ["SaltedDigest", "DigestResult"]
