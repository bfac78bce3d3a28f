"""Core digest components."""

from saltdigest.core.digest import DigestResult, SaltedDigest, derive_iv

__all__ = ["SaltedDigest", "DigestResult", "derive_iv"]
