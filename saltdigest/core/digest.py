"""Salted SHA-512 digests keyed by the deployment's origin tag."""

import errno
import os
from dataclasses import dataclass
from functools import lru_cache
from itertools import chain
from pathlib import Path
from typing import BinaryIO

from saltdigest.config.settings import get_settings
from saltdigest.utils.hash import read_stream, sha512, sha512_stream, to_hex

DigestInput = str | bytes | bytearray | memoryview | BinaryIO


@dataclass(frozen=True)
class DigestResult:
    """Digest of one input, as raw bytes and as lower-case hex."""

    digest: bytes
    hexdigest: str

    @classmethod
    def from_digest(cls, digest: bytes) -> "DigestResult":
        return cls(digest=digest, hexdigest=to_hex(digest))


@lru_cache(maxsize=32)
def origin_digest(origin_tag: str) -> bytes:
    """Digest of the origin tag, written as a single line."""
    return sha512(f"{origin_tag}\n".encode("utf-8"))


def derive_iv(salt: str | None, origin_tag: str) -> bytes:
    """
    Build the salt buffer prepended to every input.

    The caller salt and the origin tag are hashed separately, so the IV is
    one digest wide without a caller salt and two digests wide with one.

    Args:
        salt: Optional caller salt; None and "" both mean no salt
        origin_tag: Identifying name of the deployment

    Returns:
        H(salt) + H(origin_tag) when salt is given, else H(origin_tag)
    """
    if not salt:
        return origin_digest(origin_tag)
    return sha512(salt.encode("utf-8")) + origin_digest(origin_tag)


class SaltedDigest:
    """
    Computes SHA-512 digests of data prefixed with a fixed, derived salt.

    Two deployments with different origin tags, or two callers with
    different salts, get different digests for the same data.

    The IV is fixed at construction. Each compute call returns an immutable
    DigestResult and also records it as the instance's latest result. An
    instance must not be shared between threads without external locking;
    the returned results can be.
    """

    def __init__(
        self,
        salt: str | None = None,
        origin_tag: str | None = None,
        chunk_size: int | None = None,
    ):
        """
        Initialize the digest computer.

        Args:
            salt: Optional caller salt
            origin_tag: Origin tag override (default: settings.origin_tag)
            chunk_size: Stream read size override (default: settings.read_chunk_size)

        Raises:
            ValueError: If the origin tag is empty or chunk_size is not positive
        """
        settings = get_settings()
        self._origin_tag = settings.origin_tag if origin_tag is None else origin_tag
        if not self._origin_tag:
            raise ValueError("origin_tag must not be empty")

        if chunk_size is None:
            chunk_size = settings.read_chunk_size
        elif chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._chunk_size = chunk_size
        self._iv = derive_iv(salt, self._origin_tag)

        # None until the first completed computation
        self._result: DigestResult | None = None

    @property
    def iv(self) -> bytes:
        return self._iv

    @property
    def origin_tag(self) -> str:
        return self._origin_tag

    @property
    def result(self) -> DigestResult | None:
        """Latest result, or None if nothing has been hashed yet."""
        return self._result

    @property
    def result_bytes(self) -> bytes:
        return self._result.digest if self._result else b""

    @property
    def result_hex(self) -> str:
        return self._result.hexdigest if self._result else ""

    @property
    def succeeded(self) -> bool:
        return self._result is not None

    def compute_hash(self, data: DigestInput) -> DigestResult:
        """
        Hash data behind the IV.

        Text is UTF-8 encoded, bytes-like values are used as-is and streams
        are read to exhaustion. Empty input is valid and hashes the IV alone.
        The latest result is only replaced once the digest is complete, so a
        failing stream leaves it untouched.

        Args:
            data: Text, bytes-like value or readable stream

        Returns:
            The new result

        Raises:
            TypeError: If data is none of the supported input kinds
            OSError: If reading the stream fails
        """
        if isinstance(data, str):
            chunks = [data.encode("utf-8")]
        elif isinstance(data, (bytes, bytearray, memoryview)):
            chunks = [data]
        elif hasattr(data, "read"):
            chunks = read_stream(data, self._chunk_size)
        else:
            raise TypeError(
                "compute_hash expects str, bytes-like or a readable stream, "
                f"got {type(data).__name__}"
            )

        result = DigestResult.from_digest(sha512_stream(chain([self._iv], chunks)))
        self._result = result
        return result

    def compute_hash_from_file(self, path: str | os.PathLike) -> DigestResult:
        """
        Hash the contents of a file.

        Args:
            path: Path to the file

        Returns:
            The new result

        Raises:
            FileNotFoundError: If no regular file exists at path
            OSError: If the file cannot be opened or read
        """
        # Report the path as given, not as normalized by Path
        raw = os.fspath(path)
        if not Path(raw).is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), raw)

        with open(raw, "rb") as f:
            return self.compute_hash(f)
