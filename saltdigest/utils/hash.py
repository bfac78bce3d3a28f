"""Hash primitive and byte helpers shared by every digest computation."""

import hashlib
import os
from collections.abc import Iterable, Iterator
from typing import BinaryIO

BytesLike = bytes | bytearray | memoryview

DIGEST_SIZE = hashlib.sha512().digest_size


def sha512(data: BytesLike) -> bytes:
    """
    Compute the raw SHA-512 digest of data.

    A new hashlib object is created per call, so the function holds no
    state and can be shared across the whole process.

    Args:
        data: Bytes-like content to hash

    Returns:
        64-byte digest
    """
    return hashlib.sha512(data).digest()


def sha512_stream(chunks: Iterable[BytesLike]) -> bytes:
    """SHA-512 over an iterable of chunks, equal to sha512 of their concatenation."""
    h = hashlib.sha512()
    for chunk in chunks:
        h.update(chunk)
    return h.digest()


def to_hex(data: BytesLike) -> str:
    """Lower-case hex, two digits per byte, no separators."""
    return bytes(data).hex()


def read_stream(stream: BinaryIO, chunk_size: int) -> Iterator[bytes]:
    """
    Read a stream to exhaustion in fixed-size chunks.

    Text-mode streams are accepted too; their chunks are UTF-8 encoded.

    Args:
        stream: Object with a read(size) method
        chunk_size: Maximum number of bytes (or characters) per read

    Yields:
        Non-empty byte chunks in stream order

    Raises:
        OSError: If the underlying read fails
    """
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            # EOF
            break
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        yield chunk


def compute_hash(content: str | bytes, salt: str | None = None) -> str:
    """
    Compute the salted SHA-512 hash of content.

    Args:
        content: String or bytes content to hash
        salt: Optional caller salt mixed in ahead of the origin tag

    Returns:
        Hexadecimal hash string (128 characters)

    Examples:
        >>> len(compute_hash("Hello, World!"))
        128

        >>> compute_hash("Hello, World!") == compute_hash(b"Hello, World!")
        True
    """
    from saltdigest.core.digest import SaltedDigest

    return SaltedDigest(salt).compute_hash(content).hexdigest


def compute_file_hash(filepath: str | os.PathLike, salt: str | None = None) -> str:
    """
    Compute the salted SHA-512 hash of file contents.

    Args:
        filepath: Path to file
        salt: Optional caller salt

    Returns:
        Hexadecimal hash string

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    from saltdigest.core.digest import SaltedDigest

    return SaltedDigest(salt).compute_hash_from_file(filepath).hexdigest
