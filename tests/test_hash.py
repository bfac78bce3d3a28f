"""Tests for hash utilities."""

import hashlib
import io

import pytest

from saltdigest.utils.hash import (
    DIGEST_SIZE,
    compute_file_hash,
    compute_hash,
    read_stream,
    sha512,
    sha512_stream,
    to_hex,
)

EMPTY_SHA512 = (
    "cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
    "47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e"
)
ABC_SHA512 = (
    "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
    "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
)


def test_sha512_known_vectors():
    """Test the primitive against published SHA-512 vectors."""
    assert DIGEST_SIZE == 64
    assert sha512(b"").hex() == EMPTY_SHA512
    assert sha512(b"abc").hex() == ABC_SHA512


def test_sha512_stream_matches_concatenation():
    """Test that chunked hashing equals hashing the joined chunks."""
    assert sha512_stream([b"a", b"", b"bc"]) == sha512(b"abc")
    assert sha512_stream([]) == sha512(b"")


def test_to_hex():
    """Test lower-case hex formatting."""
    assert to_hex(b"\x00\x0f\xab\xff") == "000fabff"
    assert to_hex(bytearray(b"\x10")) == "10"


def test_read_stream_chunks():
    """Test that streams are read to exhaustion in bounded chunks."""
    chunks = list(read_stream(io.BytesIO(b"abcdefg"), 3))

    assert chunks == [b"abc", b"def", b"g"]


def test_read_stream_text_mode():
    """Test that text streams are UTF-8 encoded."""
    chunks = list(read_stream(io.StringIO("héllo"), 2))

    assert b"".join(chunks) == "héllo".encode("utf-8")


def test_compute_hash_string():
    """Test hashing of string content."""
    content = "Hello, World!"
    hash_result = compute_hash(content)

    # Should return 128-character hex string
    assert len(hash_result) == 128
    assert all(c in "0123456789abcdef" for c in hash_result)

    # Should be deterministic
    assert compute_hash(content) == hash_result


def test_compute_hash_bytes():
    """Test hashing of bytes content."""
    assert compute_hash(b"Hello, World!") == compute_hash("Hello, World!")


def test_compute_hash_different_content():
    """Test that different content produces different hashes."""
    assert compute_hash("Content A") != compute_hash("Content B")


def test_compute_hash_is_salted():
    """Test that the result differs from the plain SHA-512."""
    assert compute_hash("abc") != ABC_SHA512
    assert compute_hash("abc", salt="pepper") != compute_hash("abc")


def test_compute_hash_empty():
    """Test hashing empty content."""
    iv = hashlib.sha512(b"saltdigest\n").digest()

    assert compute_hash("") == hashlib.sha512(iv).hexdigest()


def test_compute_file_hash(sample_file, sample_bytes):
    """Test that file hashing matches in-memory hashing."""
    assert compute_file_hash(sample_file) == compute_hash(sample_bytes)
    assert compute_file_hash(str(sample_file), salt="s") == compute_hash(sample_bytes, salt="s")


def test_compute_file_hash_missing(tmp_path):
    """Test that a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        compute_file_hash(tmp_path / "missing.txt")
