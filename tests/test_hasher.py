"""
Unit tests for hash_file and HasherImpl.
Verifies streaming SHA-256 digests, xxHash64 quick-check hashes, caching and read failures.
"""
import hashlib
import pytest
from unittest import mock
from duplifind.core.hasher import (
    HasherImpl, Sha256AlgorithmImpl, XXHashAlgorithmImpl, hash_file, CHUNK_SIZE, QUICK_CHECK_SIZE)
from duplifind.core.models import File


class TestHashFile:
    """Test the streaming full-content hash."""

    def test_known_sha256_digest(self, tmp_path):
        path = tmp_path / "abc.txt"
        path.write_bytes(b"abc")
        assert hash_file(path) == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

    def test_digest_is_lowercase_hex_of_64_chars(self, tmp_path):
        path = tmp_path / "data.bin"
        path.write_bytes(bytes(range(256)) * 10)
        digest = hash_file(str(path))
        assert len(digest) == 64
        assert digest == digest.lower()
        int(digest, 16)

    def test_multi_chunk_file_matches_one_shot_digest(self, tmp_path):
        """Files spanning many chunks (and a partial last chunk) hash like the whole content."""
        content = b"0123456789abcdef" * (CHUNK_SIZE // 4) + b"tail"
        path = tmp_path / "big.bin"
        path.write_bytes(content)
        assert hash_file(path) == hashlib.sha256(content).hexdigest()

    def test_chunk_size_does_not_affect_result(self, tmp_path):
        path = tmp_path / "data.bin"
        path.write_bytes(b"xyz" * 5000)
        assert hash_file(path, chunk_size=7) == hash_file(path, chunk_size=1 << 20)

    def test_identical_content_same_digest(self, tmp_path):
        (tmp_path / "a").write_bytes(b"same bytes")
        (tmp_path / "b").write_bytes(b"same bytes")
        assert hash_file(tmp_path / "a") == hash_file(tmp_path / "b")

    def test_different_content_different_digest(self, tmp_path):
        (tmp_path / "a").write_bytes(b"A" * 1024)
        (tmp_path / "b").write_bytes(b"B" * 1024)
        assert hash_file(tmp_path / "a") != hash_file(tmp_path / "b")

    def test_missing_file_raises_oserror(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            hash_file(tmp_path / "missing.bin")

    def test_read_failure_midway_raises_oserror(self, tmp_path):
        path = tmp_path / "data.bin"
        path.write_bytes(b"X" * (CHUNK_SIZE * 3))

        real_open = open
        calls = {"reads": 0}

        class FailingReader:
            def __init__(self, f):
                self.f = f

            def __enter__(self):
                return self

            def __exit__(self, *exc):
                self.f.close()

            def read(self, n):
                calls["reads"] += 1
                if calls["reads"] == 2:
                    raise OSError("I/O error")
                return self.f.read(n)

        with mock.patch("builtins.open", lambda p, mode: FailingReader(real_open(p, mode))):
            with pytest.raises(OSError, match="I/O error"):
                hash_file(path)

    def test_algorithm_is_pluggable(self, tmp_path):
        path = tmp_path / "data.bin"
        path.write_bytes(b"content")
        assert hash_file(path, XXHashAlgorithmImpl()) != hash_file(path, Sha256AlgorithmImpl())
        assert len(hash_file(path, XXHashAlgorithmImpl())) == 16


class TestHasherImpl:
    """Test File-based hashing with caching."""

    def test_full_hash_is_cached(self, tmp_path):
        path = tmp_path / "data.bin"
        path.write_bytes(b"test" * 100)
        file = File(path=str(path), size=400)

        hasher = HasherImpl()
        first = hasher.compute_full_hash(file)
        assert file.hashes.full == first

        # Second call returns cached value (no I/O)
        path.unlink()
        assert hasher.compute_full_hash(file) == first

    def test_front_hash_covers_only_quick_check_window(self, tmp_path):
        head = b"H" * QUICK_CHECK_SIZE
        (tmp_path / "a").write_bytes(head + b"tail one")
        (tmp_path / "b").write_bytes(head + b"tail two")
        file_a = File(path=str(tmp_path / "a"), size=QUICK_CHECK_SIZE + 8)
        file_b = File(path=str(tmp_path / "b"), size=QUICK_CHECK_SIZE + 8)

        hasher = HasherImpl()
        front_a = hasher.compute_front_hash(file_a)
        assert isinstance(front_a, bytes)
        assert len(front_a) == 8  # xxHash64 = 8 bytes
        assert front_a == hasher.compute_front_hash(file_b)
        assert file_a.hashes.front == front_a
        assert hasher.compute_full_hash(file_a) != hasher.compute_full_hash(file_b)

    def test_front_hash_differs_for_different_heads(self, tmp_path):
        (tmp_path / "a").write_bytes(b"A" + b"x" * 100)
        (tmp_path / "b").write_bytes(b"B" + b"x" * 100)
        hasher = HasherImpl()
        assert hasher.compute_front_hash(File(str(tmp_path / "a"), 101)) != \
            hasher.compute_front_hash(File(str(tmp_path / "b"), 101))

    def test_deleted_file_raises_and_caches_nothing(self, tmp_path):
        """Unlike a silent empty hash, a read failure must surface and leave no partial result."""
        temp_file = tmp_path / "deleted.txt"
        temp_file.write_bytes(b"content")
        file = File(path=str(temp_file), size=7)
        temp_file.unlink()

        hasher = HasherImpl()
        with pytest.raises(OSError):
            hasher.compute_full_hash(file)
        with pytest.raises(OSError):
            hasher.compute_front_hash(file)
        assert file.hashes.full is None
        assert file.hashes.front is None
