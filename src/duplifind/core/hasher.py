"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements file hashing utilities using the File class and pluggable hash algorithms.

Full hashes are SHA-256 hex digests computed by streaming the file in fixed-size
chunks, so memory use does not depend on file size. Quick-check hashes are xxHash64
digests of the first QUICK_CHECK_SIZE bytes, used only to split same-size groups
before the full pass. Both are cached in the File object's FileHashes container.

Read errors are raised as OSError and never cached.
"""

import hashlib
import os
from typing import Union

import xxhash

from duplifind.core.models import File
from duplifind.core.interfaces import Hasher, HashAlgorithm

CHUNK_SIZE = 4096
QUICK_CHECK_SIZE = 64 * 1024


# Use the same way to implement and use any other hashing algorithm
class Sha256AlgorithmImpl(HashAlgorithm):
    name = "sha256"

    @staticmethod
    def create():
        return hashlib.sha256()


class XXHashAlgorithmImpl(HashAlgorithm):
    name = "xxh64"

    @staticmethod
    def create():
        return xxhash.xxh64()


def hash_file(
        path: Union[str, os.PathLike],
        algorithm: HashAlgorithm = Sha256AlgorithmImpl(),
        chunk_size: int = CHUNK_SIZE
) -> str:
    """
    Returns the lowercase hex digest of the file's content.
    Raises OSError if the file cannot be opened or a read fails.
    """
    digest = algorithm.create()
    with open(path, 'rb') as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            digest.update(chunk)
    return digest.hexdigest()


class HasherImpl(Hasher):
    """
    A hasher that computes and caches hashes for File objects.
    """

    def __init__(
            self,
            algorithm: HashAlgorithm = None,
            quick_algorithm: HashAlgorithm = None,
            chunk_size: int = CHUNK_SIZE,
            quick_check_size: int = QUICK_CHECK_SIZE
    ):
        self.algorithm = algorithm or Sha256AlgorithmImpl()
        self.quick_algorithm = quick_algorithm or XXHashAlgorithmImpl()
        self.chunk_size = chunk_size
        self.quick_check_size = quick_check_size

    def compute_full_hash(self, file: File) -> str:
        """Computes and caches the digest of the whole file."""
        if file.hashes.full is not None:
            return file.hashes.full
        result = hash_file(file.path, self.algorithm, self.chunk_size)
        file.hashes.full = result
        return result

    def compute_front_hash(self, file: File) -> bytes:
        """Computes and caches the digest of the first quick_check_size bytes."""
        if file.hashes.front is not None:
            return file.hashes.front
        digest = self.quick_algorithm.create()
        with open(file.path, 'rb') as f:
            digest.update(f.read(self.quick_check_size))
        result = digest.digest()
        file.hashes.front = result
        return result
