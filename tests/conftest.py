"""
Shared fixtures for duplicate detection tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict, List, Tuple


class RecordingReporter:
    """Reporter double that keeps every call for assertions."""

    def __init__(self):
        self.searches: List[Tuple[str, object]] = []
        self.warnings: List[Tuple[str, Exception]] = []
        self.rendered: List[list] = []

    def describe_search(self, root, file_filter):
        self.searches.append((root, file_filter))

    def report_warning(self, path, error):
        self.warnings.append((path, error))

    def render(self, groups):
        self.rendered.append(list(groups))

    @property
    def warned_paths(self) -> List[str]:
        return [path for path, _ in self.warnings]


def group_sets(groups) -> set:
    """Order-independent view of duplicate groups: a set of frozensets of paths."""
    return {frozenset(group.paths) for group in groups}


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate detection scenarios:
    - 2 identical .txt files + 1 identical copy in a subdirectory (duplicates)
    - 2 identical .txt files of another size (duplicates)
    - 2 unique files with the same size but different content
    - 2 empty files (never candidates)
    - 1 .tmp file with the same content as the first group
    """
    files = {}

    # Duplicate group #1 (1KB of 'A')
    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    # Duplicate pair #2 (2KB of 'B')
    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.txt"
    files["dup2_b"] = temp_dir / "dup2_b.txt"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    # Same size, different content
    files["unique1"] = temp_dir / "unique1.txt"
    files["unique1"].write_bytes(b"C" * 1500)
    files["unique2"] = temp_dir / "unique2.txt"
    files["unique2"].write_bytes(b"D" * 1500)

    # Empty files (0 bytes, identical "content")
    files["empty1"] = temp_dir / "empty1.txt"
    files["empty1"].write_bytes(b"")
    files["empty2"] = temp_dir / "empty2.txt"
    files["empty2"].write_bytes(b"")

    # Different extension, same content as group #1
    files["other_ext"] = temp_dir / "ignore.tmp"
    files["other_ext"].write_bytes(content_a)

    # Subdirectory with duplicates
    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    return files
