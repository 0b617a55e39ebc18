"""
Integration tests for DeduplicationCommand and find_duplicates — scanner + pipeline wiring.
"""
import logging
import pytest
from pathlib import Path
from conftest import group_sets
from duplifind import DeduplicationCommand, DeduplicationParams, FileFilter, find_duplicates


class TestDeduplicationCommand:

    def test_execute_returns_groups_and_stats(self, test_files, temp_dir):
        params = DeduplicationParams.from_cli_values(str(temp_dir), "*.txt")

        command = DeduplicationCommand()
        groups, stats = command.execute(params)

        # Without the .tmp copy: 1KB group of 3 files, 2KB pair
        assert sorted(g.duplicate_count for g in groups) == [2, 3]
        assert "size" in stats.stage_stats
        assert "full" in stats.stage_stats
        assert all(f.name.endswith(".txt") for f in command.get_files())

    def test_empty_scan_returns_no_groups(self, temp_dir):
        params = DeduplicationParams.from_cli_values(str(temp_dir), "*.txt")
        groups, _ = DeduplicationCommand().execute(params)
        assert groups == []

    def test_execute_invokes_progress_callback(self, test_files, temp_dir):
        stages = []
        params = DeduplicationParams.from_cli_values(str(temp_dir))
        DeduplicationCommand().execute(
            params, progress_callback=lambda stage, current, total: stages.append(stage))
        assert stages[0] == "scanning"
        assert "Size grouping" in stages
        assert "Full Hash" in stages

    def test_missing_root_propagates(self, temp_dir):
        params = DeduplicationParams.from_cli_values(str(temp_dir / "nope"))
        with pytest.raises(FileNotFoundError):
            DeduplicationCommand().execute(params)

    def test_get_files_returns_copy(self, test_files, temp_dir):
        command = DeduplicationCommand()
        command.execute(DeduplicationParams.from_cli_values(str(temp_dir)))
        files = command.get_files()
        files.clear()
        assert len(command.get_files()) == 8

    def test_from_cli_values_compiles_filter(self, temp_dir):
        params = DeduplicationParams.from_cli_values(str(temp_dir), "report.txt", workers=3, quick_check=False)
        assert params.file_filter == FileFilter.from_pattern("report.txt")
        assert params.workers == 3
        assert params.quick_check is False

    def test_empty_root_rejected(self):
        with pytest.raises(ValueError, match="Root directory cannot be empty"):
            DeduplicationParams.from_cli_values("")


class TestFindDuplicatesFunction:

    def test_accepts_path_and_filter(self, test_files, temp_dir):
        groups = find_duplicates(temp_dir, FileFilter.from_pattern("*.tmp"))
        # A single .tmp file has no same-size peer in scope
        assert groups == []

    def test_exact_name_filter_end_to_end(self, tmp_path):
        (tmp_path / "x").mkdir()
        (tmp_path / "y").mkdir()
        (tmp_path / "x" / "report.txt").write_bytes(b"quarterly")
        (tmp_path / "y" / "report.txt").write_bytes(b"quarterly")
        (tmp_path / "y" / "copy.txt").write_bytes(b"quarterly")

        groups = find_duplicates(str(tmp_path), FileFilter.from_pattern("report.txt"))

        assert group_sets(groups) == {
            frozenset({str(tmp_path / "x" / "report.txt"), str(tmp_path / "y" / "report.txt")})}

    def test_warnings_go_to_reporter(self, tmp_path, reporter, monkeypatch):
        (tmp_path / "a").write_bytes(b"same")
        (tmp_path / "b").write_bytes(b"same")

        real_open = open

        def failing_open(path, *args, **kwargs):
            if Path(path).name == "b":
                raise PermissionError(13, "Permission denied", str(path))
            return real_open(path, *args, **kwargs)

        monkeypatch.setattr("builtins.open", failing_open)
        groups = find_duplicates(tmp_path, reporter=reporter, workers=2)

        assert groups == []
        assert reporter.warned_paths == [str(tmp_path / "b")]

    def test_default_reporter_logs_warnings(self, tmp_path, caplog, monkeypatch):
        caplog.set_level(logging.WARNING)
        (tmp_path / "a").write_bytes(b"same")
        (tmp_path / "b").write_bytes(b"same")

        real_open = open

        def failing_open(path, *args, **kwargs):
            if Path(path).name == "a":
                raise PermissionError("denied")
            return real_open(path, *args, **kwargs)

        monkeypatch.setattr("builtins.open", failing_open)

        assert find_duplicates(tmp_path) == []
        assert "Could not hash" in caplog.text
