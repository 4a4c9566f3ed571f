"""Unit tests for utility functions (pgx_new.utils).

Tests cover:
- ensure_dir
- write_bytes (truncate-on-create, missing parent)
- Rich output helpers
"""

from __future__ import annotations

from pathlib import Path

import pytest

from pgx_new.utils import (
    ensure_dir,
    print_error,
    print_step,
    print_success,
    print_summary_table,
    write_bytes,
)


# ---------------------------------------------------------------------------
# ensure_dir
# ---------------------------------------------------------------------------


class TestEnsureDir:
    @pytest.mark.unit
    def test_creates_new_dir(self, tmp_path: Path):
        new_dir = tmp_path / "new" / "nested" / "dir"
        result = ensure_dir(new_dir)
        assert new_dir.is_dir()
        assert result == new_dir.resolve()

    @pytest.mark.unit
    def test_existing_dir_no_error(self, tmp_path: Path):
        existing = tmp_path / "existing"
        existing.mkdir()
        assert ensure_dir(existing) == existing.resolve()

    @pytest.mark.unit
    def test_existing_file_raises(self, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(OSError):
            ensure_dir(blocker)


# ---------------------------------------------------------------------------
# write_bytes
# ---------------------------------------------------------------------------


class TestWriteBytes:
    @pytest.mark.unit
    def test_writes_content(self, tmp_path: Path):
        target = tmp_path / "file.txt"
        assert write_bytes(target, b"hello\n") == target
        assert target.read_bytes() == b"hello\n"

    @pytest.mark.unit
    def test_truncates_existing(self, tmp_path: Path):
        target = tmp_path / "file.txt"
        target.write_bytes(b"a much longer original body\n")
        write_bytes(target, b"short\n")
        assert target.read_bytes() == b"short\n"

    @pytest.mark.unit
    def test_missing_parent_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            write_bytes(tmp_path / "missing" / "file.txt", b"x")
        assert not (tmp_path / "missing").exists()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestRichHelpers:
    @pytest.mark.unit
    def test_print_summary_table(self, capsys):
        print_summary_table({"Name": "my_ext"}, title="Test Summary")
        out = capsys.readouterr().out
        assert "my_ext" in out

    @pytest.mark.unit
    def test_print_step(self, capsys):
        print_step("Created src/")
        assert "Created src/" in capsys.readouterr().out

    @pytest.mark.unit
    def test_print_success(self):
        print_success("done")

    @pytest.mark.unit
    def test_print_error(self):
        print_error("Something failed")

    @pytest.mark.unit
    def test_summary_table_prints_markup_literally(self, capsys):
        print_summary_table({"[bold]Name": "[/x]"}, title="Literal")
        out = capsys.readouterr().out
        assert "[/x]" in out
        assert "[bold]Name" in out
