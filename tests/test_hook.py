"""Tests for the post-edit hook."""

import logging

import pytest

from coding_police.config import Thresholds
from coding_police.hook import handle_tool_after, should_scan

LONG_FILE = "\n".join(f"const x = 1; // line {i + 1}" for i in range(1050))


@pytest.fixture
def long_file(work_dir):
    path = work_dir / "big.ts"
    path.write_text(LONG_FILE)
    return path


class TestShouldScan:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("src/app.ts", True),
            ("main.py", True),
            ("readme.md", False),
            ("types.d.ts", False),
            ("package-lock.json", False),
            ("", False),
        ],
    )
    def test_path_filter(self, path, expected):
        assert should_scan(path, Thresholds()) is expected

    def test_exclude_patterns(self):
        thresholds = Thresholds(exclude_patterns=("legacy/",))
        assert not should_scan("src/legacy/old.ts", thresholds)
        assert should_scan("src/new.ts", thresholds)


class TestHandleToolAfter:
    """Report appended only for scanned, violating files."""

    def test_ignores_other_tools(self, long_file):
        assert handle_tool_after("bash", str(long_file), "done") == "done"

    def test_ignores_missing_tool(self, long_file):
        assert handle_tool_after(None, str(long_file), "done") == "done"

    @pytest.mark.parametrize("tool", [5, 1.5, True, ["write"], {"name": "edit"}])
    def test_ignores_non_string_tool(self, long_file, tool):
        assert handle_tool_after(tool, str(long_file), "done") == "done"

    @pytest.mark.parametrize("path", [None, 7, ["big.ts"], {"file": "big.ts"}])
    def test_ignores_non_string_path(self, long_file, path):
        assert handle_tool_after("write", path, "done") == "done"

    def test_non_string_worktree_falls_back_to_cwd(self, long_file):
        result = handle_tool_after("write", "big.ts", "done", worktree=3)
        assert "FILE TOO LONG" in result

    @pytest.mark.parametrize("title", ["readme.md", "types.d.ts", "package-lock.json", ""])
    def test_ignores_unscanned_paths(self, title):
        assert handle_tool_after("write", title, "done") == "done"

    def test_missing_file(self):
        assert handle_tool_after("edit", "nowhere.ts", "done") == "done"

    def test_clean_file(self, work_dir):
        (work_dir / "ok.ts").write_text("export const a = 1;\n")
        assert handle_tool_after("edit", "ok.ts", "done") == "done"

    def test_appends_report(self, long_file):
        result = handle_tool_after("write", str(long_file), "done")
        assert result.startswith("done\n\nCODING STANDARDS VIOLATION (coding-police)\n")
        assert "=" * 50 in result
        assert "1. FILE TOO LONG: 1050 lines (limit: 1000, over by 50)." in result
        assert "REQUIRED ACTIONS:" in result
        assert "split files exceeding 1000 lines" in result
        assert "break functions over 100 lines" in result
        assert result.endswith("Fix these violations before proceeding.")

    def test_tool_name_case_insensitive(self, long_file):
        assert "FILE TOO LONG" in handle_tool_after("Edit", str(long_file), "done")

    def test_relative_path_resolved_against_worktree(self, tmp_path):
        project = tmp_path / "project"
        (project / "src").mkdir(parents=True)
        (project / "src" / "big.ts").write_text(LONG_FILE)
        result = handle_tool_after("write", "src/big.ts", "done", worktree=project)
        assert "FILE TOO LONG" in result

    def test_relative_path_defaults_to_cwd(self, long_file):
        assert "FILE TOO LONG" in handle_tool_after("write", "big.ts", "done")

    def test_explicit_thresholds(self, long_file):
        thresholds = Thresholds(max_file_lines=2000)
        assert handle_tool_after("write", str(long_file), "done", thresholds=thresholds) == "done"

    def test_exclude_patterns_from_thresholds(self, long_file):
        thresholds = Thresholds(exclude_patterns=("big",))
        assert handle_tool_after("write", str(long_file), "done", thresholds=thresholds) == "done"

    def test_project_config_used(self, long_file, work_dir):
        (work_dir / "coding-police.toml").write_text("[coding-police]\nmax-file-lines = 5000\n")
        assert handle_tool_after("write", str(long_file), "done") == "done"

    def test_invalid_config_falls_back_to_defaults(self, long_file, work_dir, caplog):
        caplog.set_level(logging.WARNING, logger="coding_police")
        (work_dir / "coding-police.toml").write_text("[coding-police\n")
        result = handle_tool_after("write", str(long_file), "done")
        assert "FILE TOO LONG" in result
        assert "Using default thresholds" in caplog.text

    def test_undecodable_bytes_do_not_crash(self, work_dir):
        path = work_dir / "bin.py"
        path.write_bytes(b"x = 1\n\xff\xfe\n" * 600)
        result = handle_tool_after("write", str(path), "done")
        assert "FILE TOO LONG" in result
