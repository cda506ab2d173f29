"""Unit tests for create_noiriko.utils."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from create_noiriko.utils import (
    append_file,
    format_duration,
    run_command,
    validate_project_name,
    write_file,
)


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# validate_project_name
# ---------------------------------------------------------------------------


class TestValidateProjectName:
    @pytest.mark.parametrize("name", ["my-app", "app", "a1-b2", "123"])
    def test_valid(self, name):
        assert validate_project_name(name) is None

    def test_empty_is_required(self):
        assert validate_project_name("") == "Project name is required"

    @pytest.mark.parametrize("name", ["MyApp", "my_app", "my app", "my.app", "app/"])
    def test_invalid_characters(self, name):
        assert validate_project_name(name) == (
            "Project name can only contain lowercase letters, numbers, and hyphens"
        )


# ---------------------------------------------------------------------------
# File helpers
# ---------------------------------------------------------------------------


class TestWriteFile:
    def test_creates_parent_directories(self, tmp_path: Path):
        target = tmp_path / "a" / "b" / "c.txt"
        write_file(target, "hello\n")
        assert target.read_text(encoding="utf-8") == "hello\n"

    def test_overwrites(self, tmp_path: Path):
        target = tmp_path / "f.txt"
        write_file(target, "one")
        write_file(target, "two")
        assert target.read_text(encoding="utf-8") == "two"


class TestAppendFile:
    def test_separates_with_blank_line(self, tmp_path: Path):
        target = tmp_path / ".env.example"
        target.write_text("A=1\n", encoding="utf-8")
        append_file(target, "B=2\n")
        assert target.read_text(encoding="utf-8") == "A=1\n\nB=2\n"

    def test_collapses_trailing_newlines(self, tmp_path: Path):
        target = tmp_path / ".env.example"
        target.write_text("A=1\n\n\n", encoding="utf-8")
        append_file(target, "B=2\n")
        assert target.read_text(encoding="utf-8") == "A=1\n\nB=2\n"

    def test_blank_existing_file_is_replaced(self, tmp_path: Path):
        target = tmp_path / ".env.example"
        target.write_text("\n", encoding="utf-8")
        append_file(target, "B=2\n")
        assert target.read_text(encoding="utf-8") == "B=2\n"


# ---------------------------------------------------------------------------
# format_duration
# ---------------------------------------------------------------------------


class TestFormatDuration:
    def test_seconds(self):
        assert format_duration(3.7) == "3.7s"

    def test_minutes(self):
        assert format_duration(65.2) == "1m 5s"

    def test_negative_clamped(self):
        assert format_duration(-1) == "0.0s"


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------


class TestRunCommand:
    @pytest.mark.asyncio
    async def test_success(self, mock_subprocess):
        proc = mock_subprocess(stdout="  done \n", stderr="", returncode=0)
        with patch("asyncio.create_subprocess_exec", return_value=proc) as create:
            rc, out, err = await run_command(["git", "init"], cwd="/tmp/x")
        assert (rc, out, err) == (0, "done", "")
        args, kwargs = create.call_args
        assert args == ("git", "init")
        assert kwargs["cwd"] == "/tmp/x"

    @pytest.mark.asyncio
    async def test_failure_returncode(self, mock_subprocess):
        proc = mock_subprocess(stderr="fatal: nope", returncode=128)
        with patch("asyncio.create_subprocess_exec", return_value=proc):
            rc, _, err = await run_command(["git", "commit"])
        assert rc == 128
        assert err == "fatal: nope"

    @pytest.mark.asyncio
    async def test_no_capture_passes_no_pipes(self, mock_subprocess):
        proc = mock_subprocess()
        proc.communicate.return_value = (None, None)
        with patch("asyncio.create_subprocess_exec", return_value=proc) as create:
            rc, out, err = await run_command(["pnpm", "install"], capture=False)
        assert (rc, out, err) == (0, "", "")
        assert create.call_args.kwargs["stdout"] is None
        assert create.call_args.kwargs["stderr"] is None

    @pytest.mark.asyncio
    async def test_missing_program_propagates(self):
        with patch(
            "asyncio.create_subprocess_exec",
            side_effect=FileNotFoundError("no such file"),
        ):
            with pytest.raises(FileNotFoundError):
                await run_command(["definitely-not-installed"])
