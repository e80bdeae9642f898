"""Tests for the build collaborator and the subprocess helper."""

import os
import stat
import subprocess
from unittest.mock import patch

import pytest

from src.installer.build import GopBuilder
from src.installer.errors import CommandError
from src.installer.process import run_command


class TestRunCommand:
    """Uniform error handling around subprocess.run."""

    @patch("src.installer.process.subprocess.run")
    def test_returns_captured_stdout(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess([], 0, stdout="out\n", stderr="")
        assert run_command(["echo", "out"], context="echo", capture_output=True) == "out\n"

    @patch("src.installer.process.subprocess.run")
    def test_uncaptured_returns_empty(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess([], 0)
        assert run_command(["true"], context="true") == ""
        assert mock_run.call_args[1]["capture_output"] is False

    @patch("src.installer.process.subprocess.run")
    def test_non_zero_exit_raises(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess([], 2, stdout="", stderr="boom\n")
        with pytest.raises(CommandError) as exc_info:
            run_command(["false"], context="thing", capture_output=True)
        assert exc_info.value.returncode == 2
        assert exc_info.value.command == ["false"]
        assert str(exc_info.value) == "thing failed with exit status 2: boom"

    @patch("src.installer.process.subprocess.run", side_effect=FileNotFoundError("No such file: 'go'"))
    def test_missing_executable_raises(self, _mock_run):
        with pytest.raises(CommandError) as exc_info:
            run_command(["go", "version"], context="go version")
        assert exc_info.value.returncode is None
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)


class TestGopBuilder:
    """Build entrypoint and installed version query."""

    @patch("src.installer.build.run_command")
    def test_build_sets_gobin(self, mock_run_command, tmp_path):
        builder = GopBuilder(str(tmp_path / "bin"), environ={"PATH": "/usr/bin"})
        builder.build_and_install(str(tmp_path / "src"))

        args, kwargs = mock_run_command.call_args
        assert args[0] == ["go", "run", "cmd/make.go", "-install"]
        assert kwargs["cwd"] == str(tmp_path / "src")
        assert kwargs["env"]["GOBIN"] == str(tmp_path / "bin")
        assert kwargs["env"]["PATH"] == "/usr/bin"

    @patch("src.installer.build.run_command")
    def test_custom_build_command(self, mock_run_command, tmp_path):
        GopBuilder(str(tmp_path), build_command=["make", "install"], environ={}).build_and_install("/src")
        assert mock_run_command.call_args[0][0] == ["make", "install"]

    @patch("src.installer.build.run_command")
    def test_query_strips_whitespace_and_v(self, mock_run_command, tmp_path):
        mock_run_command.return_value = " v1.2.3\n"
        assert GopBuilder(str(tmp_path), environ={"PATH": ""}).query_installed_version() == "1.2.3"
        assert mock_run_command.call_args[0][0][1:] == ["env", "GOPVERSION"]
        assert mock_run_command.call_args[1]["capture_output"] is True

    def test_prefers_freshly_installed_binary(self, tmp_path):
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir()
        gop = bin_dir / "gop"
        gop.write_text("#!/bin/sh\necho v1.0.0\n", encoding="utf-8")
        gop.chmod(gop.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

        builder = GopBuilder(str(bin_dir), environ={"PATH": os.defpath})
        assert builder.gop_executable() == str(gop)

    def test_falls_back_to_bare_name(self, tmp_path):
        builder = GopBuilder(str(tmp_path / "empty"), environ={"PATH": ""})
        assert builder.gop_executable() == "gop"
