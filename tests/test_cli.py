import logging
import pytest
from unittest.mock import patch, MagicMock
from click.testing import CliRunner
from codefeed.cli import main, resolve_root
from codefeed.core.aggregator import SEPARATOR
from codefeed.core.errors import RootResolutionError, TokenizerError


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def token_counter():
    with patch('codefeed.cli.TokenCounter') as mock_cls:
        counter = MagicMock()
        counter.count.return_value = 3
        mock_cls.return_value = counter
        yield mock_cls


class TestCli:
    def test_single_file_with_report(self, runner, temp_workspace, monkeypatch, token_counter):
        (temp_workspace / "a.txt").write_bytes(b"0123456789")
        monkeypatch.chdir(temp_workspace)

        result = runner.invoke(main, ["--report"])

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[:6] == [
            f"└── {temp_workspace.name}",
            "└── a.txt",
            SEPARATOR,
            "File: a.txt",
            SEPARATOR,
            "0123456789",
        ]
        assert lines[6] == f"Analyzing: {temp_workspace}"
        assert lines[7] == "Files analyzed: 1"
        assert lines[8] == "Estimated tokens: 3"
        assert lines[9].startswith("Time elapsed: ")
        assert result.stderr == ""
        token_counter.assert_called_once_with("cl100k_base")

    def test_no_report_by_default(self, runner, temp_workspace, monkeypatch, token_counter):
        (temp_workspace / "a.txt").write_text("hello")
        monkeypatch.chdir(temp_workspace)

        result = runner.invoke(main, [])

        assert result.exit_code == 0
        assert "Estimated tokens" not in result.stdout
        token_counter.assert_not_called()

    def test_binary_file(self, runner, temp_workspace, monkeypatch):
        (temp_workspace / "blob.bin").write_bytes(b"\x00\x01\x02")
        monkeypatch.chdir(temp_workspace)

        result = runner.invoke(main, [])

        assert result.exit_code == 0
        assert "└── blob.bin [Non-text file]" in result.stdout
        assert "File: " not in result.stdout
        assert result.stderr == ""

    def test_num_files_limit(self, runner, temp_workspace, monkeypatch):
        (temp_workspace / "a.txt").write_text("first")
        (temp_workspace / "b.txt").write_text("second")
        monkeypatch.chdir(temp_workspace)

        result = runner.invoke(main, ["-n", "1"])

        assert result.exit_code == 0
        assert result.stdout.count("File: ") == 1
        assert "File: a.txt" in result.stdout
        assert result.stderr == f"Skipping file {temp_workspace / 'b.txt'}: Maximum file limit (1) reached\n"

    def test_file_size_limit(self, runner, temp_workspace, monkeypatch):
        (temp_workspace / "big.txt").write_bytes(b"x" * 2048)
        monkeypatch.chdir(temp_workspace)

        result = runner.invoke(main, ["--file-size", "1024"])

        assert result.exit_code == 0
        assert "File exceeds maximum size (1.00 KB)" in result.stderr

    def test_total_size_limit(self, runner, temp_workspace, monkeypatch):
        (temp_workspace / "a.txt").write_bytes(b"x" * 10)
        monkeypatch.chdir(temp_workspace)

        result = runner.invoke(main, ["-t", "5"])

        assert result.exit_code == 0
        assert "Total size limit (5 bytes) reached" in result.stderr

    def test_error_summary_logged_under_module_logger(self, runner, temp_workspace, monkeypatch, caplog):
        (temp_workspace / "a.txt").write_bytes(b"x" * 10)
        monkeypatch.chdir(temp_workspace)
        caplog.set_level(logging.DEBUG, logger="codefeed.cli")

        result = runner.invoke(main, ["-t", "5"])

        assert result.exit_code == 0
        records = [r for r in caplog.records if "errors encountered" in r.getMessage()]
        assert len(records) == 1
        assert records[0].name == "codefeed.cli"

    def test_respects_gitignore(self, runner, sample_repo, sample_tree, monkeypatch):
        monkeypatch.chdir(sample_repo)

        result = runner.invoke(main, [])

        assert result.exit_code == 0
        assert result.stdout.startswith(sample_tree + "\n")
        assert "node_modules" not in result.stdout
        assert "debug.log" not in result.stdout

    def test_negative_limit_rejected(self, runner):
        result = runner.invoke(main, ["--num-files", "-1"])

        assert result.exit_code == 2

    def test_tokenizer_failure_is_fatal(self, runner, temp_workspace, monkeypatch):
        (temp_workspace / "a.txt").write_text("hello")
        monkeypatch.chdir(temp_workspace)

        with patch('codefeed.cli.TokenCounter', side_effect=TokenizerError("Failed to get BPE tokenizer")):
            result = runner.invoke(main, ["-r"])

        assert result.exit_code == 1
        assert "Failed to get BPE tokenizer" in result.stderr

    def test_help_lists_limits(self, runner):
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        for flag in ("--report", "--file-size", "--total-size", "--num-files"):
            assert flag in result.output


class TestResolveRoot:
    def test_returns_cwd(self, temp_workspace, monkeypatch):
        monkeypatch.chdir(temp_workspace)
        assert resolve_root() == temp_workspace

    def test_failure_raises(self):
        with patch('codefeed.cli.os.getcwd', side_effect=FileNotFoundError("gone")):
            with pytest.raises(RootResolutionError, match="Failed to get current directory"):
                resolve_root()
