"""Tests for the copypath CLI: argument parsing, one-shot runs and shell lines."""

import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from copypath.cli.arg_parser import parse_args
from copypath.cli.log_setup import LOGGER_NAME, configure_logging
from copypath.cli.main import main
from copypath.cli.shell import execute_line
from copypath.extension import Extension


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the user's real ~/.copypath and cwd configs out of CLI runs."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    monkeypatch.chdir(work)
    return home


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


class TestParseArgs:
    """Tests for parse_args."""

    def test_run_command(self) -> None:
        args = parse_args(["run", "create_folder", "Docs", "a.md"])

        assert args.mode == "run"
        assert args.name == "create_folder"
        assert args.args == ["Docs", "a.md"]
        assert args.show_content is False

    def test_global_options(self, tmp_path: Path) -> None:
        args = parse_args(["--verbose", "--config", str(tmp_path / "c.json"), "shell"])

        assert args.verbose is True
        assert args.config == tmp_path / "c.json"
        assert args.mode == "shell"

    def test_mode_required(self) -> None:
        with pytest.raises(SystemExit):
            parse_args([])

    def test_dash_arguments_after_separator(self) -> None:
        """Arguments starting with - pass through after --."""
        args = parse_args(["run", "copy_path_with_content", "f.py", "--", "-x"])

        assert args.name == "copy_path_with_content"
        assert args.args == ["f.py", "-x"]


class TestMain:
    """Tests for main()."""

    def test_status(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["run", "status"]) == 0
        assert "Clipboard: No files copied | Folders: 0" in capsys.readouterr().out

    def test_show_content(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        target = tmp_path / "note.txt"
        target.write_text("hello\n", encoding="utf-8")

        assert main(["run", "copy_files", str(target), "--show-content"]) == 0

        out = capsys.readouterr().out
        assert "Copied 1 files to clipboard" in out
        assert "hello" in out

    def test_error_exit_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["run", "nope"]) == 1
        assert "Unknown command: nope" in capsys.readouterr().out

    def test_bad_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        config = tmp_path / "bad.json"
        config.write_text(json.dumps({"unknown": True}), encoding="utf-8")

        assert main(["--config", str(config), "run", "status"]) == 2
        assert "Config validation failed" in capsys.readouterr().out


class TestExecuteLine:
    """Tests for shell line execution."""

    def test_state_is_shared_between_lines(self, capsys: pytest.CaptureFixture[str]) -> None:
        ext = Extension()
        assert execute_line(ext, 'create_folder "My Docs" README.md') is True
        assert execute_line(ext, "status") is True

        out = capsys.readouterr().out
        assert "Folder 'My Docs' created successfully" in out
        assert "Folders: 1 | Total folder files: 1" in out

    def test_quit(self) -> None:
        assert execute_line(Extension(), "quit") is False
        assert execute_line(Extension(), "exit") is False

    def test_blank_line(self) -> None:
        assert execute_line(Extension(), "   ") is True

    def test_unbalanced_quotes(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert execute_line(Extension(), 'create_folder "oops') is True
        assert "Could not parse input" in capsys.readouterr().out


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_file_handler(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "copypath.log"
        configure_logging("INFO", log_file=log_file)

        logging.getLogger("copypath.test").info("hello log")
        for handler in logging.getLogger(LOGGER_NAME).handlers:
            handler.flush()

        assert "hello log" in log_file.read_text(encoding="utf-8")

    def test_reconfigure_replaces_handlers(self) -> None:
        configure_logging(logging.DEBUG)
        configure_logging(logging.DEBUG)

        package_logger = logging.getLogger(LOGGER_NAME)
        assert len(package_logger.handlers) == 1
        assert package_logger.propagate is False

    def test_reconfigure_closes_previous_file_handler(self, tmp_path: Path) -> None:
        configure_logging("INFO", log_file=tmp_path / "first.log")
        (first_file_handler,) = [
            h for h in logging.getLogger(LOGGER_NAME).handlers
            if isinstance(h, RotatingFileHandler)
        ]

        configure_logging("INFO", log_file=tmp_path / "second.log")

        assert first_file_handler.stream is None
        assert first_file_handler not in logging.getLogger(LOGGER_NAME).handlers
