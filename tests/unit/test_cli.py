"""Unit tests for the roster CLI."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner
from fastapi import FastAPI

from roster.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def mock_run():
    with patch("roster.cli.uvicorn.run") as run:
        yield run


@pytest.fixture
def mock_setup_logging():
    with patch("roster.cli.setup_logging", return_value=MagicMock()) as setup:
        yield setup


@pytest.mark.unit
class TestServe:
    """Tests for `roster serve`."""

    def test_serve_defaults(
        self, runner: CliRunner, mock_run: MagicMock, mock_setup_logging: MagicMock
    ) -> None:
        with runner.isolated_filesystem():
            result = runner.invoke(main, ["serve"])

        assert result.exit_code == 0, result.output
        app = mock_run.call_args.args[0]
        assert isinstance(app, FastAPI)
        assert mock_run.call_args.kwargs["host"] == "127.0.0.1"
        assert mock_run.call_args.kwargs["port"] == 8000
        assert mock_run.call_args.kwargs["log_level"] == "info"
        assert mock_setup_logging.call_args.kwargs["level"] == "INFO"

    def test_serve_reads_config(
        self,
        runner: CliRunner,
        mock_run: MagicMock,
        mock_setup_logging: MagicMock,
        tmp_path: Path,
    ) -> None:
        config_path = tmp_path / "roster.yaml"
        config_path.write_text("server:\n  port: 9100\nlogging:\n  level: WARNING\n")

        result = runner.invoke(main, ["serve", "--config", str(config_path)])

        assert result.exit_code == 0, result.output
        assert mock_run.call_args.kwargs["port"] == 9100
        assert mock_setup_logging.call_args.kwargs["level"] == "WARNING"
        assert mock_setup_logging.call_args.kwargs["log_dir"] == tmp_path / "logs"

    def test_serve_options_override_config(
        self,
        runner: CliRunner,
        mock_run: MagicMock,
        mock_setup_logging: MagicMock,
        tmp_path: Path,
    ) -> None:
        config_path = tmp_path / "roster.yaml"
        config_path.write_text("server:\n  port: 9100\n")

        result = runner.invoke(
            main,
            ["serve", "-c", str(config_path), "--host", "0.0.0.0", "--port", "9200", "-v"],
        )

        assert result.exit_code == 0, result.output
        assert mock_run.call_args.kwargs["host"] == "0.0.0.0"
        assert mock_run.call_args.kwargs["port"] == 9200
        assert mock_run.call_args.kwargs["log_level"] == "debug"

    def test_serve_invalid_config(
        self,
        runner: CliRunner,
        mock_run: MagicMock,
        mock_setup_logging: MagicMock,
        tmp_path: Path,
    ) -> None:
        config_path = tmp_path / "roster.yaml"
        config_path.write_text("server:\n  port: 0\n")

        result = runner.invoke(main, ["serve", "-c", str(config_path)])

        assert result.exit_code == 1
        assert "server.port" in result.output
        mock_run.assert_not_called()

    def test_serve_rejects_bad_port(self, runner: CliRunner, mock_run: MagicMock) -> None:
        result = runner.invoke(main, ["serve", "--port", "0"])

        assert result.exit_code == 2
        mock_run.assert_not_called()
