"""Unit tests for the threadit CLI."""

from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from threadit.presentation.cli.app import app

runner = CliRunner()


class TestSecretsCommand:
    def test_generate_prints_required_secrets(self):
        result = runner.invoke(app, ["secrets", "generate"])

        assert result.exit_code == 0
        assert "SESSION_SECRET" in result.output
        assert "POSTGRES_PASSWORD" in result.output

    def test_generate_is_random(self):
        first = runner.invoke(app, ["secrets", "generate"]).output
        second = runner.invoke(app, ["secrets", "generate"]).output

        assert first != second


class TestDbCommands:
    def test_drop_aborts_without_confirmation(self, monkeypatch):
        monkeypatch.setenv("SESSION_SECRET", "s")
        monkeypatch.setenv("POSTGRES_PASSWORD", "p")

        with patch(
            "threadit.presentation.cli.app._run_schema_operation",
            new=AsyncMock(),
        ) as run:
            result = runner.invoke(app, ["db", "drop"], input="n\n")

        assert result.exit_code == 1
        run.assert_not_called()

    def test_init_runs_create(self, monkeypatch):
        monkeypatch.setenv("SESSION_SECRET", "s")
        monkeypatch.setenv("POSTGRES_PASSWORD", "p")

        with patch(
            "threadit.presentation.cli.app._run_schema_operation",
            new=AsyncMock(),
        ) as run:
            result = runner.invoke(app, ["db", "init"])

        assert result.exit_code == 0
        run.assert_awaited_once_with(drop=False)
        # Credentials never reach the output
        assert ":p@" not in result.output
