"""Unit tests for the main CLI application."""

from eha import __version__
from eha.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestMainApp:
    """Tests for global options and help."""

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"eha version {__version__}" in result.stdout

    def test_help_lists_commands(self) -> None:
        """--help lists every command."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("add", "remove", "prune", "list", "config"):
            assert command in result.stdout
        assert "--dry-run" in result.stdout
        assert "--hosts-file" in result.stdout

    def test_add_help(self) -> None:
        """add --help documents the TTL option."""
        result = runner.invoke(app, ["add", "--help"])

        assert result.exit_code == 0
        assert "--ttl" in result.stdout
        assert "--replace" in result.stdout
