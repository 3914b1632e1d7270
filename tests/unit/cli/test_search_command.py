"""Tests for the search command."""

from unittest.mock import MagicMock, patch

from aurctl.cli.main import app
from aurctl.core.errors import RegistryError
from typer.testing import CliRunner

runner = CliRunner()

MODULE = "aurctl.cli.commands.search"


def _client(records=None, error=None) -> MagicMock:
    client = MagicMock()
    client.__enter__.return_value = client
    client.search.return_value = records or []
    client.search.side_effect = error
    return client


class TestSearchCommand:
    """Tests for aurctl search."""

    def test_most_popular_printed_last(self, config, remote) -> None:
        records = [
            remote("popular", Popularity=9.0, NumVotes=100),
            remote("obscure", Popularity=0.1, NumVotes=1),
        ]
        client = _client(records)

        with (
            patch(f"{MODULE}.get_config", return_value=config),
            patch(f"{MODULE}.get_registry_client", return_value=client),
        ):
            result = runner.invoke(app, ["search", "foo", "bar"])

        assert result.exit_code == 0
        client.search.assert_called_once_with("foo bar")
        assert result.output.index("obscure") < result.output.index("popular")

    def test_multiple_words_form_one_query(self, config) -> None:
        """Several words are searched as one space-separated term."""
        client = _client()

        with (
            patch(f"{MODULE}.get_config", return_value=config),
            patch(f"{MODULE}.get_registry_client", return_value=client),
        ):
            result = runner.invoke(app, ["search", "python", "http", "client"])

        assert result.exit_code == 0
        client.search.assert_called_once_with("python http client")

    def test_no_results(self, config) -> None:
        with (
            patch(f"{MODULE}.get_config", return_value=config),
            patch(f"{MODULE}.get_registry_client", return_value=_client()),
        ):
            result = runner.invoke(app, ["search", "zzz"])

        assert result.exit_code == 0
        assert result.output == ""

    def test_registry_error(self, config) -> None:
        client = _client(error=RegistryError("AUR request failed: connection refused"))

        with (
            patch(f"{MODULE}.get_config", return_value=config),
            patch(f"{MODULE}.get_registry_client", return_value=client),
        ):
            result = runner.invoke(app, ["search", "yay"])

        assert result.exit_code == 1
        assert "connection refused" in result.output
