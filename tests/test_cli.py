"""Tests for the vozfin CLI commands that need no microphone."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from vozfin.cli import app
from vozfin.speech import console as console_engine

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolate_xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep config and database inside the test's temporary directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))


class TestParseCommand:
    """Tests for 'vozfin parse'."""

    def test_shows_candidate(self) -> None:
        """Should render the interpreted transaction."""
        result = runner.invoke(app, ["parse", "Gastei 50 reais no mercado ontem", "--date", "2025-06-15"])

        assert result.exit_code == 0
        assert "Alimentação" in result.output
        assert "R$ 50,00" in result.output
        assert "14/06/2025" in result.output
        assert "100%" in result.output

    def test_no_amount_exits_with_error(self) -> None:
        """Should ask for a retry when no amount is found."""
        result = runner.invoke(app, ["parse", "oi tudo bem"])

        assert result.exit_code == 1
        assert "Não consegui identificar um valor" in result.output


class TestInitAndList:
    """Tests for 'vozfin init' and 'vozfin list'."""

    def test_list_requires_init(self) -> None:
        """Should refuse to list without a database."""
        result = runner.invoke(app, ["list"])

        assert result.exit_code == 1

    def test_init_then_list_empty(self, tmp_path: Path) -> None:
        """Should create config and database, then list nothing."""
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0
        assert (tmp_path / "data" / "vozfin" / "vozfin.db").exists()
        assert (tmp_path / "config" / "vozfin" / "config.toml").exists()

        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "No transactions found" in result.output

    def test_init_refuses_to_overwrite(self) -> None:
        """Should require --force the second time."""
        runner.invoke(app, ["init"])
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "--force" in result.output


class TestVoiceCommand:
    """Tests for 'vozfin voice' with the dictation prompt patched."""

    def test_confirmed_candidate_is_stored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should store the dictated transaction after confirmation."""
        monkeypatch.setattr(console_engine.Prompt, "ask", lambda *args, **kwargs: "Gastei 50 reais no mercado hoje")
        runner.invoke(app, ["init"])

        result = runner.invoke(app, ["voice", "--date", "2025-06-15"], input="c\n")

        assert result.exit_code == 0
        assert "Transaction added" in result.output

        result = runner.invoke(app, ["list"])
        assert "No mercado" in result.output
        assert "R$ 50,00" in result.output

    def test_quit_stores_nothing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should leave the store untouched when the operator quits."""
        monkeypatch.setattr(console_engine.Prompt, "ask", lambda *args, **kwargs: "recebi 1500 de freelance")
        runner.invoke(app, ["init"])

        result = runner.invoke(app, ["voice"], input="q\n")

        assert result.exit_code == 0
        assert "No transactions found" in runner.invoke(app, ["list"]).output
