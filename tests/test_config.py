"""Tests for configuration loading."""

import os

import pytest
from pydantic import ValidationError

from stop_game.config import load_config, load_config_from_toml
from stop_game.types.match import LETTERS_PT, MatchConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("STOP_TURN_SECONDS", "STOP_UNIQUE_LETTERS", "STOP_MIN_PLAYERS", "STOP_ALPHABET"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = load_config()
    assert config == MatchConfig()
    assert config.turn_seconds == 20
    assert config.alphabet == LETTERS_PT
    assert config.unique_letters


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STOP_TURN_SECONDS", "45")
    monkeypatch.setenv("STOP_UNIQUE_LETTERS", "false")
    monkeypatch.setenv("STOP_ALPHABET", "a, b c")

    config = load_config()

    assert config.turn_seconds == 45
    assert not config.unique_letters
    assert config.alphabet == ("A", "B", "C")


def test_toml_wins_over_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("STOP_TURN_SECONDS", "45")
    path = tmp_path / "stop.toml"
    path.write_text('[match]\nturn_seconds = 10\nmin_players = 3\nunknown = 1\n')

    config = load_config(str(path))

    assert config.turn_seconds == 10
    assert config.min_players == 3


def test_missing_toml_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config_from_toml(str(tmp_path / "missing.toml"))


def test_invalid_values_rejected(monkeypatch):
    monkeypatch.setenv("STOP_TURN_SECONDS", "0")
    with pytest.raises(ValidationError):
        load_config()


def test_entry_point_reads_log_level_from_dotenv(monkeypatch):
    import stop_game.main as cli

    monkeypatch.delenv("STOP_LOG_LEVEL", raising=False)
    levels = []

    def fake_run(coro):
        coro.close()
        return 0

    monkeypatch.setattr(cli, "load_dotenv", lambda: os.environ.update(STOP_LOG_LEVEL="debug"))
    monkeypatch.setattr(cli.logging, "basicConfig", lambda **kwargs: levels.append(kwargs["level"]))
    monkeypatch.setattr(cli.asyncio, "run", fake_run)

    try:
        with pytest.raises(SystemExit):
            cli.main(["Ana", "Bruno"])
    finally:
        os.environ.pop("STOP_LOG_LEVEL", None)

    assert levels == ["DEBUG"]
