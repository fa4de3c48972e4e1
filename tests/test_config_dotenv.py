from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from serializable_log_record import __main__ as cli_module
from serializable_log_record import config as record_config


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> None:
    """Reset shared dotenv state around each test."""

    record_config._reset_dotenv_state_for_testing()
    yield
    record_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values that are not yet set."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text(f"{record_config.CODEC_ENV_VAR}=orjson\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv(record_config.CODEC_ENV_VAR, raising=False)

    loaded = record_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert record_config.default_codec() == "orjson"

    os.environ.pop(record_config.CODEC_ENV_VAR, None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / ".env").write_text(f"{record_config.CODEC_ENV_VAR}=orjson\n")
    monkeypatch.chdir(nested)
    monkeypatch.setenv(record_config.CODEC_ENV_VAR, "json")

    result = record_config.enable_dotenv()

    assert result is not None
    assert record_config.default_codec() == "json"


def test_enable_dotenv_searches_from_given_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    project = tmp_path / "project"
    deep = project / "a" / "b"
    deep.mkdir(parents=True)
    env_file = project / ".env"
    env_file.write_text("SERIALIZABLE_LOG_RECORD_TEST_MARKER=found\n")
    monkeypatch.delenv("SERIALIZABLE_LOG_RECORD_TEST_MARKER", raising=False)

    loaded = record_config.enable_dotenv(search_from=deep)

    assert loaded == env_file.resolve()
    assert os.environ["SERIALIZABLE_LOG_RECORD_TEST_MARKER"] == "found"

    os.environ.pop("SERIALIZABLE_LOG_RECORD_TEST_MARKER", None)


def test_enable_dotenv_loads_only_once(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (first / ".env").write_text("SERIALIZABLE_LOG_RECORD_TEST_MARKER=first\n")
    (second / ".env").write_text("SERIALIZABLE_LOG_RECORD_TEST_MARKER=second\n")
    monkeypatch.delenv("SERIALIZABLE_LOG_RECORD_TEST_MARKER", raising=False)

    loaded_first = record_config.enable_dotenv(search_from=first)
    loaded_second = record_config.enable_dotenv(search_from=second)

    assert loaded_first == loaded_second == (first / ".env").resolve()
    assert os.environ["SERIALIZABLE_LOG_RECORD_TEST_MARKER"] == "first"

    os.environ.pop("SERIALIZABLE_LOG_RECORD_TEST_MARKER", None)


@pytest.mark.parametrize(
    ("explicit", "env_value", "expected"),
    [
        (True, None, True),
        (False, "1", False),
        (None, "TRUE", True),
        (None, " on ", True),
        (None, "0", False),
        (None, "", False),
        (None, None, False),
    ],
)
def test_should_use_dotenv_precedence(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert record_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected


def test_should_use_dotenv_warns_on_unrecognised_value(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger=record_config.__name__):
        assert record_config.should_use_dotenv(env_value="maybe") is False

    assert "maybe" in caplog.text


def test_default_codec_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(record_config.CODEC_ENV_VAR, raising=False)
    assert record_config.default_codec() == record_config.DEFAULT_CODEC

    monkeypatch.setenv(record_config.CODEC_ENV_VAR, " ORJSON ")
    assert record_config.default_codec() == "orjson"

    monkeypatch.setenv(record_config.CODEC_ENV_VAR, "  ")
    assert record_config.default_codec() == record_config.DEFAULT_CODEC


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(record_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(record_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {record_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []

    result = runner.invoke(cli_module.cli, ["info"])
    assert result.exit_code == 0
    assert calls == []
