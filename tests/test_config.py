from __future__ import annotations

import json
import logging
import os

import pytest
from pydantic import ValidationError

from truck_packer.cli import main
from truck_packer.config import Settings, configure_logging, get_settings, resolve_log_level
from truck_packer.io.schemas import PackRequest

ENV_VARS = [
    "TRUCK_PACKER_LOG_LEVEL",
    "TRUCK_PACKER_DEBUG",
    "TRUCK_PACKER_CORS_ORIGIN_REGEX",
    "TRUCK_PACKER_DEFAULT_STRATEGY",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """No TRUCK_PACKER_* variables, no stray .env, package logger level restored."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    logger = logging.getLogger("truck_packer")
    previous = logger.level
    yield
    logger.setLevel(previous)


def write_scenario(path):
    data = {
        "name": "Shelf check",
        "truckWidth": 1000,
        "truckHeight": 500,
        "allowRotate": False,
        "items": [{"id": "A", "width": 400, "height": 200, "quantity": 3}],
    }
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_defaults():
    assert get_settings() == Settings()


def test_default_strategy_picked_up_by_cli(monkeypatch, tmp_path):
    monkeypatch.setenv("TRUCK_PACKER_DEFAULT_STRATEGY", "shelf")
    scenario = write_scenario(tmp_path / "scenario.json")
    output = tmp_path / "result.json"

    assert main(["--input", str(scenario), "--output", str(output)]) == 0

    result = json.loads(output.read_text(encoding="utf-8"))
    assert result["options"]["strategy"] == "shelf"
    assert [(p["x"], p["y"]) for p in result["containers"][0]] == [(0, 0), (400, 0), (0, 200)]


def test_scenario_strategy_wins_over_default(monkeypatch):
    monkeypatch.setenv("TRUCK_PACKER_DEFAULT_STRATEGY", "shelf")
    settings = get_settings()

    request = PackRequest(truck_width=10, truck_height=10, strategy="best_fit")
    assert request.to_options(default_strategy=settings.default_strategy).strategy == "best_fit"


def test_debug_forces_debug_level(monkeypatch, tmp_path):
    monkeypatch.setenv("TRUCK_PACKER_DEBUG", "1")
    monkeypatch.setenv("TRUCK_PACKER_LOG_LEVEL", "ERROR")

    settings = get_settings()
    assert settings.debug is True
    assert resolve_log_level(settings) == logging.DEBUG

    scenario = write_scenario(tmp_path / "scenario.json")
    assert main(["--input", str(scenario), "--output", str(tmp_path / "result.json")]) == 0
    assert logging.getLogger("truck_packer").level == logging.DEBUG


def test_log_level_by_name(monkeypatch):
    monkeypatch.setenv("TRUCK_PACKER_LOG_LEVEL", "warning")

    settings = get_settings()
    configure_logging(settings)

    assert settings.log_level == "WARNING"
    assert logging.getLogger("truck_packer").level == logging.WARNING


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("TRUCK_PACKER_LOG_LEVEL", "CHATTY")

    settings = get_settings()
    configure_logging(settings)

    assert resolve_log_level(settings) == logging.INFO
    assert logging.getLogger("truck_packer").level == logging.INFO


def test_dotenv_fills_missing_but_never_overrides(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text(
        "TRUCK_PACKER_DEFAULT_STRATEGY=shelf\nTRUCK_PACKER_LOG_LEVEL=ERROR\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("TRUCK_PACKER_DEFAULT_STRATEGY", "best_fit")

    settings = get_settings()

    assert settings.default_strategy == "best_fit"
    assert settings.log_level == "ERROR"
    # the file is read, not exported
    assert "TRUCK_PACKER_LOG_LEVEL" not in os.environ


def test_explicit_env_file(tmp_path):
    env_file = tmp_path / "packer.env"
    env_file.write_text("TRUCK_PACKER_CORS_ORIGIN_REGEX=^https://example\\.com$\n", encoding="utf-8")

    assert get_settings(env_file).cors_origin_regex == "^https://example\\.com$"


def test_invalid_strategy_rejected(monkeypatch):
    monkeypatch.setenv("TRUCK_PACKER_DEFAULT_STRATEGY", "skyline")

    with pytest.raises(ValidationError):
        get_settings()
