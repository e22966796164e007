import json
import logging
from pathlib import Path

import pytest

from battlecore.bootstrap import create_battle_service, create_engine
from battlecore.config import EngineConfig, configure_logging, load_config, save_config


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch) -> None:
    for name in ("BATTLECORE_SEED", "BATTLECORE_DEBUG", "BATTLECORE_DEFINITIONS"):
        monkeypatch.delenv(name, raising=False)


def test_missing_config_file_returns_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "missing.json")

    assert config == EngineConfig()


def test_invalid_config_file_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2", encoding="utf-8")

    assert load_config(path) == EngineConfig()


def test_config_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    save_config(EngineConfig(seed=42, log_level="info", definitions_path=tmp_path), path)

    config = load_config(path)

    assert config.seed == 42
    assert config.log_level == "INFO"
    assert config.definitions_path == tmp_path
    assert json.loads(path.read_text(encoding="utf-8"))["seed"] == 42


def test_unknown_values_are_normalized(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"seed": "abc", "log_level": "LOUD"}), encoding="utf-8")

    config = load_config(path)

    assert config.seed is None
    assert config.log_level == "WARNING"


def test_environment_overrides_file(monkeypatch, tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    save_config(EngineConfig(seed=1), path)
    monkeypatch.setenv("BATTLECORE_SEED", "77")
    monkeypatch.setenv("BATTLECORE_DEBUG", "1")
    monkeypatch.setenv("BATTLECORE_DEFINITIONS", str(tmp_path))

    config = load_config(path)

    assert config.seed == 77
    assert config.log_level == "DEBUG"
    assert config.definitions_path == tmp_path


def test_debug_requires_explicit_one(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("BATTLECORE_DEBUG", "true")

    assert load_config(tmp_path / "missing.json").log_level == "WARNING"


def test_configure_logging_sets_root_level(monkeypatch) -> None:
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    configure_logging(EngineConfig(log_level="DEBUG"))

    assert calls["level"] == logging.DEBUG


def test_engine_shares_seeded_rng() -> None:
    engine = create_engine(EngineConfig(seed=5))

    assert engine.battle_service.rng is engine.rng
    assert engine.skills_repo.get_by_name("Fireball").mana_cost == 15
    assert create_battle_service(EngineConfig(seed=5)).rng.randint(1, 100) == engine.rng.randint(1, 100)
