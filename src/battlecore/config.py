"""Engine configuration: seed, log level and definitions location."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from battlecore.data.paths import DEFINITIONS_ENV_VAR

_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

SEED_ENV_VAR = "BATTLECORE_SEED"
DEBUG_ENV_VAR = "BATTLECORE_DEBUG"


@dataclass(slots=True)
class EngineConfig:
    seed: int | None = None
    log_level: str = _DEFAULT_LOG_LEVEL
    definitions_path: Path | None = None


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "BattleCore"
        return Path.home() / "BattleCore"
    return Path.home() / ".config" / "battlecore"


def get_default_config_path() -> Path:
    return get_user_data_dir() / "config.json"


def debug_enabled() -> bool:
    """Return True only when BATTLECORE_DEBUG is explicitly set to '1'."""
    return os.getenv(DEBUG_ENV_VAR) == "1"


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in _LOG_LEVELS:
        return value.upper()
    return _DEFAULT_LOG_LEVEL


def _normalize_seed(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _apply_env_overrides(config: EngineConfig) -> EngineConfig:
    seed = _normalize_seed(os.getenv(SEED_ENV_VAR))
    if seed is not None:
        config.seed = seed
    if debug_enabled():
        config.log_level = "DEBUG"
    definitions = os.getenv(DEFINITIONS_ENV_VAR)
    if definitions:
        config.definitions_path = Path(definitions)
    return config


def load_config(path: Path | None = None) -> EngineConfig:
    """Load config from disk, falling back to defaults, then apply environment overrides."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raw = {}
    except (OSError, ValueError):
        raw = {}
    if not isinstance(raw, dict):
        raw = {}

    definitions = raw.get("definitions_path")
    config = EngineConfig(
        seed=_normalize_seed(raw.get("seed")),
        log_level=_normalize_log_level(raw.get("log_level")),
        definitions_path=Path(definitions) if isinstance(definitions, str) and definitions else None,
    )
    return _apply_env_overrides(config)


def save_config(config: EngineConfig, path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "seed": config.seed,
        "log_level": _normalize_log_level(config.log_level),
        "definitions_path": str(config.definitions_path) if config.definitions_path else None,
    }
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def configure_logging(config: EngineConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, _normalize_log_level(config.log_level)),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
