"""Engine configuration loader."""

import yaml
from dataclasses import dataclass, field
from pathlib import Path


class ConfigError(ValueError):
    """Raised when a config file is missing or holds unusable values."""


@dataclass
class EngineConfig:
    seed: int | None = None  # None = unseeded process RNG
    rack_size: int = 7
    max_consecutive_passes: int = 6
    max_consecutive_failures: int = 3
    failure_bonus: int = 50  # awarded to the opponent on the failure limit
    surrender_bonus: int = 50
    tiebreak_bonus: int = 1


@dataclass
class DictionaryConfig:
    path: Path | None = None
    suggestion_limit: int = 50


@dataclass
class AppConfig:
    engine: EngineConfig = field(default_factory=EngineConfig)
    dictionary: DictionaryConfig = field(default_factory=DictionaryConfig)
    log_level: str = "INFO"
    log_dir: Path | None = None  # JSONL turn logs; None = disabled


_POSITIVE_KEYS = ("rack_size", "max_consecutive_passes", "max_consecutive_failures")


def load_config(path: Path) -> AppConfig:
    """Load engine config from YAML file.

    Relative dictionary and log paths resolve against the config file.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    e = raw.get("engine", {}) or {}
    defaults = EngineConfig()
    engine = EngineConfig(
        seed=e.get("seed"),
        rack_size=e.get("rack_size", defaults.rack_size),
        max_consecutive_passes=e.get(
            "max_consecutive_passes", defaults.max_consecutive_passes
        ),
        max_consecutive_failures=e.get(
            "max_consecutive_failures", defaults.max_consecutive_failures
        ),
        failure_bonus=e.get("failure_bonus", defaults.failure_bonus),
        surrender_bonus=e.get("surrender_bonus", defaults.surrender_bonus),
        tiebreak_bonus=e.get("tiebreak_bonus", defaults.tiebreak_bonus),
    )
    for key in _POSITIVE_KEYS:
        value = getattr(engine, key)
        if not isinstance(value, int) or value < 1:
            raise ConfigError(f"engine.{key} must be a positive integer, got {value!r}")

    # Parse optional dictionary section
    d = raw.get("dictionary", {}) or {}
    dict_path = d.get("path")
    if dict_path is not None:
        dict_path = Path(dict_path)
        if not dict_path.is_absolute():
            dict_path = path.parent / dict_path
    dictionary = DictionaryConfig(
        path=dict_path,
        suggestion_limit=d.get("suggestion_limit", 50),
    )

    log_dir = raw.get("log_dir")
    if log_dir is not None:
        log_dir = Path(log_dir)
        if not log_dir.is_absolute():
            log_dir = path.parent / log_dir

    return AppConfig(
        engine=engine,
        dictionary=dictionary,
        log_level=str(raw.get("log_level", "INFO")).upper(),
        log_dir=log_dir,
    )
