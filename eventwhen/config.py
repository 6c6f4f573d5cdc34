"""Global configuration for eventwhen."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

DEFAULTS: dict[str, Any] = {
    "default_timezone": "",
    "time_match_tolerance_minutes": 1,
    "log_level": "WARNING",
}

TYPE_CASTERS: dict[str, Callable[[Any], Any]] = {
    "default_timezone": str,
    "time_match_tolerance_minutes": int,
    "log_level": str,
}


@dataclass(frozen=True)
class Settings:
    base_dir: Path
    default_timezone: str
    time_match_tolerance_minutes: int
    log_level: str
    config_path: Path


def _cast_value(key: str, value: Any) -> Any:
    if key not in TYPE_CASTERS:
        return value
    caster = TYPE_CASTERS[key]
    if caster is int and isinstance(value, bool):
        raise ValueError(f"Cannot parse integer value from {value!r}")
    if caster is str:
        return str(value).strip()
    return caster(value)


def _load_toml_config(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        return {}
    with config_path.open("rb") as handle:
        return tomllib.load(handle)


def _config_layered_value(key: str, *, toml_config: dict[str, Any]) -> Any:
    env_key = f"EVENTWHEN_{key.upper()}"
    if env_key in os.environ:
        return _cast_value(key, os.environ[env_key])
    if key in toml_config:
        return _cast_value(key, toml_config[key])
    return DEFAULTS[key]


def load_settings(config_override: Path | None = None) -> Settings:
    base_dir = Path(os.getenv("EVENTWHEN_BASE_DIR", Path.cwd()))
    env_config = os.getenv("EVENTWHEN_CONFIG")
    config_path = Path(config_override or env_config or base_dir / "eventwhen.toml")
    toml_config = _load_toml_config(config_path)

    tolerance = _config_layered_value(
        "time_match_tolerance_minutes", toml_config=toml_config
    )
    if tolerance < 0:
        raise ValueError("time_match_tolerance_minutes must not be negative")

    return Settings(
        base_dir=base_dir,
        default_timezone=_config_layered_value(
            "default_timezone", toml_config=toml_config
        ),
        time_match_tolerance_minutes=tolerance,
        log_level=_config_layered_value("log_level", toml_config=toml_config).upper(),
        config_path=config_path,
    )


def settings_as_dict(settings: Settings) -> dict[str, Any]:
    return {
        "base_dir": str(settings.base_dir),
        "default_timezone": settings.default_timezone,
        "time_match_tolerance_minutes": settings.time_match_tolerance_minutes,
        "log_level": settings.log_level,
        "config_path": str(settings.config_path),
    }


settings = load_settings()
