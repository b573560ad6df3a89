"""Service settings for the HTTP API, the socket server and the evaluator.

Each setting resolves in three layers: the built-in default below, the
`configs/<env>.toml` profile, then a `RULETOK_<KEY>` environment variable.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from ruletok.eval.metrics import DEFAULT_LOOKAHEAD_WINDOW

_DEFAULTS: dict[str, str | int] = {
    "log_level": "INFO",
    "api_host": "127.0.0.1",
    "api_port": 8000,
    "workers": 1,
    "tcp_host": "127.0.0.1",
    "tcp_port": 5005,
    "eval_window": DEFAULT_LOOKAHEAD_WINDOW,
}
_PORT_KEYS = ("api_port", "tcp_port")
_POSITIVE_KEYS = ("workers", "eval_window")


@dataclass(frozen=True)
class AppConfig:
    """Resolved settings; processing options travel separately per request."""

    env: str
    log_level: str
    api_host: str
    api_port: int
    workers: int
    tcp_host: str
    tcp_port: int
    eval_window: int


def load_config(env_name: str | None = None, config_dir: Path | None = None) -> AppConfig:
    """Resolve settings for `env_name` (default: ``$RULETOK_ENV`` or ``dev``)."""
    env = env_name or os.getenv("RULETOK_ENV", "dev")
    profile = _load_profile((config_dir or _default_config_dir()) / f"{env}.toml")

    values = {key: _resolve(key, default, profile) for key, default in _DEFAULTS.items()}
    for key in _PORT_KEYS:
        if not 0 <= int(values[key]) <= 65535:
            raise ValueError(f"{key} must be between 0 and 65535, got {values[key]}")
    for key in _POSITIVE_KEYS:
        if int(values[key]) < 1:
            raise ValueError(f"{key} must be >= 1, got {values[key]}")
    return AppConfig(env=env, **values)


def _env_var(key: str) -> str:
    return f"RULETOK_{key.upper()}"


def _default_config_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "configs"


def _load_profile(path: Path) -> dict[str, object]:
    if not path.exists():
        return {}
    with path.open("rb") as handle:
        payload = tomllib.load(handle)
    return {key: value for key, value in payload.items() if key in _DEFAULTS}


def _resolve(key: str, default: str | int, profile: dict[str, object]) -> str | int:
    override = os.getenv(_env_var(key))
    if override is not None:
        source, value = _env_var(key), override
    else:
        source, value = key, profile.get(key, default)

    if isinstance(default, int):
        return _as_int(source, value)
    if not isinstance(value, str):
        raise ValueError(f"{source} must be a string, got type {type(value).__name__}")
    return value


def _as_int(source: str, value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{source} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as exc:
            raise ValueError(f"{source} must be an integer, got {value!r}") from exc
    raise ValueError(f"{source} must be an integer, got type {type(value).__name__}")
