"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from kubeimg.errors import ConfigError
from kubeimg.models.config import ClusterConfig, InventoryConfig, KubeImgConfig, LogConfig
from kubeimg.models.resources import DEFAULT_KINDS, ResourceKind, parse_kinds


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"KUBEIMG_{key}", default)


def _env_int(key: str, default: int, min_val: int | None = None, max_val: int | None = None) -> int:
    raw = _env(key, str(default))
    try:
        val = int(raw)
    except ValueError as exc:
        raise ConfigError(f"KUBEIMG_{key} must be an integer, got {raw!r}") from exc
    if min_val is not None:
        val = max(val, min_val)
    if max_val is not None:
        val = min(val, max_val)
    return val


def validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ConfigError(f"Invalid log level: {value}. Must be one of {sorted(valid)}")
    return value.lower()


def validate_kinds(value: str) -> tuple[ResourceKind, ...]:
    if not value.strip():
        return DEFAULT_KINDS
    try:
        kinds = parse_kinds(value)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc
    if not kinds:
        raise ConfigError(f"No resource kinds selected: {value!r}")
    return kinds


def load_config() -> KubeImgConfig:
    """Load configuration from KUBEIMG_* environment variables."""
    return KubeImgConfig(
        cluster=ClusterConfig(
            kubeconfig=_env("KUBECONFIG", ""),
            request_timeout=_env_int("REQUEST_TIMEOUT", 30, min_val=1, max_val=300),
        ),
        inventory=InventoryConfig(
            kinds=validate_kinds(_env("KINDS", "")),
        ),
        log=LogConfig(
            level=validate_log_level(_env("LOG_LEVEL", "warning")),
        ),
    )
