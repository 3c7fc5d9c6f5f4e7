"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from evalrun.config.domain.config import HarnessConfig
from evalrun.config.domain.observer import ConfigObserver
from evalrun.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from evalrun.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a HarnessConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> HarnessConfig:
        """
        Load, interpolate, validate, and return a HarnessConfig from a YAML file.

        An empty file yields the default configuration.

        Raises:
            ConfigLoadError: if the file does not exist.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the YAML is invalid or the schema is violated.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        cfg = _build_config(resolved=interpolate(raw))
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(path=str(path))
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"invalid YAML: {exc}") from exc
    return raw if raw is not None else {}


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(resolved: Any) -> HarnessConfig:
    try:
        return HarnessConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: HarnessConfig, observer: ConfigObserver) -> None:
    if cfg.max_concurrent is None:
        observer.config_unbounded_concurrency_warning()
