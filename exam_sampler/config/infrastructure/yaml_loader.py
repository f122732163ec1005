"""YAML config loader: reads the file, resolves env references, validates, reports."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from exam_sampler.config.domain.config import SamplerConfig
from exam_sampler.config.domain.observer import ConfigObserver
from exam_sampler.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from exam_sampler.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from exam_sampler.sampling.domain.sampler import THRESHOLD_FLOOR


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a SamplerConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> SamplerConfig:
        """
        Load, interpolate, validate, and return a SamplerConfig from a YAML file.

        A relative ``questions.path`` is resolved against the config file's directory.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the schema is violated.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        cfg = _build_config(resolved=interpolate(raw))
        cfg = _resolve_questions_path(cfg=cfg, config_dir=path.parent)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(
            name=cfg.name, questions_path=str(cfg.questions.path)
        )
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason=f"invalid YAML ({exc})") from exc


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(resolved: Any) -> SamplerConfig:
    if not isinstance(resolved, dict):
        raise ConfigValidationError("top-level YAML value must be a mapping")
    try:
        return SamplerConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _resolve_questions_path(cfg: SamplerConfig, config_dir: Path) -> SamplerConfig:
    if cfg.questions.path.is_absolute():
        return cfg
    questions = cfg.questions.model_copy(
        update={"path": config_dir / cfg.questions.path}
    )
    return cfg.model_copy(update={"questions": questions})


def _emit_warnings(cfg: SamplerConfig, observer: ConfigObserver) -> None:
    if cfg.sampling.similarity_threshold <= THRESHOLD_FLOOR:
        observer.config_threshold_at_floor_warning(cfg.sampling.similarity_threshold)
