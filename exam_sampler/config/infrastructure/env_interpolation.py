"""Recursive ${ENV_VAR} and ${ENV_VAR:-default} interpolation for raw config data."""

import os
import re
from collections.abc import Callable

_ENV_VAR_PATTERN = re.compile(
    r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}"
)

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """
    Return the names of every referenced env var that is unset and has no
    ``:-default`` fallback, in first-seen order and without repeats.
    """
    missing: list[str] = []

    def _record(match: re.Match[str]) -> str:
        name = match.group("name")
        if (
            match.group("default") is None
            and name not in os.environ
            and name not in missing
        ):
            missing.append(name)
        return match.group(0)

    _walk(data, _record)
    return missing


def interpolate(data: RawValue) -> RawValue:
    """
    Return a copy of data with every ${ENV_VAR} reference substituted.

    Call ``collect_missing_vars`` first: a reference without a default to an
    unset variable raises KeyError here.
    """
    return _walk(data, _substitute)


def _substitute(match: re.Match[str]) -> str:
    name = match.group("name")
    default = match.group("default")
    if default is not None:
        return os.environ.get(name, default)
    return os.environ[name]


def _walk(data: RawValue, replace: Callable[[re.Match[str]], str]) -> RawValue:
    if isinstance(data, str):
        return _ENV_VAR_PATTERN.sub(replace, data)
    if isinstance(data, list):
        return [_walk(item, replace) for item in data]
    if isinstance(data, dict):
        return {key: _walk(value, replace) for key, value in data.items()}
    return data
