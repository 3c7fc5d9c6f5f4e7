"""${ENV_VAR} substitution over parsed YAML config trees.

A reference may carry a fallback, ``${EVALRUN_MAX_CONCURRENT:-4}``, used when
the variable is unset. Only references without a fallback can be missing.
"""

import os
import re
from collections.abc import Callable

_REFERENCE = re.compile(
    r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}"
)

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def _map_strings(data: RawValue, fn: Callable[[str], str]) -> RawValue:
    if isinstance(data, str):
        return fn(data)
    if isinstance(data, list):
        return [_map_strings(item, fn) for item in data]
    if isinstance(data, dict):
        return {key: _map_strings(value, fn) for key, value in data.items()}
    return data


def collect_missing_vars(data: RawValue) -> list[str]:
    """Names of unset variables referenced without a fallback, first-seen order."""
    missing: list[str] = []

    def record(text: str) -> str:
        for match in _REFERENCE.finditer(text):
            name = match.group("name")
            if (
                match.group("default") is None
                and name not in os.environ
                and name not in missing
            ):
                missing.append(name)
        return text

    _map_strings(data, record)
    return missing


def _substitute(match: re.Match[str]) -> str:
    name, default = match.group("name"), match.group("default")
    if default is None:
        return os.environ[name]
    return os.environ.get(name, default)


def interpolate(data: RawValue) -> RawValue:
    """Replace every ${ENV_VAR} reference in data with its value or fallback.

    Call collect_missing_vars first; an unset variable without a fallback
    raises KeyError here.
    """
    return _map_strings(data, lambda text: _REFERENCE.sub(_substitute, text))
