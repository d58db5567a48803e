"""
TOML parameter file loading and saving.

Uses tomllib (Python 3.11+) or tomli (backport) for reading,
and tomli_w for writing the parameters a run actually used.
"""

import copy
import sys
from pathlib import Path
from typing import Any

# Import tomllib or backport
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w

from sph_params.errors import MissingParameterError, InvalidParameterError


_separator = ":"
_missing = object()


class ParameterFile:
    """
    Key-value view of a parameter file.

    Keys are written as "SECTION:name", e.g. "SPH:viscosity_alpha". Every
    lookup is recorded with the value in effect (defaults included), so the
    effective configuration of a run can be written out afterwards.
    """

    def __init__(self, data: dict[str, Any] | None = None):
        self._data = copy.deepcopy(data) if data else {}
        self._used: dict[str, Any] = {}

    def __contains__(self, key: str):
        return self._lookup(key) is not _missing

    def _lookup(self, key: str):
        node = self._data
        for part in _split_key(key):
            if not isinstance(node, dict) or part not in node:
                return _missing
            node = node[part]
        return node

    def _get(self, key: str, convert, default=_missing):
        value = self._lookup(key)
        if value is _missing:
            if default is _missing:
                raise MissingParameterError(key)
            value = default
        else:
            value = convert(key, value)
        self._used[key] = value
        return value

    # Required lookups

    def get_float(self, key: str) -> float:
        return self._get(key, _to_float)

    def get_int(self, key: str) -> int:
        return self._get(key, _to_int)

    def get_bool(self, key: str) -> bool:
        return self._get(key, _to_bool)

    # Optional lookups

    def get_opt_float(self, key: str, default: float) -> float:
        return self._get(key, _to_float, default)

    def get_opt_int(self, key: str, default: int) -> int:
        return self._get(key, _to_int, default)

    def get_opt_bool(self, key: str, default: bool) -> bool:
        return self._get(key, _to_bool, default)

    def used_parameters(self) -> dict[str, Any]:
        """The parameters looked up so far, nested by section."""
        nested: dict[str, Any] = {}
        for key, value in self._used.items():
            *sections, name = _split_key(key)
            node = nested
            for section in sections:
                node = node.setdefault(section, {})
                if not isinstance(node, dict):
                    raise InvalidParameterError(f"Parameter '{key}' lies under a value, not a section.")
            if isinstance(node.get(name), dict):
                raise InvalidParameterError(f"Parameter '{key}' is a section, not a value.")
            node[name] = value
        return nested


def load_parameters(path: str | Path) -> ParameterFile:
    """Load a TOML parameter file."""
    path = Path(path)
    with open(path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as error:
            raise InvalidParameterError(f"Cannot parse parameter file {path}: {error}") from error
    return ParameterFile(data)


def save_used_parameters(params: ParameterFile, path: str | Path) -> None:
    """Save the parameters a run used, defaults included, to a TOML file."""
    path = Path(path)
    with open(path, "wb") as f:
        tomli_w.dump(params.used_parameters(), f)


def _split_key(key: str) -> list[str]:
    parts = key.split(_separator)
    if not all(parts):
        raise InvalidParameterError(f"Malformed parameter key '{key}'.")
    return parts


def _to_float(key: str, value) -> float:
    # bool is a subclass of int, but "alpha = true" is certainly a mistake
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError(f"Parameter '{key}' expects a float, got {value!r}.")
    return float(value)


def _to_int(key: str, value) -> int:
    if isinstance(value, bool):
        return int(value)
    if not isinstance(value, int):
        raise InvalidParameterError(f"Parameter '{key}' expects an integer, got {value!r}.")
    return value


def _to_bool(key: str, value) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise InvalidParameterError(f"Parameter '{key}' expects a boolean, got {value!r}.")
