# -*- coding: utf-8 -*-
# Foilcut/config/settings.py

"""
Project: Foilcut
Date: 10/19/2026

Purpose
-------
Assemble run settings from sectioned defaults and user overrides (dict or JSON file),
with per-key type/range checks so a bad override fails before any file is written.

Main Tasks
----------
    1. Keep curated defaults per section ("paths", "dxf").
    2. Merge overrides section by section; reject unknown sections/keys.
    3. Validate value types and ranges; raise SchemaError with the offending key.

Notes
-----
- Returned settings are plain nested dicts (a fresh copy per call).
- `paths.profiles_dir` / `paths.output_dir` are relative to `paths.data_dir` unless absolute.
"""

from __future__ import absolute_import
import copy
import json
import os
from typing import Any, Dict, Mapping, Optional

__all__ = [
    "ConfigError",
    "SchemaError",
    "DEFAULTS",
    "build_settings",
    "load_settings",
    "resolve_dir",
]


class ConfigError(Exception):
    """
    Base class for settings errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields appended in the string form.
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super(ConfigError, self).__init__(message)

    def __str__(self):
        base = super(ConfigError, self).__str__()
        if not self.context:
            return base
        parts = ["{}={!r}".format(k, self.context[k]) for k in sorted(self.context)]
        return base + " | " + ", ".join(parts)


class SchemaError(ConfigError):
    """Unknown section/key, wrong type or out-of-range value."""


# -----------------------------
DEFAULTS = {
    "paths": {
        "data_dir": "./data",
        "profiles_dir": "airfoil",
        "output_dir": "output",
    },
    "dxf": {
        "layer": "Profile",
        "color": 9,          # ACI 9 = grey 192
        "linetype": "Continuous",
        "ltscale": 100.0,
        "version": "R2010",
    },
}

# (types, validator, description)
_SCHEMA = {
    ("paths", "data_dir"): ((str,), lambda v: bool(v), "non-empty path"),
    ("paths", "profiles_dir"): ((str,), lambda v: bool(v), "non-empty path"),
    ("paths", "output_dir"): ((str,), lambda v: bool(v), "non-empty path"),
    ("dxf", "layer"): ((str,), lambda v: bool(v.strip()), "non-empty layer name"),
    ("dxf", "color"): ((int,), lambda v: 1 <= v <= 255, "ACI color in 1..255"),
    ("dxf", "linetype"): ((str,), lambda v: bool(v), "non-empty linetype name"),
    ("dxf", "ltscale"): ((int, float), lambda v: v > 0, "positive number"),
    ("dxf", "version"): ((str,), lambda v: v.startswith("R") or v.startswith("AC"),
                         "DXF version such as 'R2010'"),
}


def _check(section: str, key: str, value: Any) -> None:
    rule = _SCHEMA.get((section, key))
    if rule is None:
        raise SchemaError("Unknown setting.", {"section": section, "key": key})
    types, ok, desc = rule
    if isinstance(value, bool) or not isinstance(value, types) or not ok(value):
        raise SchemaError("Invalid value; expected {}.".format(desc),
                          {"section": section, "key": key, "value": value})


def build_settings(overrides: Optional[Mapping[str, Mapping[str, Any]]] = None) -> Dict[str, Dict[str, Any]]:
    """
    Merge `overrides` into a copy of DEFAULTS.

    Parameters
    ----------
    overrides : mapping, optional
        {"section": {"key": value}}.

    Returns
    -------
    dict
        Validated settings.

    Raises
    ------
    SchemaError
        Unknown section/key or invalid value.
    """
    settings = copy.deepcopy(DEFAULTS)
    for section, values in (overrides or {}).items():
        if section not in settings:
            raise SchemaError("Unknown settings section.", {"section": section})
        if not isinstance(values, Mapping):
            raise SchemaError("Settings section must be a mapping.", {"section": section})
        for key, value in values.items():
            _check(section, key, value)
            settings[section][key] = value
    return settings


def load_settings(path: Optional[str] = None,
                  overrides: Optional[Mapping[str, Mapping[str, Any]]] = None) -> Dict[str, Dict[str, Any]]:
    """
    Read JSON overrides from `path` (if given), apply `overrides` on top, then validate.

    Raises
    ------
    ConfigError
        If the file cannot be decoded.
    SchemaError
        From build_settings.
    """
    merged: Dict[str, Dict[str, Any]] = {}
    if path:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError("Settings file is not valid JSON.", {"path": path, "error": str(e)})
        if not isinstance(data, dict):
            raise ConfigError("Settings file must hold a JSON object.", {"path": path})
        for section, values in data.items():
            merged[section] = dict(values) if isinstance(values, Mapping) else values
    for section, values in (overrides or {}).items():
        merged.setdefault(section, {})
        if isinstance(merged[section], dict):
            merged[section].update(values)
    return build_settings(merged)


def resolve_dir(settings: Mapping[str, Mapping[str, Any]], key: str) -> str:
    """Return `paths.<key>` joined onto `paths.data_dir` (absolute values kept as-is)."""
    paths = settings["paths"]
    value = paths[key]
    if key == "data_dir" or os.path.isabs(value):
        return value
    return os.path.join(paths["data_dir"], value)
