# -*- coding: utf-8 -*-
# Foilcut/config/__init__.py

"""
Project: Foilcut
Date: 10/19/2026

Modules:
--------
- settings: Sectioned defaults (paths, dxf), validated overrides and JSON loading.
            Raises ConfigError / SchemaError with the offending section and key.
"""

from .settings import (
    ConfigError, SchemaError, DEFAULTS, build_settings, load_settings, resolve_dir,
)

__all__ = [
    "ConfigError", "SchemaError", "DEFAULTS",
    "build_settings", "load_settings", "resolve_dir",
]
