# -*- coding: utf-8 -*-
# Foilcut/catalog/__init__.py

"""
Project: Foilcut
Date: 10/19/2026

Modules:
--------
- library: Local `.dat` profile folder (list/find/save/read), display-name cleanup and
           output file naming for the CSV/DXF results.
"""

from .library import (
    ProfileEntry, ensure_data_dirs, list_local_profiles, find_profile,
    save_profile, read_profile, format_profile_name, output_paths,
)

__all__ = [
    "ProfileEntry", "ensure_data_dirs", "list_local_profiles", "find_profile",
    "save_profile", "read_profile", "format_profile_name", "output_paths",
]
