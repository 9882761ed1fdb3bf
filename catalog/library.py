# -*- coding: utf-8 -*-
# Foilcut/catalog/library.py

"""
Project: Foilcut
Date: 10/19/2026

Purpose:
--------
Local profile library: the folder of previously saved Lednicer `.dat` files and the
output folder where CSV/DXF results are written.

Main Tasks:
-----------
    1. Create the data layout (<data>/airfoil, <data>/output) on first use.
    2. List, look up, save and read local profiles.
    3. Derive display names and output file names (<name>_<chord>_<thickness>.csv|.dxf).

Notes:
------
   - Catalog titles look like "(naca2412) NACA 2412 AIRFOIL"; display names keep the text
     after the first ')' with ".dat" and "AIRFOIL" removed.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple

from config.settings import resolve_dir
from export._io import write_atomic
from geometry.loaders.dat_loader import load_dat
from geometry.profile import LednicerProfile

logger = logging.getLogger(__name__)

__all__ = [
    "ProfileEntry",
    "ensure_data_dirs",
    "list_local_profiles",
    "find_profile",
    "save_profile",
    "read_profile",
    "format_profile_name",
    "output_paths",
]

_EXT = ".dat"


@dataclass(frozen=True)
class ProfileEntry:
    """A `.dat` file in the local library."""
    title: str
    path: str


def ensure_data_dirs(settings: Mapping[str, Any]) -> Tuple[str, str]:
    """Create the profile and output folders if missing; return both paths."""
    profiles = resolve_dir(settings, "profiles_dir")
    output = resolve_dir(settings, "output_dir")
    for folder in (profiles, output):
        if not os.path.isdir(folder):
            os.makedirs(folder, exist_ok=True)
            logger.info("[ProfileLibrary] Created folder: %s", folder)
    return profiles, output


def list_local_profiles(settings: Mapping[str, Any]) -> List[ProfileEntry]:
    """
    Return the `.dat` files of the profile folder sorted by title.

    A missing folder yields an empty list.
    """
    folder = resolve_dir(settings, "profiles_dir")
    if not os.path.isdir(folder):
        return []
    entries = []
    for name in os.listdir(folder):
        path = os.path.join(folder, name)
        stem, ext = os.path.splitext(name)
        if ext.lower() == _EXT and os.path.isfile(path):
            entries.append(ProfileEntry(title=stem, path=path))
    entries.sort(key=lambda e: e.title.lower())
    return entries


def find_profile(settings: Mapping[str, Any], name: str) -> Optional[ProfileEntry]:
    """
    Look up a local profile by title or display name (case-insensitive).
    """
    wanted = name.strip().lower()
    if wanted.endswith(_EXT):
        wanted = wanted[:-len(_EXT)]
    for entry in list_local_profiles(settings):
        if wanted in (entry.title.lower(), format_profile_name(entry.title).lower()):
            return entry
    return None


def save_profile(settings: Mapping[str, Any], title: str, text: str) -> str:
    """
    Store raw profile text as `<profiles>/<title>.dat` and return the path.

    Raises
    ------
    ValueError
        If the title is empty or contains a path separator.
    """
    title = title.strip()
    if not title or os.sep in title or (os.altsep and os.altsep in title):
        raise ValueError(f"Invalid profile title: {title!r}")
    folder = resolve_dir(settings, "profiles_dir")
    path = write_atomic(text, os.path.join(folder, title + _EXT))
    logger.info("[ProfileLibrary] Profile saved locally: %s", path)
    return path


def read_profile(entry: ProfileEntry) -> LednicerProfile:
    """Parse the entry's file; the profile title is the entry title."""
    profile = load_dat(entry.path)
    if profile.title != entry.title:
        profile = LednicerProfile(title=entry.title, header=profile.header,
                                  points=profile.points, source=entry.path)
    return profile


def format_profile_name(title: str) -> str:
    """
    Display name for a catalog title.

    "(naca2412) NACA 2412 AIRFOIL" -> "NACA 2412"; titles without ')' are only stripped
    of ".dat" / "AIRFOIL" and surrounding spaces.
    """
    name = title.replace(".dat", "").replace("AIRFOIL", "")
    if ")" in name:
        name = name.split(")", 1)[1]
    return name.strip(" ")


def output_paths(settings: Mapping[str, Any], title: str, chord_width: int,
                 thickness: int) -> Tuple[str, str]:
    """
    Return (csv_path, dxf_path) for a run of `title` at the given parameters.

    Separators and '..' in the display name become '_', so both paths always sit
    directly inside the output folder.
    """
    folder = resolve_dir(settings, "output_dir")
    name = _file_safe(format_profile_name(title) or title)
    stem = "{}_{}_{}".format(name, chord_width, thickness)
    return os.path.join(folder, stem + ".csv"), os.path.join(folder, stem + ".dxf")


def _file_safe(name: str) -> str:
    """Replace path separators and '..' so `name` stays a single file name component."""
    for sep in ("/", "\\", os.sep, os.altsep):
        if sep:
            name = name.replace(sep, "_")
    return name.replace("..", "_") or "profile"
