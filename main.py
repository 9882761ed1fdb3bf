# -*- coding: utf-8 -*-
# Foilcut/main.py

"""
End-to-end driver:
  1) Settings + data folders
  2) Optional import of a Lednicer .dat into the local library
  3) Profile selection (path, library name, or numbered menu)
  4) Build + scale + emit CSV/DXF, once (--chord) or in a prompt loop
  5) Optional preview plot
"""

import argparse
import logging
import os
import sys
from typing import Callable, List, Optional

from config.settings import ConfigError, load_settings
from catalog.library import (
    ProfileEntry, ensure_data_dirs, list_local_profiles, find_profile, save_profile,
    read_profile, format_profile_name, output_paths,
)
from geometry.api import run_pipeline
from geometry.errors import ProfileError
from geometry.loaders.dat_loader import load_dat
from geometry.profile import LednicerProfile
from export.csv_writer import write_csv_text
from export.dxf_writer import save_dxf

log = logging.getLogger("Foilcut")

InputFn = Callable[[str], str]


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="foilcut",
        description="Scale a Lednicer airfoil to a chord width and export CSV + DXF contours.",
    )
    p.add_argument("--data-dir", help="Data folder (default: ./data or the settings file).")
    p.add_argument("--config", help="JSON settings overrides.")
    p.add_argument("--profile", help="Local profile name or path to a .dat file.")
    p.add_argument("--import", dest="import_path", metavar="FILE",
                   help="Copy a Lednicer .dat file into the local library.")
    p.add_argument("--list", action="store_true", help="List local profiles and exit.")
    p.add_argument("--chord", type=int, help="Chord width in mm (skips the prompt loop).")
    p.add_argument("--thickness", type=int, default=0,
                   help="Max thickness in mm; 0 keeps the original proportions.")
    p.add_argument("--preview", metavar="PNG", help="Save a contour preview image.")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO,
                            format="%(levelname)s:%(name)s:%(message)s")
    if not verbose:
        logging.getLogger("ezdxf").setLevel(logging.ERROR)
        logging.getLogger("matplotlib").setLevel(logging.WARNING)


def _import_profile(settings, path: str) -> str:
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        text = f.read()
    # Validate before storing so the library only holds parseable files.
    load_dat(path)
    title = os.path.splitext(os.path.basename(path))[0]
    return save_profile(settings, title, text)


def _prompt_int(input_fn: InputFn, prompt: str, default: Optional[int] = None) -> Optional[int]:
    raw = input_fn(prompt).strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return None


def _select_profile(settings, name: Optional[str], input_fn: InputFn) -> Optional[LednicerProfile]:
    if name:
        if os.path.isfile(name):
            # Title comes from the file name, not from line 0.
            stem = os.path.splitext(os.path.basename(name))[0]
            return read_profile(ProfileEntry(title=stem, path=name))
        entry = find_profile(settings, name)
        if entry is None:
            log.error("Profile not found in the local library: %s", name)
            return None
        return read_profile(entry)

    entries = list_local_profiles(settings)
    if not entries:
        log.error("No local profiles. Add one with --import FILE.")
        return None
    print("Saved profiles:")
    for i, entry in enumerate(entries):
        print("[ {} ]  {}".format(i, format_profile_name(entry.title) or entry.title))
    number = _prompt_int(input_fn, "Profile number: ")
    if number is None or not 0 <= number < len(entries):
        log.error("Invalid profile number.")
        return None
    return read_profile(entries[number])


def _run_once(profile: LednicerProfile, settings, chord: int, thickness: int,
              preview: Optional[str] = None) -> bool:
    try:
        outputs = run_pipeline(profile, chord, thickness, settings=settings)
    except ProfileError as e:
        log.error("Cannot build '%s': %s", profile.title, e)
        return False

    csv_path, dxf_path = output_paths(settings, profile.title, chord, thickness)
    try:
        write_csv_text(outputs.csv_text, csv_path)
        save_dxf(outputs.dxf_document, dxf_path)
    except OSError as e:
        log.error("Cannot write outputs for '%s': %s", profile.title, e)
        return False
    log.info("CSV saved to %s", csv_path)
    log.info("DXF saved to %s", dxf_path)

    if preview:
        from post.plot_geo import plot_contour
        try:
            plot_contour(outputs.loop, name=format_profile_name(profile.title) or profile.title,
                         show=False, save_path=preview)
        except OSError as e:
            log.error("Cannot write preview %s: %s", preview, e)
            return False
        log.info("Preview saved to %s", preview)
    return True


def _interactive(profile: LednicerProfile, settings, preview: Optional[str],
                 input_fn: InputFn) -> int:
    print("Building custom profile; press Ctrl+C (or Ctrl+D) to quit.")
    while True:
        try:
            chord = _prompt_int(input_fn, "Chord width in mm: ")
            if chord is None:
                log.warning("Chord width must be a whole number of millimetres.")
                continue
            thickness = _prompt_int(input_fn, "Thickness in mm (0 or empty keeps the original): ", 0)
            if thickness is None:
                log.warning("Thickness must be a whole number of millimetres.")
                continue
        except (EOFError, KeyboardInterrupt):
            print()
            return 0
        _run_once(profile, settings, chord, thickness, preview)


def main(argv: Optional[List[str]] = None, input_fn: InputFn = input) -> int:
    args = _parse_args(argv)
    _configure_logging(args.verbose)

    # ------------------------------------------------------------------
    # 1) Settings + data folders
    # ------------------------------------------------------------------
    overrides = {"paths": {"data_dir": args.data_dir}} if args.data_dir else None
    try:
        settings = load_settings(args.config, overrides)
    except (ConfigError, OSError) as e:
        log.error("Invalid settings: %s", e)
        return 2
    ensure_data_dirs(settings)

    # ------------------------------------------------------------------
    # 2) Import
    # ------------------------------------------------------------------
    if args.import_path:
        try:
            _import_profile(settings, args.import_path)
        except (OSError, ProfileError) as e:
            log.error("Cannot import %s: %s", args.import_path, e)
            return 1

    if args.list:
        for entry in list_local_profiles(settings):
            print("{}\t{}".format(entry.title, entry.path))
        return 0

    # ------------------------------------------------------------------
    # 3) Profile selection
    # ------------------------------------------------------------------
    try:
        profile = _select_profile(settings, args.profile, input_fn)
    except (OSError, ProfileError) as e:
        log.error("Cannot read profile: %s", e)
        return 1
    except (EOFError, KeyboardInterrupt):
        return 0
    if profile is None:
        return 1
    log.info("Selected profile: %s (%d + %d points)", format_profile_name(profile.title) or profile.title,
             profile.header.upper_count, profile.header.lower_count)

    # ------------------------------------------------------------------
    # 4) Build + scale + emit
    # ------------------------------------------------------------------
    if args.chord is not None:
        return 0 if _run_once(profile, settings, args.chord, args.thickness, args.preview) else 1
    return _interactive(profile, settings, args.preview, input_fn)


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
