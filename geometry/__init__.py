# -*- coding: utf-8 -*-
# Foilcut/geometry/__init__.py

"""
Project: Foilcut
Date: 10/19/2026

Modules:
--------
- loaders:  Parser for two-surface (Lednicer) `.dat` text. Returns a LednicerProfile
            (title, header counts, read-only flat point array).

- topology: Contour stitching: upper block reversed, lower block minus its LE duplicate,
            implicit closure; signed area / orientation diagnostics.

- ops:      ScaleParameters and the chord / thickness scaling steps.

- profile:  Frozen ProfileHeader and LednicerProfile containers.

- errors:   ProfileError hierarchy (parse, contour and scale failures).

- api:       Minimal public facade used by main.py.
              * load_profile(text, title=None)          → LednicerProfile
              * build_contour(profile)                  → closed loop
              * scale_contour(loop, chord, thickness=0) → scaled loop
              * run_pipeline(profile, chord, thickness=0, settings=None)
                    → ProfileOutputs(loop, csv_text, dxf_document, dxf_bytes)

            Usage:
                from geometry.api import load_profile, run_pipeline

"""

__all__ = ["api", "errors", "loaders", "ops", "profile", "topology"]
