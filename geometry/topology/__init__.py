# -*- coding: utf-8 -*-
# Foilcut/geometry/topology/__init__.py

"""
Project: Foilcut
Date: 10/19/2026

Topology Subfolder:
-------------------
Connectivity-level operations that turn two surface blocks into one closed contour.

Modules:
--------
- loop:        Bounds-checked surface slices, closed-loop stitching (shared LE point
               kept once), signed area and orientation of the result.

- _validation: Shared validation utilities: (N, 2) structure and header/array counts.
"""

from .loop import (
    upper_surface_reversed, lower_surface_tail, build_closed_loop,
    signed_area, orientation,
)

__all__ = [
    "loop",
    "upper_surface_reversed", "lower_surface_tail", "build_closed_loop",
    "signed_area", "orientation",
]
