# -*- coding: utf-8 -*-
# Foilcut/geometry/api.py

"""
Project: Foilcut
Date: 10/19/2026

Purpose
-------
Thin, import-only facade for the profile pipeline. Exposes helpers to (1) parse raw
Lednicer text, (2) stitch the closed contour, (3) scale it, and (4) run all steps plus
both emitters in one call.

Main Tasks
----------
    1. `load_profile`   → parse text into an immutable LednicerProfile.
    2. `build_contour`  → closed loop (upper + lower - 1 vertices, implicit closure).
    3. `scale_contour`  → chord/thickness scaling into a new array.
    4. `run_pipeline`   → loop + CSV text + DXF document/bytes for one parameter set.

Notes
-----
- Every call starts from the immutable profile, so repeated runs with different
  parameters never compound scale factors.
- Errors from geometry.errors propagate unchanged to the caller.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional
import numpy as np
from ezdxf.document import Drawing

from .loaders.dat_loader import parse_lednicer
from .profile import LednicerProfile
from .topology.loop import build_closed_loop, orientation
from .ops.scale import ScaleParameters, scale_loop, max_thickness
from export.csv_writer import format_csv
from export.dxf_writer import build_dxf, dxf_bytes

logger = logging.getLogger(__name__)

__all__ = [
    "ProfileOutputs",
    "load_profile",
    "build_contour",
    "scale_contour",
    "run_pipeline",
]


@dataclass(frozen=True)
class ProfileOutputs:
    """Result of one pipeline run."""
    params: ScaleParameters
    loop: np.ndarray
    csv_text: str
    dxf_document: Drawing

    @property
    def dxf_bytes(self) -> bytes:
        return dxf_bytes(self.dxf_document)

    @property
    def max_thickness(self) -> float:
        return max_thickness(self.loop)


def load_profile(text: str, title: Optional[str] = None) -> LednicerProfile:
    """Parse raw Lednicer text (see loaders.dat_loader.parse_lednicer)."""
    return parse_lednicer(text, title=title)


def build_contour(profile: LednicerProfile) -> np.ndarray:
    """
    Stitch the profile's surfaces into one closed loop.

    Returns
    -------
    np.ndarray
        Read-only (upper + lower - 1, 2) array.
    """
    loop = build_closed_loop(profile.header, profile.points)
    logger.debug("[build_contour] '%s': %d vertices, %s.",
                 profile.title, loop.shape[0], orientation(loop))
    return loop


def scale_contour(loop: np.ndarray, chord_width: int, thickness: int = 0) -> np.ndarray:
    """Scale `loop` to `chord_width` and (if > 0) `thickness`; returns a new array."""
    return scale_loop(loop, ScaleParameters(chord_width=chord_width, thickness=thickness))


def run_pipeline(profile: LednicerProfile, chord_width: int, thickness: int = 0,
                 *, settings: Optional[Mapping[str, Any]] = None) -> ProfileOutputs:
    """
    Build, scale and emit one profile for one parameter set.

    Args
    ----
    profile : LednicerProfile
        Parsed profile (not modified).
    chord_width : int
        Target chord (> 0).
    thickness : int, optional
        Target max thickness; 0 keeps native proportions (default: 0).
    settings : mapping, optional
        Full settings dict; the "dxf" section styles the drawing.

    Returns
    -------
    ProfileOutputs
        Scaled loop, CSV text and DXF document (both in loop order).
    """
    params = ScaleParameters(chord_width=chord_width, thickness=thickness)
    loop = scale_loop(build_contour(profile), params)
    outputs = ProfileOutputs(
        params=params,
        loop=loop,
        csv_text=format_csv(loop),
        dxf_document=build_dxf(loop, settings),
    )
    logger.info("[run_pipeline] '%s' scaled to chord=%d, thickness=%d (max y=%.3f).",
                profile.title, params.chord_width, params.thickness, outputs.max_thickness)
    return outputs
