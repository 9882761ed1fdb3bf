# -*- coding: utf-8 -*-
# Foilcut/geometry/ops/scale.py

"""
Project: Foilcut
Date: 10/19/2026

Purpose
-------
Rescale a closed profile loop to a target chord width and, optionally, a target maximum
thickness.

Main Tasks
----------
    1. Validate scale parameters (chord > 0, thickness >= 0, both integers).
    2. Chord step: multiply x and y by the chord width (keeps the t/c ratio).
    3. Thickness step (thickness > 0 only): multiply y by thickness / max(y).

Notes
-----
- The thickness step leaves x untouched, so the thickness-to-chord ratio changes when it
  is applied.
- Functions never mutate their input; each returns a new read-only array.
"""

from dataclasses import dataclass
from numbers import Integral
import numpy as np

from ..errors import DegenerateThickness, InvalidScaleParameters

__all__ = [
    "ScaleParameters",
    "scale_to_chord",
    "normalize_thickness",
    "scale_loop",
    "max_thickness",
]


def _is_int(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


@dataclass(frozen=True)
class ScaleParameters:
    """
    Output size request.

    Attributes
    ----------
    chord_width : int
        Target chord in output units (e.g. mm); must be > 0.
    thickness : int
        Target maximum thickness; 0 keeps the native proportions.
    """
    chord_width: int
    thickness: int = 0

    def __post_init__(self):
        if not _is_int(self.chord_width) or self.chord_width <= 0:
            raise InvalidScaleParameters("Chord width must be a positive integer.",
                                         {"chord_width": self.chord_width})
        if not _is_int(self.thickness) or self.thickness < 0:
            raise InvalidScaleParameters("Thickness must be a non-negative integer.",
                                         {"thickness": self.thickness})


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


def max_thickness(loop: np.ndarray) -> float:
    """Largest y over the loop (0.0 for an empty loop)."""
    if loop.shape[0] == 0:
        return 0.0
    return float(np.max(loop[:, 1]))


def scale_to_chord(loop: np.ndarray, chord_width: int) -> np.ndarray:
    """Return `loop` with both axes multiplied by `chord_width`."""
    return _frozen(np.asarray(loop, dtype=np.float64) * float(chord_width))


def normalize_thickness(loop: np.ndarray, thickness: int) -> np.ndarray:
    """
    Rescale y so that max(y) == thickness; x is copied unchanged.

    Raises
    ------
    DegenerateThickness
        If the loop has no positive y extent.
    """
    max_y = max_thickness(loop)
    if max_y <= 0.0:
        raise DegenerateThickness("Profile has no positive thickness to normalize.",
                                  {"max_y": max_y, "thickness": thickness})
    out = np.array(loop, dtype=np.float64)
    out[:, 1] *= float(thickness) / max_y
    return _frozen(out)


def scale_loop(loop: np.ndarray, params: ScaleParameters) -> np.ndarray:
    """
    Apply the chord step, then the thickness step when `params.thickness > 0`.

    Parameters
    ----------
    loop : np.ndarray
        Closed (N, 2) loop in native units.
    params : ScaleParameters
        Target chord width and thickness.

    Returns
    -------
    np.ndarray
        New (N, 2) array; does not alias `loop`.
    """
    scaled = scale_to_chord(loop, params.chord_width)
    if params.thickness > 0:
        scaled = normalize_thickness(scaled, params.thickness)
    return scaled
