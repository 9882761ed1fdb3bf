# -*- coding: utf-8 -*-
# Foilcut/geometry/topology/_validation.py

"""
Project: Foilcut
Date: 10/19/2026

Purpose:
--------
Shared validation for topology operations: point array structure and the header/array
consistency that contour stitching relies on.
"""

from typing import Optional
import numpy as np

from ..errors import PointCountMismatch
from ..profile import ProfileHeader


def _assert_xy(points: Optional[np.ndarray]) -> None:
    """
    Validate that points array is (N, 2).

    Raises
    ------
    ValueError
        If points is None or not shaped (N, 2)
    """
    if points is None:
        raise ValueError("No geometry provided (points is None).")

    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"Expected (N, 2) array for points, got shape {points.shape}.")


def _assert_counts(header: ProfileHeader, points: np.ndarray) -> None:
    """
    Require the flat point list to hold exactly upper + lower rows.

    Raises
    ------
    PointCountMismatch
        If the array length disagrees with the header.
    """
    _assert_xy(points)
    if points.shape[0] != header.total:
        raise PointCountMismatch("Flat point list does not match the header counts.",
                                 {"declared": header.total, "found": int(points.shape[0])})
