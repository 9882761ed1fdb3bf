# -*- coding: utf-8 -*-
# Foilcut/geometry/topology/loop.py

"""
Project: Foilcut
Date: 10/19/2026

Purpose:
--------
This module owns *connectivity-level* concerns:
   - Stitching the two Lednicer surface blocks into one closed loop,
   - Signed area and orientation (CW/CCW) of that loop.

Stitching:
----------
   TE -> (upper, reversed) -> LE -> (lower, first point dropped) -> TE

   Both blocks start at the leading edge, so the first lower point duplicates the last
   emitted upper point and is skipped. The result has upper + lower - 1 vertices and
   never repeats its first vertex; the closing edge last -> first is implicit.

Notes:
------------
   - Pure NumPy; no logging, plotting, or file I/O.
   - Functions are side-effect free; returned loops are fresh read-only arrays.
"""

from __future__ import division
import numpy as np

from ._validation import _assert_xy, _assert_counts
from ..errors import EmptyUpperSurface, EmptyLowerSurface
from ..profile import ProfileHeader


# -----------------------
# Surface slices
# -----------------------
def upper_surface_reversed(points: np.ndarray, upper_count: int) -> np.ndarray:
    """
    Upper block walked TE -> LE (rows upper_count-1 down to 0).

    Raises
    ------
    EmptyUpperSurface
        If upper_count == 0.
    ValueError
        If upper_count exceeds the number of rows.
    """
    _assert_xy(points)
    if upper_count <= 0:
        raise EmptyUpperSurface("Upper surface block is empty.", {"upper": upper_count})
    if upper_count > points.shape[0]:
        raise ValueError(f"upper_count={upper_count} exceeds {points.shape[0]} rows.")
    return points[:upper_count][::-1]


def lower_surface_tail(points: np.ndarray, upper_count: int, lower_count: int) -> np.ndarray:
    """
    Lower block walked LE -> TE without its first row (the duplicated LE anchor).

    Rows upper_count+1 .. upper_count+lower_count-1. Empty when lower_count == 1.

    Raises
    ------
    EmptyLowerSurface
        If lower_count == 0.
    ValueError
        If the block runs past the end of the array.
    """
    _assert_xy(points)
    if lower_count <= 0:
        raise EmptyLowerSurface("Lower surface block is empty.", {"lower": lower_count})
    end = upper_count + lower_count
    if end > points.shape[0]:
        raise ValueError(f"Lower block [{upper_count}:{end}] exceeds {points.shape[0]} rows.")
    return points[upper_count + 1:end]


def build_closed_loop(header: ProfileHeader, points: np.ndarray) -> np.ndarray:
    """
    Stitch the flat point list into a single closed loop.

    Parameters
    ----------
    header : ProfileHeader
        Declared upper/lower counts.
    points : np.ndarray
        Flat (upper + lower, 2) array in file order.

    Returns
    -------
    np.ndarray
        Read-only (upper + lower - 1, 2) array; closure is implicit.

    Raises
    ------
    PointCountMismatch
        If `points` does not hold exactly upper + lower rows.
    EmptyUpperSurface, EmptyLowerSurface
        If either block is empty.
    """
    _assert_counts(header, points)
    upper = upper_surface_reversed(points, header.upper_count)
    lower = lower_surface_tail(points, header.upper_count, header.lower_count)
    loop = np.concatenate((upper, lower), axis=0)
    loop.flags.writeable = False
    return loop


# -----------------------
# Diagnostics
# -----------------------
def signed_area(loop: np.ndarray) -> float:
    """
    Shoelace signed area of an implicitly closed loop.

    Positive area => counter-clockwise (CCW). Loops with fewer than three vertices have
    zero area.
    """
    _assert_xy(loop)
    if loop.shape[0] < 3:
        return 0.0
    x = loop[:, 0]
    y = loop[:, 1]
    # Roll by -1 to represent edges (i -> i+1), implicitly connects last->first
    area2 = np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))
    return 0.5 * float(area2)


def orientation(loop: np.ndarray) -> str:
    """
    Return "CCW" if the loop is counter-clockwise, else "CW".

    Zero area (degenerate loops) is reported as "CW" by convention.
    """
    return "CCW" if signed_area(loop) > 0.0 else "CW"
