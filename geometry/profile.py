# -*- coding: utf-8 -*-
# Foilcut/geometry/profile.py

"""
Project: Foilcut
Date: 10/19/2026

Purpose:
--------
Immutable containers for a parsed two-surface ("Lednicer") airfoil profile.

Notes:
------
   - `points` is the flat (upper + lower, 2) float64 array in file order: the upper block
     (LE -> TE) followed by the lower block (LE -> TE).
   - Arrays handed out here are read-only; every downstream step allocates a new array.
"""

from dataclasses import dataclass
from typing import Optional
import numpy as np


@dataclass(frozen=True)
class ProfileHeader:
    """Point counts declared on the header line."""
    upper_count: int
    lower_count: int

    @property
    def total(self) -> int:
        return self.upper_count + self.lower_count

    @property
    def loop_length(self) -> int:
        """Vertices in the stitched loop (shared LE point counted once)."""
        return self.upper_count + self.lower_count - 1


@dataclass(frozen=True)
class LednicerProfile:
    """
    Parsed profile: display title, header counts and the flat point list.

    Attributes
    ----------
    title : str
        First line of the source text (display only).
    header : ProfileHeader
        Declared surface counts.
    points : np.ndarray
        Read-only (N, 2) float64 array, N == header.total.
    source : Optional[str]
        File path the text came from, if any.
    """
    title: str
    header: ProfileHeader
    points: np.ndarray
    source: Optional[str] = None

    @property
    def upper(self) -> np.ndarray:
        return self.points[:self.header.upper_count]

    @property
    def lower(self) -> np.ndarray:
        return self.points[self.header.upper_count:]


def frozen_array(values) -> np.ndarray:
    """Return a float64 (N, 2) copy of `values` with the writeable flag cleared."""
    arr = np.array(values, dtype=np.float64).reshape(-1, 2)
    arr.flags.writeable = False
    return arr
