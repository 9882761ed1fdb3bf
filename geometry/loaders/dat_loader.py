# -*- coding: utf-8 -*-
# Foilcut/geometry/loaders/dat_loader.py

"""
Project: Foilcut
Date: 10/19/2026

Purpose:
--------
Read two-surface ("Lednicer") airfoil coordinates from `.dat`-style text and return a
LednicerProfile holding the declared counts and the flat (N, 2) point array.

Expected layout:
----------------
   line 0 : title (display only)
   line 1 : "<upper>. <lower>."  (dot-terminated integer counts)
   line 2 : blank separator (always skipped)
   line 3+: "<x> <y>" rows; upper block LE->TE, then lower block LE->TE

Main Features:
--------------
   1) Tolerates blank lines anywhere in the data region (optional block separator).
   2) Tolerates fixed-width double-space alignment and mixed whitespace.
   3) Rejects anything else with a typed error naming the offending line.

Notes:
------
   - `parse_lednicer` is pure; `load_dat` only adds file reading.
   - No reordering, closing or scaling happens here; see topology.loop and ops.scale.
"""

import math
import os
from typing import List, Optional, Tuple

from ..errors import MalformedHeader, MalformedCoordinateLine, PointCountMismatch
from ..profile import LednicerProfile, ProfileHeader, frozen_array

__all__ = ["parse_header", "parse_coordinate_line", "parse_lednicer", "load_dat"]

_HEADER_LINE = 1
_FIRST_DATA_LINE = 3


def parse_header(line: str, lineno: int = _HEADER_LINE + 1) -> ProfileHeader:
    """
    Parse the "<upper>. <lower>." header into a ProfileHeader.

    Parameters
    ----------
    line : str
        Raw header line.
    lineno : int
        1-based line number used in error context.

    Raises
    ------
    MalformedHeader
        If there are fewer than two '.'-separated fields, or either field is not a
        non-negative integer.
    """
    fields = line.split(".")
    if len(fields) < 2:
        raise MalformedHeader("Header must hold two dot-delimited counts.",
                              {"line": lineno, "text": line})
    counts = []
    for field in fields[:2]:
        token = field.strip()
        try:
            value = int(token)
        except ValueError:
            raise MalformedHeader("Header count is not an integer.",
                                  {"line": lineno, "text": line, "field": token})
        if value < 0:
            raise MalformedHeader("Header count must be non-negative.",
                                  {"line": lineno, "text": line, "field": token})
        counts.append(value)
    return ProfileHeader(upper_count=counts[0], lower_count=counts[1])


def parse_coordinate_line(line: str, lineno: int) -> Tuple[float, float]:
    """
    Parse one non-blank data row into (x, y).

    Raises
    ------
    MalformedCoordinateLine
        If the row does not split into exactly two finite reals.
    """
    cleaned = line.strip().replace("  ", " ")
    parts = cleaned.split()
    if len(parts) != 2:
        raise MalformedCoordinateLine("Expected exactly two values per row.",
                                      {"line": lineno, "text": line.strip()})
    try:
        x = float(parts[0])
        y = float(parts[1])
    except ValueError:
        raise MalformedCoordinateLine("Row values are not real numbers.",
                                      {"line": lineno, "text": line.strip()})
    if not (math.isfinite(x) and math.isfinite(y)):
        raise MalformedCoordinateLine("Row values must be finite.",
                                      {"line": lineno, "text": line.strip()})
    return x, y


def parse_lednicer(text: str, title: Optional[str] = None,
                   source: Optional[str] = None) -> LednicerProfile:
    """
    Parse raw Lednicer text into a LednicerProfile.

    Parameters
    ----------
    text : str
        Whole file content.
    title : str, optional
        Display title. Defaults to the stripped first line.
    source : str, optional
        Originating path, stored on the profile for reporting.

    Returns
    -------
    LednicerProfile
        Header counts plus a read-only (upper + lower, 2) float64 array.

    Raises
    ------
    MalformedHeader, MalformedCoordinateLine, PointCountMismatch
    """
    lines = text.splitlines()
    if len(lines) <= _HEADER_LINE:
        raise MalformedHeader("Missing header line.", {"line": _HEADER_LINE + 1})

    header = parse_header(lines[_HEADER_LINE])

    data: List[Tuple[float, float]] = []
    for idx in range(_FIRST_DATA_LINE, len(lines)):
        line = lines[idx]
        if not line.strip():
            continue
        data.append(parse_coordinate_line(line, idx + 1))

    if len(data) != header.total:
        raise PointCountMismatch("Parsed point count does not match the header.",
                                 {"declared": header.total, "found": len(data),
                                  "upper": header.upper_count, "lower": header.lower_count})

    if title is None:
        title = lines[0].strip()
    return LednicerProfile(title=title, header=header, points=frozen_array(data), source=source)


def load_dat(filename: str) -> LednicerProfile:
    """
    Read a Lednicer `.dat` file and parse it.

    The title falls back to the file stem when line 0 is empty.

    Raises
    ------
    FileNotFoundError
        If `filename` does not exist.
    ParseError
        Any of the parse errors above.
    """
    with open(filename, "r", encoding="utf-8", errors="replace") as f:
        text = f.read()
    stem = os.path.splitext(os.path.basename(filename))[0]
    first = text.splitlines()[0].strip() if text.strip() else ""
    return parse_lednicer(text, title=first or stem, source=filename)
