# -*- coding: utf-8 -*-
# Foilcut/export/csv_writer.py

"""
Project: Foilcut
Date: 10/19/2026

Purpose:
--------
Serialize a scaled profile loop as a plain comma-separated coordinate table.

Format:
-------
    - One "x,y" row per vertex, in loop order, fixed-point with six decimals.
    - Every row newline-terminated; no header row.
    - The first vertex is not repeated at the end (closure stays implicit).
"""

import logging
from typing import Sequence
import numpy as np

from ._io import write_atomic

logger = logging.getLogger(__name__)

__all__ = ["format_csv", "write_csv", "write_csv_text"]

_ROW = "%.6f,%.6f\n"


def format_csv(loop: np.ndarray) -> str:
    """
    Render `loop` as CSV text.

    Parameters
    ----------
    loop : np.ndarray or sequence of (x, y)
        Scaled loop.

    Returns
    -------
    str
        "x,y\\n" rows; empty string for an empty loop.
    """
    return "".join(_ROW % (float(x), float(y)) for x, y in _rows(loop))


def write_csv(loop: np.ndarray, path: str) -> str:
    """
    Write `format_csv(loop)` to `path` atomically and return the path.
    """
    return write_csv_text(format_csv(loop), path)


def write_csv_text(csv_text: str, path: str) -> str:
    """
    Write already formatted CSV text to `path` atomically and return the path.
    """
    out = write_atomic(csv_text, path)
    logger.info("[csv_writer] %d rows written to: %s", csv_text.count("\n"), out)
    return out


def _rows(loop) -> Sequence:
    arr = np.asarray(loop, dtype=np.float64)
    if arr.size == 0:
        return []
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError("Expected (N,2) array for loop, got shape {}.".format(arr.shape))
    return arr.tolist()
