# -*- coding: utf-8 -*-
# Foilcut/export/dxf_writer.py

"""
Project: Foilcut
Date: 10/19/2026

Purpose:
--------
Emit a fresh DXF drawing (via ezdxf) holding the scaled profile as one closed 3D
POLYLINE on a single named layer.

Main Tasks:
-----------
    1. Create a new document and its one layer (flat color, continuous line type).
    2. Add the loop vertices in order with z = 0 and mark the polyline closed, so CAD
       tools draw the last -> first edge themselves.
    3. Serialize to bytes or write them to disk atomically.

Notes:
------
   - Nothing besides the layer table entry and the polyline is added.
   - Layer name, color, line type scale and DXF version come from settings["dxf"].
"""

import io
import logging
from typing import Any, Dict, Mapping, Optional
import numpy as np
import ezdxf
from ezdxf.document import Drawing

from config.settings import DEFAULTS
from ._io import write_atomic

logger = logging.getLogger(__name__)

__all__ = ["build_dxf", "dxf_bytes", "save_dxf", "write_dxf"]


def _dxf_settings(settings: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    opts = dict(DEFAULTS["dxf"])
    if settings is not None:
        opts.update(settings.get("dxf", {}))
    return opts


def build_dxf(loop: np.ndarray, settings: Optional[Mapping[str, Any]] = None) -> Drawing:
    """
    Build a DXF document with the loop as a single closed polyline.

    Parameters
    ----------
    loop : np.ndarray
        Scaled (N, 2) loop, N >= 1.
    settings : mapping, optional
        Full settings dict (only the "dxf" section is read).

    Returns
    -------
    ezdxf.document.Drawing
        New in-memory document.

    Raises
    ------
    ValueError
        If the loop is empty or not (N, 2).
    """
    pts = np.asarray(loop, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 2 or pts.shape[0] == 0:
        raise ValueError("Expected non-empty (N,2) array for loop, got shape {}.".format(pts.shape))
    opts = _dxf_settings(settings)

    doc = ezdxf.new(opts["version"])
    doc.header["$LTSCALE"] = float(opts["ltscale"])
    doc.layers.new(opts["layer"], dxfattribs={"color": opts["color"], "linetype": opts["linetype"]})
    doc.header["$CLAYER"] = opts["layer"]

    msp = doc.modelspace()
    vertices = [(x, y, 0.0) for x, y in pts.tolist()]
    msp.add_polyline3d(vertices, close=True, dxfattribs={"layer": opts["layer"]})
    return doc


def dxf_bytes(doc: Drawing) -> bytes:
    """Serialize `doc` as ASCII DXF bytes in the document's output encoding."""
    stream = io.StringIO()
    doc.write(stream)
    return stream.getvalue().encode(doc.output_encoding)


def save_dxf(doc: Drawing, path: str) -> str:
    """
    Write an already built document to `path` atomically; return the path.
    """
    out = write_atomic(dxf_bytes(doc), path)
    logger.info("[dxf_writer] Drawing written to: %s", out)
    return out


def write_dxf(loop: np.ndarray, path: str, settings: Optional[Mapping[str, Any]] = None) -> str:
    """
    Build the drawing for `loop` and save it to `path`; return the path.
    """
    return save_dxf(build_dxf(loop, settings), path)
