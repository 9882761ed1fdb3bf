# -*- coding: utf-8 -*-
# Foilcut/geometry/ops/__init__.py

"""
Project: Foilcut
Date: 10/19/2026

Ops Subfolder:
--------------
Numeric operations applied to a closed profile loop.

Contents
--------
- scale:    ScaleParameters, chord scaling, thickness normalization and the combined
            scale_loop used by the pipeline facade.
"""

from .scale import (
    ScaleParameters, scale_to_chord, normalize_thickness, scale_loop, max_thickness,
)

__all__ = [
    "ScaleParameters", "scale_to_chord", "normalize_thickness",
    "scale_loop", "max_thickness",
]
