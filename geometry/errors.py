# -*- coding: utf-8 -*-
# Foilcut/geometry/errors.py

"""
Project: Foilcut
Date: 10/19/2026

Purpose
-------
Typed exceptions for the profile pipeline (parse -> contour -> scale) with compact,
context-aware messages so a caller can tell the user which line or value was rejected.

Main Tasks
----------
    1. Define ProfileError(message, context) with a compact context suffix in __str__.
    2. Group failures per stage: ParseError, ContourError, ScaleError.
    3. Provide the concrete kinds raised by the loaders, topology and ops modules.

Notes
-----
- Every error is terminal to the current pipeline call; nothing is retried.
- Context is optional; long values are truncated for readability.
"""

from __future__ import absolute_import

__all__ = [
    "ProfileError",
    "ParseError",
    "MalformedHeader",
    "MalformedCoordinateLine",
    "PointCountMismatch",
    "ContourError",
    "EmptyUpperSurface",
    "EmptyLowerSurface",
    "ScaleError",
    "DegenerateThickness",
    "InvalidScaleParameters",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class ProfileError(Exception):
    """
    Base class for all profile pipeline errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields appended in the string form (e.g., {"line": 2, "text": "abc. 2."}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super(ProfileError, self).__init__(message)

    def __str__(self):
        base = super(ProfileError, self).__str__()
        return base + _format_context(self.context)


# -----------------------
# Parsing
# -----------------------
class ParseError(ProfileError):
    """Raw coordinate text could not be turned into a profile."""


class MalformedHeader(ParseError):
    """Header line is missing the two dot-delimited integer counts."""


class MalformedCoordinateLine(ParseError):
    """A data line does not hold exactly two finite real numbers."""


class PointCountMismatch(ParseError):
    """Number of parsed points differs from upper + lower declared in the header."""


# -----------------------
# Contour stitching
# -----------------------
class ContourError(ProfileError):
    """Surface blocks cannot be stitched into a closed loop."""


class EmptyUpperSurface(ContourError):
    """Upper block is empty: no leading-edge anchor to stitch against."""


class EmptyLowerSurface(ContourError):
    """Lower block is empty: no leading-edge duplicate to drop."""


# -----------------------
# Scaling
# -----------------------
class ScaleError(ProfileError):
    """Scaling request cannot be applied to the loop."""


class DegenerateThickness(ScaleError):
    """Thickness normalization requested but max(y) <= 0."""


class InvalidScaleParameters(ScaleError):
    """Chord width must be a positive integer, thickness a non-negative integer."""
