# -*- coding: utf-8 -*-
# Foilcut/geometry/loaders/__init__.py

"""
Project: Foilcut
Date: 10/19/2026

Loaders Subpackage:
-------------------
Readers that turn airfoil coordinate text into a LednicerProfile.

Modules:
--------
- dat_loader:  Parser for two-surface (Lednicer) `.dat` files: title, dot-delimited
               header counts, blank separator, then x/y rows.

Assumptions & Notes:
--------------------
- Units: native file units preserved; scaling happens in ops.scale
- Header counts are authoritative regardless of coordinate magnitude
- Topology: no reordering or stitching performed here
"""

from .dat_loader import parse_lednicer, load_dat

__all__ = ["dat_loader", "parse_lednicer", "load_dat"]
