# -*- coding: utf-8 -*-
# Foilcut/export/__init__.py

"""
Project: Foilcut
Date: 10/19/2026

Modules:
--------
- csv_writer: Six-decimal "x,y" rows, loop order, no header, implicit closure.

- dxf_writer: ezdxf document with one closed 3D POLYLINE (z = 0) on one layer.

- _io:        Atomic UTF-8/bytes writer shared by exporters and the profile library.
"""

from .csv_writer import format_csv, write_csv, write_csv_text
from .dxf_writer import build_dxf, dxf_bytes, save_dxf, write_dxf

__all__ = [
    "format_csv", "write_csv", "write_csv_text",
    "build_dxf", "dxf_bytes", "save_dxf", "write_dxf",
]
