# -*- coding: utf-8 -*-
# Foilcut/post/__init__.py

"""
Project: Foilcut
Date: 10/19/2026

Modules:
--------
- plot_geo:    matplotlib preview of a scaled, closed profile contour.
"""

__all__ = ["plot_geo"]
