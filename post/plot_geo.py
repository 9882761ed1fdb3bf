# -*- coding: utf-8 -*-
# Foilcut/post/plot_geo.py

"""
Project: Foilcut
Date: 10/19/2026

Purpose:
--------
Quick matplotlib preview of a scaled profile contour, drawn closed (last -> first edge
included) with the first vertex (trailing edge) marked.
"""

from typing import Optional
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes


def plot_contour(loop: np.ndarray,
                 *,
                 name: str = "profile",
                 show: bool = True,
                 save_path: Optional[str] = None,
                 ax: Optional[Axes] = None) -> None:
    """
        Plot a closed profile loop.

        Parameters
        ----------
        loop : np.ndarray
            (N,2) loop with implicit closure.
        name : str
            Title label for the figure.
        show : bool
            If True and we created the figure, display it.
        save_path : Optional[str]
            If given, save the figure to this path.
        ax : Optional[matplotlib.axes.Axes]
            Existing Axes to draw on; if None, a figure is created.
        """

    if loop is None or loop.ndim != 2 or loop.shape[1] != 2 or loop.shape[0] == 0:
        raise ValueError("Expected non-empty (N,2) float array for loop.")
    created_fig = False
    if ax is None:
        plt.figure(figsize=(8, 3))
        ax = plt.gca()
        created_fig = True
    closed = np.vstack((loop, loop[:1]))
    ax.plot(closed[:, 0], closed[:, 1], 'k-', lw=1.5, label="contour")
    ax.plot(loop[0, 0], loop[0, 1], 'mo', ms=5, label="start")
    ax.set_aspect('equal', adjustable='box')
    ax.set_title("Profile: {}".format(name))
    ax.set_xlabel("x [mm]")
    ax.set_ylabel("y [mm]")
    ax.grid(True)
    ax.legend()
    if save_path:
        ax.figure.savefig(save_path, dpi=150)
    if show and created_fig:
        plt.show()
    elif created_fig:
        plt.close(ax.figure)
