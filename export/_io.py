# -*- coding: utf-8 -*-
# Foilcut/export/_io.py

"""
Project: Foilcut
Date: 10/19/2026

Purpose:
--------
Atomic file writing shared by the exporters and the profile library.
"""

import os
import tempfile
from pathlib import Path
from typing import Union


def write_atomic(data: Union[str, bytes], path: str) -> str:
    """
    Write `data` to `path` via a temp file in the same folder, then os.replace.

    Text is written as UTF-8 with newlines untouched; bytes are written verbatim.
    Missing parent folders are created.
    """
    p = Path(path)
    if not p.parent.exists():
        p.parent.mkdir(parents=True)
    if isinstance(data, bytes):
        tf = tempfile.NamedTemporaryFile("wb", dir=str(p.parent), delete=False)
    else:
        tf = tempfile.NamedTemporaryFile("w", encoding="utf-8", newline="",
                                         dir=str(p.parent), delete=False)
    try:
        tf.write(data)
        tmp_name = tf.name
    finally:
        tf.close()
    os.replace(tmp_name, str(p))
    return str(p)
