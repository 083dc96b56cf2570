#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2026 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

"""
Deterministic resource disposal for Python

This package provides a small set of primitives for releasing resources
exactly once and detecting their use after release:

* :class:`ResourceGuard` owns the release-once discipline for a resource
  and works as a context manager
* :func:`scoped` opens a resource scope for every call of a function
* :class:`Ok`/:class:`Err` represent the outcome of an operation as a value

Run ``python -m disposal`` for a walkthrough of buffered in-memory stream I/O
and scoped cleanup.
"""

from __future__ import annotations

__author__: str = "Ilya Egorov <0x42005e1f@gmail.com>"

from ._decorator import (
    scoped as scoped,
)
from ._guard import (
    ResourceGuard as ResourceGuard,
    ResourceReleasedError as ResourceReleasedError,
)
from ._results import (
    Err as Err,
    Ok as Ok,
    Result as Result,
)
from ._version import (
    version as __version__,
    version_tuple as __version_tuple__,
)

__all__ = (
    "Err",
    "Ok",
    "ResourceGuard",
    "ResourceReleasedError",
    "Result",
    "scoped",
)

# prepare for external use
for __value in (Err, Ok, ResourceGuard, ResourceReleasedError, scoped):
    __value.__module__ = __name__

del __value
