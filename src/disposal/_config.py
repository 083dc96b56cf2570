#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2026 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import os

from typing import Final

# Read once at import time. The empty value disables the warning, any
# non-empty value enables it.
UNRELEASED_WARNINGS_ENABLED_BY_DEFAULT: Final[bool] = bool(
    os.getenv(
        "DISPOSAL_UNRELEASED_WARNINGS",
        "1",
    )
)
