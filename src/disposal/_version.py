# SPDX-FileCopyrightText: 2026 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

version = "0.1.0"
version_tuple = (0, 1, 0)
