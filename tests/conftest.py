#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2026 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: 0BSD

import logging

import pytest


@pytest.fixture
def notifications(caplog):
    caplog.set_level(logging.INFO, logger="disposal")

    def _notifications(prefix=""):
        return [
            record.getMessage()
            for record in caplog.records
            if record.name.startswith("disposal")
            and record.getMessage().startswith(prefix)
        ]

    return _notifications

