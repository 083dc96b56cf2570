#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2026 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

"""
A walkthrough of buffered in-memory stream I/O followed by deterministic
resource cleanup. The printed lines are meant for a human reader and do not
form a stable format.
"""

from __future__ import annotations

import io
import logging
import sys

from typing import TYPE_CHECKING, Final

from ._guard import ResourceGuard

if TYPE_CHECKING:
    from typing import TextIO

GREETING: Final[str] = "Hallo Tobias Janssen"


def _report(stream: io.BytesIO, stage: str, file: TextIO | None) -> None:
    # `sys.getsizeof()` includes the internal buffer of `io.BytesIO`, which is
    # the closest thing to a reserved capacity that the stream exposes.
    print(f"{stage} Position: {stream.tell()}", file=file)
    print(f"{stage} Length: {len(stream.getvalue())}", file=file)
    print(f"{stage} Allocated: {sys.getsizeof(stream)}", file=file)


def stream_round_trip(
    text: str = GREETING,
    /,
    *,
    encoding: str = "utf-8",
    file: TextIO | None = None,
) -> str:
    """
    Write *text* to an in-memory stream, rewind it, read it back, and return
    the decoded result.
    """

    data = text.encode(encoding)

    with io.BytesIO() as stream:
        _report(stream, "Before Write", file)

        stream.write(data)

        _report(stream, "After Write", file)

        # reading starts from the current position, so rewind first
        stream.seek(0, io.SEEK_SET)
        print(f"Before Read Position: {stream.tell()}", file=file)

        buffer = bytearray(len(stream.getvalue()))
        count = stream.readinto(buffer)

        print(f"After Read Position: {stream.tell()}", file=file)
        print(f"Number of Bytes: {count}", file=file)

        result = bytes(buffer[:count]).decode(encoding)

        print(f"Read String: {result}", file=file)

    return result


def guard_walkthrough(name: str = "resource", /) -> ResourceGuard:
    """
    Use a guard inside a :keyword:`with` block and return it released.
    """

    with ResourceGuard(name) as guard:
        guard.use()

    return guard


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        stream=sys.stdout,
    )

    stream_round_trip()
    guard_walkthrough()

    return 0
