#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2026 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import sys

from typing import TYPE_CHECKING, Any, Generic

from ._markers import MISSING, MissingType

if sys.version_info >= (3, 13):
    from typing import TypeVar
else:
    from typing_extensions import TypeVar

if TYPE_CHECKING:
    if sys.version_info >= (3, 11):
        from typing import Self
    else:
        from typing_extensions import Self

_T = TypeVar("_T", default=object)
_D = TypeVar("_D")


class Flag(Generic[_T]):
    """
    A one-way flag that can be set exactly once and never cleared.

    The first successful :meth:`set` call stores a marker, and every later
    call leaves it untouched. This makes the flag suitable for recording
    irreversible state transitions, such as the release of a resource.

    Example:
        >>> released = Flag()
        >>> bool(released)
        False
        >>> released.set('explicit')
        True
        >>> released.set('implicit')  # already set
        False
        >>> released.get()
        'explicit'
    """

    __slots__ = (
        "__weakref__",
        "_markers",
    )

    def __new__(cls, /, marker: _T | MissingType = MISSING) -> Self:
        """
        Create a flag that is unset, or set to *marker* if it is passed.
        """

        self = object.__new__(cls)

        if marker is MISSING:
            self._markers = []
        else:
            self._markers = [marker]

        return self

    def __getnewargs__(self, /) -> tuple[Any, ...]:
        """
        Returns arguments that can be used to create new instances with the
        same state.

        Unlike for :class:`~disposal.ResourceGuard`, the current state of the
        flag affects the arguments.
        """

        if self._markers:
            return (self._markers[0],)

        return ()

    def __getstate__(self, /) -> None:
        """
        Disables the use of internal state for pickling and copying.
        """

        return None

    def __copy__(self, /) -> Self:
        return self.__class__(*self.__getnewargs__())

    def __repr__(self, /) -> str:
        cls = self.__class__
        cls_repr = f"{cls.__module__}.{cls.__qualname__}"

        if self._markers:
            return f"{cls_repr}({self._markers[0]!r})"

        return f"{cls_repr}()"

    def __bool__(self, /) -> bool:
        """
        Returns :data:`True` if the flag is set.
        """

        return bool(self._markers)

    def get(self, /, default: _D | MissingType = MISSING) -> _T | _D:
        """
        Return the marker of the flag, or *default* if the flag is unset.

        Raises:
          LookupError:
            if the flag is unset and *default* is not passed.
        """

        if self._markers:
            return self._markers[0]

        if default is not MISSING:
            return default

        raise LookupError(self)

    def set(self, /, marker: _T | MissingType = MISSING) -> bool:
        """
        Set the flag to *marker* (or to a new unique object if it is not
        passed).

        Returns :data:`True` only for the call that actually set the flag.
        """

        markers = self._markers

        if markers:
            return False

        if marker is MISSING:
            marker = object()

        markers.append(marker)

        return True
