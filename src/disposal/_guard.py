#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2026 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import sys
import warnings

from logging import Logger, getLogger
from typing import TYPE_CHECKING, Any, Final

from . import _config
from ._flag import Flag
from ._markers import DEFAULT, DefaultType
from ._results import Err, Ok

if TYPE_CHECKING:
    from types import TracebackType

    from ._results import Result

    if sys.version_info >= (3, 11):
        from typing import Self
    else:
        from typing_extensions import Self

LOGGER: Final[Logger] = getLogger(__name__)


class ResourceReleasedError(RuntimeError):
    """
    Raised when a released resource is used again.

    This is the Python counterpart of a "use after free": the operation is
    refused instead of acting on a resource that has already been cleaned up.
    """


class ResourceGuard:
    """
    A guard that owns the release-once discipline for a resource.

    The guard is created *live* and becomes *released* exactly once, either
    via an explicit :meth:`release` call or on exit from a :keyword:`with`
    block. After that, :meth:`use` refuses to act on the resource, while
    :meth:`release` silently does nothing.

    Subclasses that own real resources (file handles, sockets, native buffers)
    override the :meth:`_use` and :meth:`_release` hooks. The default hooks
    only log the corresponding notifications.

    Example:
        >>> with ResourceGuard('connection') as guard:
        ...     guard.use()
        >>> guard.released
        True
        >>> guard.use()
        Traceback (most recent call last):
        disposal.ResourceReleasedError: 'connection' has already been released
    """

    __slots__ = (
        "__weakref__",
        "_name",
        "_released",
        "_warn_unreleased",
    )

    def __new__(cls, /, name: str | DefaultType = DEFAULT) -> Self:
        """
        Create a live guard for the resource called *name* (``"resource"``
        by default).
        """

        if name is DEFAULT:
            name = "resource"
        elif not isinstance(name, str):
            msg = f"name must be a string, got {name!r}"
            raise TypeError(msg)

        self = object.__new__(cls)

        self._name = name
        self._released = Flag()
        self._warn_unreleased = _config.UNRELEASED_WARNINGS_ENABLED_BY_DEFAULT

        return self

    def __getnewargs__(self, /) -> tuple[Any, ...]:
        """
        Returns arguments that can be used to create new instances with the
        same initial values.

        Used by:

        * The :mod:`pickle` module for pickling.
        * The :mod:`copy` module for copying.

        The current state does not affect the arguments, so a copy of a
        released guard is live.

        Example:
            >>> orig = ResourceGuard('socket')
            >>> orig.release()
            >>> copy = ResourceGuard(*orig.__getnewargs__())
            >>> copy.name, copy.released
            ('socket', False)
        """

        return (self._name,)

    def __getstate__(self, /) -> None:
        """
        Disables the use of internal state for pickling and copying.
        """

        return None

    def __copy__(self, /) -> Self:
        return self.__class__(self._name)

    def __repr__(self, /) -> str:
        cls = self.__class__
        cls_repr = f"{cls.__module__}.{cls.__qualname__}"

        object_repr = f"{cls_repr}({self._name!r})"

        if self._released:
            extra = "released"
        else:
            extra = "live"

        return f"<{object_repr} at {id(self):#x} [{extra}]>"

    def __del__(self, /) -> None:
        # The guard never releases implicitly: a collected live guard means
        # that its owner forgot to release it.
        try:
            released = self._released
        except AttributeError:  # `__new__()` failed
            return

        if not released and self._warn_unreleased:
            warnings.warn(
                f"unreleased {self!r}",
                ResourceWarning,
                stacklevel=2,
                source=self,
            )

    def __enter__(self, /) -> Self:
        return self

    def __exit__(
        self,
        /,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.release()

    def _use(self, /) -> None:
        """
        Perform the logical action of the resource.

        Called by :meth:`use` only while the guard is live.
        """

        LOGGER.info("using %s", self._name)

    def _release(self, /) -> None:
        """
        Clean up the resource.

        Called by :meth:`release` at most once, after the guard has already
        been marked as released.
        """

        LOGGER.info("releasing %s", self._name)

    def use(self, /) -> None:
        """
        Use the resource.

        Raises:
          ResourceReleasedError:
            if the guard has already been released.
        """

        if self._released:
            msg = f"{self._name!r} has already been released"
            raise ResourceReleasedError(msg)

        self._use()

    def try_use(self, /) -> Result[None, ResourceReleasedError]:
        """
        Use the resource, returning the outcome instead of raising.

        Returns :class:`Ok(None) <disposal.Ok>` if the resource has been
        used, and :class:`~disposal.Err` with a
        :exc:`ResourceReleasedError` if the guard has already been released.

        Example:
            >>> guard = ResourceGuard()
            >>> guard.release()
            >>> result = guard.try_use()
            >>> result.is_err()
            True
        """

        try:
            self.use()
        except ResourceReleasedError as exc:
            return Err(exc)

        return Ok(None)

    def release(self, /) -> None:
        """
        Release the resource.

        Only the first call performs the cleanup; any further calls, including
        those made from the cleanup itself, do nothing.

        Never raises :exc:`Exception`: if the cleanup fails, the failure is
        logged and the guard stays released, so that an exception propagating
        through a :keyword:`with` block is not replaced by it.
        """

        if self._released.set():
            try:
                self._release()
            except Exception:
                LOGGER.exception("exception releasing %r", self)

    @property
    def name(self, /) -> str:
        """
        The name of the guarded resource.
        """

        return self._name

    @property
    def released(self, /) -> bool:
        """
        Whether the guard has been released.

        Once :data:`True`, it never becomes :data:`False` again.
        """

        return bool(self._released)

    @property
    def warn_unreleased(self, /) -> bool:
        """
        Whether a :exc:`ResourceWarning` is emitted if the guard is collected
        while still live.

        Defaults to the ``DISPOSAL_UNRELEASED_WARNINGS`` environment variable.
        """

        return self._warn_unreleased

    @warn_unreleased.setter
    def warn_unreleased(self, /, value: bool) -> None:
        self._warn_unreleased = bool(value)
