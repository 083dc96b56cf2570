#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2026 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import sys

from inspect import (
    isasyncgenfunction,
    iscoroutinefunction,
    isgeneratorfunction,
)
from typing import Any, TypeVar

from wrapt import decorator

from ._guard import ResourceGuard

if sys.version_info >= (3, 9):
    from collections.abc import Callable
else:
    from typing import Callable

_GuardT = TypeVar("_GuardT", bound=ResourceGuard)


class _Scope:
    __slots__ = (
        "_async_scoped",
        "_asyncgen_scoped",
        "_factory",
        "_generator_scoped",
        "_sync_scoped",
    )

    def __init__(self, /, factory: Callable[[], ResourceGuard]) -> None:
        self._factory = factory

        @decorator
        async def _async_scoped(wrapped, instance, args, kwargs, /):
            with factory() as guard:
                return await wrapped(guard, *args, **kwargs)

        @decorator
        async def _asyncgen_scoped(wrapped, instance, args, kwargs, /):
            with factory() as guard:
                agen = wrapped(guard, *args, **kwargs)

                try:
                    value = await agen.__anext__()
                except StopAsyncIteration:
                    return

                while True:
                    try:
                        sent = yield value
                    except GeneratorExit:
                        await agen.aclose()
                        raise
                    except BaseException as exc:  # noqa: BLE001
                        try:
                            value = await agen.athrow(exc)
                        except StopAsyncIteration:
                            return
                    else:
                        try:
                            value = await agen.asend(sent)
                        except StopAsyncIteration:
                            return

        @decorator
        def _generator_scoped(wrapped, instance, args, kwargs, /):
            with factory() as guard:
                return (yield from wrapped(guard, *args, **kwargs))

        @decorator
        def _sync_scoped(wrapped, instance, args, kwargs, /):
            with factory() as guard:
                return wrapped(guard, *args, **kwargs)

        self._async_scoped = _async_scoped
        self._asyncgen_scoped = _asyncgen_scoped
        self._generator_scoped = _generator_scoped
        self._sync_scoped = _sync_scoped

    def __repr__(self, /) -> str:
        return f"disposal.scoped({self._factory!r})"

    def __call__(self, wrapped: Callable[..., Any], /) -> Callable[..., Any]:
        if not callable(wrapped):
            msg = f"a callable object was expected, got {wrapped!r}"
            raise TypeError(msg)

        # generator bodies run on iteration, not on call, so the guard has
        # to stay open until the generator is exhausted or closed
        if isasyncgenfunction(wrapped):
            return self._asyncgen_scoped(wrapped)

        if iscoroutinefunction(wrapped):
            return self._async_scoped(wrapped)

        if isgeneratorfunction(wrapped):
            return self._generator_scoped(wrapped)

        return self._sync_scoped(wrapped)


def scoped(
    factory: Callable[[], _GuardT] = ResourceGuard,
    /,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Wrap a function so that each call runs inside its own resource scope.

    On every call, a new guard is created by calling *factory* and passed to
    the function as the first positional argument (after ``self`` for
    methods). The guard is released on every exit path from the call: normal
    return, early return, or exception propagation.

    For coroutine functions, the guard is created when the coroutine starts
    and released when it finishes. For generator functions (both sync and
    async), it is created on the first iteration and released when the
    generator is exhausted, fails, or is closed; values sent or thrown into
    the wrapper are forwarded to the wrapped generator.

    Example:
        >>> @scoped()
        ... def work(guard, x):
        ...     guard.use()
        ...     return x * 2
        >>> work(21)
        42

    Raises:
      TypeError:
        if *factory* is not callable.
    """

    if not callable(factory):
        msg = f"a callable factory was expected, got {factory!r}"
        raise TypeError(msg)

    return _Scope(factory)
