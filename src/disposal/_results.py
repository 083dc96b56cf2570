#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2026 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import sys

from typing import TYPE_CHECKING, Any, Generic, TypeVar, Union

if sys.version_info >= (3, 11):  # runtime introspection support
    from typing import final
else:  # typing-extensions>=4.1.0
    from typing_extensions import final

if TYPE_CHECKING:
    if sys.version_info >= (3, 11):
        from typing import NoReturn, Self
    else:
        from typing_extensions import NoReturn, Self

_T = TypeVar("_T")
_E = TypeVar("_E", bound=BaseException)
_D = TypeVar("_D")


@final
class Ok(Generic[_T]):
    """
    The successful outcome of an operation, carrying its *value*.

    Example:
        >>> result = Ok(42)
        >>> result.is_ok()
        True
        >>> result.unwrap()
        42
    """

    __slots__ = ("_value",)

    def __new__(cls, /, value: _T) -> Self:
        self = object.__new__(cls)

        object.__setattr__(self, "_value", value)

        return self

    def __getnewargs__(self, /) -> tuple[Any, ...]:
        return (self._value,)

    def __getstate__(self, /) -> None:
        return None

    def __setattr__(self, /, name: str, value: object) -> NoReturn:
        msg = f"{self.__class__.__qualname__!r} object is immutable"
        raise AttributeError(msg)

    def __delattr__(self, /, name: str) -> NoReturn:
        msg = f"{self.__class__.__qualname__!r} object is immutable"
        raise AttributeError(msg)

    def __repr__(self, /) -> str:
        cls = self.__class__
        cls_repr = f"{cls.__module__}.{cls.__qualname__}"

        return f"{cls_repr}({self._value!r})"

    def __eq__(self, /, other: object) -> bool:
        if isinstance(other, Ok):
            return self._value == other._value

        return NotImplemented

    def __hash__(self, /) -> int:
        return hash((Ok, self._value))

    def is_ok(self, /) -> bool:
        return True

    def is_err(self, /) -> bool:
        return False

    def unwrap(self, /) -> _T:
        return self._value

    def unwrap_or(self, /, default: object) -> _T:
        return self._value

    @property
    def value(self, /) -> _T:
        return self._value


@final
class Err(Generic[_E]):
    """
    The failed outcome of an operation, carrying the exception that would
    otherwise have been raised.

    The exception is not raised until :meth:`unwrap` is called, so the caller
    has to decide explicitly what to do with the failure.

    Example:
        >>> result = Err(LookupError('nothing'))
        >>> result.is_err()
        True
        >>> result.unwrap_or(None) is None
        True
        >>> result.unwrap()
        Traceback (most recent call last):
        LookupError: nothing
    """

    __slots__ = ("_error",)

    def __new__(cls, /, error: _E) -> Self:
        if not isinstance(error, BaseException):
            msg = f"an exception was expected, got {error!r}"
            raise TypeError(msg)

        self = object.__new__(cls)

        object.__setattr__(self, "_error", error)

        return self

    def __getnewargs__(self, /) -> tuple[Any, ...]:
        return (self._error,)

    def __getstate__(self, /) -> None:
        return None

    def __setattr__(self, /, name: str, value: object) -> NoReturn:
        msg = f"{self.__class__.__qualname__!r} object is immutable"
        raise AttributeError(msg)

    def __delattr__(self, /, name: str) -> NoReturn:
        msg = f"{self.__class__.__qualname__!r} object is immutable"
        raise AttributeError(msg)

    def __repr__(self, /) -> str:
        cls = self.__class__
        cls_repr = f"{cls.__module__}.{cls.__qualname__}"

        return f"{cls_repr}({self._error!r})"

    def __eq__(self, /, other: object) -> bool:
        if isinstance(other, Err):
            return self._error is other._error

        return NotImplemented

    def __hash__(self, /) -> int:
        return hash((Err, id(self._error)))

    def is_ok(self, /) -> bool:
        return False

    def is_err(self, /) -> bool:
        return True

    def unwrap(self, /) -> NoReturn:
        raise self._error

    def unwrap_or(self, /, default: _D) -> _D:
        return default

    @property
    def error(self, /) -> _E:
        return self._error


Result = Union[Ok[_T], Err[_E]]
