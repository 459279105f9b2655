"""Error types raised by OptionalValue construction and access."""

from __future__ import annotations

__all__ = [
    'AbsentValueError',
    'NullConstructionError',
    'OptvalError',
]


class OptvalError(Exception):
    """Base class for errors raised by optval."""


class NullConstructionError(OptvalError, ValueError):
    """None was passed where a value is required - e.g. of(None)."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or 'Cannot wrap None in Present; use of_nullable() instead')


class AbsentValueError(OptvalError, LookupError):
    """A value was requested from an absent container."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or 'No value present')
