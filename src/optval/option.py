"""OptionalValue type: Present[T] | Absent for values that may be missing."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import NoReturn, TypeIs

import msgspec

from optval.errors import AbsentValueError, NullConstructionError

__all__ = [
    'Absent',
    'AbsentType',
    'OptionalValue',
    'Present',
    'empty',
    'of',
    'of_nullable',
]


class Present[T](msgspec.Struct, frozen=True, gc=False):
    """Present variant of OptionalValue holding a non-None value of type T.

    Examples:
        >>> opt = Present('mary')
        >>> opt.get()
        'mary'
        >>> opt.map(str.upper)
        Present(value='MARY')
        >>> opt.filter(lambda s: s.startswith('x'))
        AbsentType()
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise NullConstructionError()

    def is_present(self) -> TypeIs[Present[T]]:
        """Return True since this is Present."""
        return True

    def is_empty(self) -> TypeIs[AbsentType]:
        """Return False since this is Present."""
        return False

    def get(self) -> T:
        """Return the held value."""
        return self.value

    def if_present(self, consumer: Callable[[T], object]) -> None:
        """Call consumer with the held value."""
        consumer(self.value)

    def if_present_or_else(self, consumer: Callable[[T], object], fallback: Callable[[], object]) -> None:  # noqa: ARG002
        """Call consumer with the held value, ignoring the fallback action."""
        consumer(self.value)

    def or_else(self, default: T) -> T:  # noqa: ARG002
        """Return the held value, ignoring the default.

        The default has already been evaluated by the caller at this point;
        use or_else_get() when producing it is expensive.
        """
        return self.value

    def or_else_get(self, supplier: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the held value without calling the supplier."""
        return self.value

    def or_else_raise(self, factory: Callable[[], BaseException] | None = None) -> T:  # noqa: ARG002
        """Return the held value without calling the error factory."""
        return self.value

    def map[U](self, f: Callable[[T], U | None]) -> Present[U] | AbsentType:
        """Apply f to the held value and wrap the result with of_nullable().

        Args:
            f: Function to apply to the held value.

        Returns:
            Present(result), or Absent if f returned None.
        """
        return of_nullable(f(self.value))

    def flat_map[U](self, f: Callable[[T], Present[U] | AbsentType]) -> Present[U] | AbsentType:
        """Apply a function that itself returns an OptionalValue.

        The returned container is passed through as-is, so nested optionals
        are not produced.

        Args:
            f: Function that takes T and returns OptionalValue[U].

        Returns:
            The OptionalValue returned by f.

        Raises:
            TypeError: If f returns something other than an OptionalValue.
        """
        result = f(self.value)
        if not isinstance(result, Present | AbsentType):
            msg = f'flat_map function must return an OptionalValue, got {type(result).__name__}'
            raise TypeError(msg)
        return result

    def filter(self, predicate: Callable[[T], bool]) -> Present[T] | AbsentType:
        """Return self if predicate(value) is truthy, else Absent."""
        if predicate(self.value):
            return self
        return Absent

    def or_(self, supplier: Callable[[], Present[T] | AbsentType]) -> Present[T]:  # noqa: ARG002
        """Return self unchanged since this is Present."""
        return self

    def __iter__(self) -> Iterator[T]:
        yield self.value


class AbsentType(msgspec.Struct, frozen=True, gc=False):
    """Absent variant of OptionalValue: no value is held.

    This is a singleton - use the `Absent` constant (or `empty()`) instead
    of instantiating directly.

    Examples:
        >>> Absent.is_present()
        False
        >>> Absent.or_else('mary')
        'mary'
    """

    def is_present(self) -> TypeIs[Present[object]]:
        """Return False since this is Absent."""
        return False

    def is_empty(self) -> TypeIs[AbsentType]:
        """Return True since this is Absent."""
        return True

    def get(self) -> NoReturn:
        """Raise since there is no value to return.

        Raises:
            AbsentValueError: Always.
        """
        raise AbsentValueError()

    def if_present[T](self, consumer: Callable[[T], object]) -> None:  # noqa: ARG002
        """Do nothing since there is no value."""

    def if_present_or_else[T](self, consumer: Callable[[T], object], fallback: Callable[[], object]) -> None:  # noqa: ARG002
        """Run the fallback action since there is no value."""
        fallback()

    def or_else[T](self, default: T) -> T:
        """Return the default."""
        return default

    def or_else_get[T](self, supplier: Callable[[], T]) -> T:
        """Call the supplier and return its result."""
        return supplier()

    def or_else_raise(self, factory: Callable[[], BaseException] | None = None) -> NoReturn:
        """Raise the error produced by factory, or AbsentValueError without one.

        Args:
            factory: Zero-argument callable returning the exception to raise.
                An exception class works too.

        Raises:
            BaseException: Whatever factory() returns.
            AbsentValueError: If no factory is given.
        """
        if factory is None:
            raise AbsentValueError()
        raise factory()

    def map[T, U](self, f: Callable[[T], U | None]) -> AbsentType:  # noqa: ARG002
        """Return Absent since there is no value to map."""
        return self

    def flat_map[T, U](self, f: Callable[[T], Present[U] | AbsentType]) -> AbsentType:  # noqa: ARG002
        """Return Absent since there is no value to bind."""
        return self

    def filter[T](self, predicate: Callable[[T], bool]) -> AbsentType:  # noqa: ARG002
        """Return Absent since there is no value to test."""
        return self

    def or_[T](self, supplier: Callable[[], Present[T] | AbsentType]) -> Present[T] | AbsentType:
        """Return the OptionalValue produced by supplier."""
        return supplier()

    def __iter__(self) -> Iterator[object]:
        return iter(())


Absent: AbsentType = AbsentType()
"""Singleton instance representing the absence of a value."""


type OptionalValue[T] = Present[T] | AbsentType


def empty() -> AbsentType:
    """Return the absent container."""
    return Absent


def of[T](value: T) -> Present[T]:
    """Wrap a value that must not be None.

    Raises:
        NullConstructionError: If value is None.
    """
    return Present(value)


def of_nullable[T](value: T | None) -> Present[T] | AbsentType:
    """Wrap a value that may be None; None becomes Absent."""
    if value is None:
        return Absent
    return Present(value)
