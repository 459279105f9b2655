"""Record: a small user-like data holder whose position may be unset."""

from __future__ import annotations

import msgspec

from optval.option import AbsentType, Present, of_nullable

__all__ = ['Record']


class Record(msgspec.Struct):
    """A person with a required name and email and an optional position.

    Examples:
        >>> user = Record('mary', 'mary@gmail.com')
        >>> user.get_position().or_else('default')
        'default'
        >>> user.set_position('developer')
        >>> user.get_position().get()
        'developer'
    """

    name: str
    email: str
    position: str | None = None

    def get_name(self) -> str:
        return self.name

    def set_name(self, name: str) -> None:
        self.name = name

    def get_email(self) -> str:
        return self.email

    def set_email(self, email: str) -> None:
        self.email = email

    def get_position(self) -> Present[str] | AbsentType:
        """Return the position wrapped in an OptionalValue."""
        return of_nullable(self.position)

    def set_position(self, position: str | None) -> None:
        self.position = position
