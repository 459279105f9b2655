"""traced: observe when suppliers, consumers and mappers actually run.

Handy for seeing the difference between eager and lazy fallbacks:

    ```python
    task = traced(expensive_default, label='task')
    of_nullable('result').or_else(task())      # task runs
    of_nullable('result').or_else_get(task)    # task does not run
    task.calls
    # 1
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from optval._logging import get_logger

__all__ = ['Traced', 'traced']


class Traced(wrapt.ObjectProxy):
    """Callable proxy that logs and counts every invocation of the wrapped callable."""

    def __init__(self, wrapped: Callable[..., Any], label: str) -> None:
        super().__init__(wrapped)
        self._self_label = label
        self._self_calls = 0

    @property
    def label(self) -> str:
        return self._self_label

    @property
    def calls(self) -> int:
        """Number of times the wrapped callable has been invoked."""
        return self._self_calls

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self._self_calls += 1
        get_logger(__name__).debug('callback invoked', callback=self._self_label, calls=self._self_calls)
        return self.__wrapped__(*args, **kwargs)


@overload
def traced(fn: Callable[..., Any], *, label: str | None = None) -> Traced: ...


@overload
def traced(fn: None = None, *, label: str | None = None) -> Callable[[Callable[..., Any]], Traced]: ...


def traced(
    fn: Callable[..., Any] | None = None,
    *,
    label: str | None = None,
) -> Any:
    """Wrap a callable so each call emits a debug log event and bumps a counter.

    Can be used directly or as a decorator, with or without arguments:
        traced(supplier)

        @traced
        def task(): ...

        @traced(label='task')
        def task(): ...

    Args:
        fn: The callable to wrap (when used without parentheses).
        label: Name reported in log events. Defaults to fn's qualified name.

    Returns:
        A Traced proxy with the same call signature as fn.
    """

    def wrap(func: Callable[..., Any]) -> Traced:
        name = label or getattr(func, '__qualname__', None) or repr(func)
        return Traced(func, name)

    if fn is not None:
        return wrap(fn)
    return wrap
