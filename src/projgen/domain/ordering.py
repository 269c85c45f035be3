"""Numeric ordering for customizers and contributors.

Lower values run first. Objects without an ``order`` attribute sit at 0,
and ties keep registration order (the sort is stable).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

HIGHEST_PRECEDENCE = -(2**31)
LOWEST_PRECEDENCE = 2**31 - 1
DEFAULT_ORDER = 0

_T = TypeVar("_T")


def order_of(obj: object) -> int:
    """Return the declared order of *obj* (an instance, class, or function)."""
    value = getattr(obj, "order", DEFAULT_ORDER)
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_ORDER
    return value


def order(value: int) -> Callable[[_T], _T]:
    """Decorator stamping an ``order`` attribute on a function or class.

    Usage::

        @order(10)
        def add_readme(project_root: Path) -> None: ...
    """

    def decorate(target: _T) -> _T:
        target.order = value  # type: ignore[attr-defined]
        return target

    return decorate


def sort_by_order(items: Iterable[Any]) -> list[Any]:
    """Return *items* sorted by ascending order, keeping ties stable."""
    return sorted(items, key=order_of)
