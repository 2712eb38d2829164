"""Helpers for choosing between an original value and an alternative."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .validation_guards import require_bool_condition

T = TypeVar("T")


@dataclass(frozen=True)
class Deferred(Generic[T]):
    """Alternative whose value is produced only when it gets selected."""

    producer: Callable[[], T]

    def resolve(self) -> T:
        """Invoke the producer and return its value."""
        return self.producer()


def deferred(producer: Callable[[], T]) -> Deferred[T]:
    """Wrap a zero-argument producer as a lazy alternative."""
    return Deferred(producer)


def conditions_hold(conditions: Iterable[bool], *, strict: bool = False) -> bool:
    """
    Return True when every condition is true.

    An empty iterable holds vacuously. Iteration stops at the first false
    condition, so generators are not consumed past that point.

    Args:
        conditions: Conditions in evaluation order
        strict: Require every inspected condition to be a ``bool``

    Raises:
        ConditionTypeError: In strict mode, for the first non-bool condition
    """
    if not strict:
        return all(conditions)
    for index, condition in enumerate(conditions):
        require_bool_condition(condition, index)
        if not condition:
            return False
    return True


def pick_or(
    original: T,
    alternative: Union[T, Deferred[T]],
    *conditions: bool,
    strict: bool = False,
) -> T:
    """
    Return ``alternative`` when all conditions hold, otherwise ``original``.

    With no conditions the alternative is returned. A ``Deferred`` alternative
    is resolved only when it is selected; plain values are returned as-is.

    Example:
        >>> pick_or(42, 100, False)
        42
        >>> pick_or(42, 100, True, True)
        100
    """
    if not conditions_hold(conditions, strict=strict):
        return original
    if isinstance(alternative, Deferred):
        return alternative.resolve()
    return alternative


def pick_when(
    original: T,
    *conditions: bool,
    alternative: Callable[[], T],
    strict: bool = False,
) -> T:
    """Builder form of ``pick_or``: ``alternative`` is called only on selection."""
    if not conditions_hold(conditions, strict=strict):
        return original
    return alternative()


__all__ = ["Deferred", "conditions_hold", "deferred", "pick_or", "pick_when"]
