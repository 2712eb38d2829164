"""Tagged selection results for candidates that do not share a type."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

from .core import conditions_hold

TOriginal = TypeVar("TOriginal")
TAlternative = TypeVar("TAlternative")


class Branch(str, Enum):
    """Which candidate a selection returned."""

    ORIGINAL = "original"
    ALTERNATIVE = "alternative"


@dataclass(frozen=True)
class Choice(Generic[TOriginal, TAlternative]):
    """Boxed result holding either the original or the alternative."""

    value: Union[TOriginal, TAlternative]
    branch: Branch

    @property
    def is_alternative(self) -> bool:
        return self.branch is Branch.ALTERNATIVE


def pick_tagged(
    original: TOriginal,
    *conditions: bool,
    alternative: Callable[[], TAlternative],
    strict: bool = False,
) -> Choice[TOriginal, TAlternative]:
    """
    Select like ``pick_when`` but box the result with the branch taken.

    Args:
        original: Value kept when any condition is false
        conditions: Conditions in evaluation order; none means the alternative wins
        alternative: Producer called only when selected
        strict: Require every inspected condition to be a ``bool``

    Returns:
        Choice recording the selected value and its branch
    """
    if not conditions_hold(conditions, strict=strict):
        return Choice(original, Branch.ORIGINAL)
    return Choice(alternative(), Branch.ALTERNATIVE)


__all__ = ["Branch", "Choice", "pick_tagged"]
