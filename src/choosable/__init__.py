"""Conditional replacement of a value by an alternative."""

from .core import Deferred, conditions_hold, deferred, pick_or, pick_when
from .exceptions import ConditionTypeError
from .marker import Choosable
from .tagged import Branch, Choice, pick_tagged

__all__ = [
    "Branch",
    "Choice",
    "Choosable",
    "ConditionTypeError",
    "Deferred",
    "conditions_hold",
    "deferred",
    "pick_or",
    "pick_tagged",
    "pick_when",
]
