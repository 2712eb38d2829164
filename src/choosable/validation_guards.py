"""
Validation guard helpers used by strict condition checking.

Each helper focuses on a single check so callers can compose them without
introducing additional branching.
"""

from __future__ import annotations

from typing import Any

from .exceptions import ConditionTypeError


def require(condition: bool, error: Exception) -> None:
    """Raise the provided exception when the condition fails."""
    if not condition:
        raise error


def require_bool_condition(value: Any, index: int) -> None:
    """Ensure a single condition is an actual ``bool`` instance."""
    require(isinstance(value, bool), ConditionTypeError.for_condition(index, value))


__all__ = ["require", "require_bool_condition"]
