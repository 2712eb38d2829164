"""Exception classes for the choosable package."""

from typing import Any, Optional


class ConditionTypeError(TypeError):
    """Condition is not a bool."""

    def __init__(self, message: str = "", *, index: Optional[int] = None, value: Any = None) -> None:
        if not message:
            message = "Condition is not a bool"
        super().__init__(message)
        self.index = index
        self.value = value

    @classmethod
    def for_condition(cls, index: int, value: Any) -> "ConditionTypeError":
        """Create error naming the offending position and its type."""
        return cls(
            f"Condition at position {index} must be a bool (got {type(value).__name__}: {value!r})",
            index=index,
            value=value,
        )


__all__ = ["ConditionTypeError"]
