"""
Capability mixin giving any user-defined type ``or_`` and ``when`` methods.

Built-in types cannot take new methods, so they use ``pick_or`` and
``pick_when`` from ``choosable.core`` directly. The mixin adds no state.

Usage:
    @dataclass(frozen=True)
    class FeatureFlag(Choosable):
        is_enabled: bool

    active = feature_a.or_(feature_b, not feature_a.is_enabled)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar, Union

from .core import Deferred, pick_or, pick_when

TChoosable = TypeVar("TChoosable", bound="Choosable")


class Choosable:
    """Marker base class for types that can be swapped for an alternative."""

    __slots__ = ()

    def or_(
        self: TChoosable,
        alternative: Union[TChoosable, Deferred[TChoosable]],
        *conditions: bool,
        strict: bool = False,
    ) -> TChoosable:
        """Return ``alternative`` if all conditions hold, else ``self``."""
        return pick_or(self, alternative, *conditions, strict=strict)

    def when(
        self: TChoosable,
        *conditions: bool,
        alternative: Callable[[], TChoosable],
        strict: bool = False,
    ) -> TChoosable:
        """Return ``alternative()`` if all conditions hold, else ``self``."""
        return pick_when(self, *conditions, alternative=alternative, strict=strict)


__all__ = ["Choosable"]
