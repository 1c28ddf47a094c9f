from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, Self, TypeVar, cast

K = TypeVar("K")
V = TypeVar("V")


class ClassName:
    def __get__(self, obj: Any, type_: type[Any]) -> str:
        return type_.__name__


class_name = cast(Callable[[], str], ClassName)


def ordinal(n: int) -> str:
    """Convert an integer into its ordinal representation."""
    n = int(n)
    suffix = ["th", "st", "nd", "rd", "th"][min(n % 10, 4)]
    if 11 <= (n % 100) <= 13:
        suffix = "th"
    return str(n) + suffix


class NoCopyMixin:
    """Mixin to bypass (deep)copying.

    This is useful for objects that are *intended* to be stateful and preserved, despite usually
    preferring immutable data structures and Pydantic models, which (deep)copy often.
    """

    def __copy__(self) -> Self:
        return self  # pragma: no cover

    def __deepcopy__(self, memo: Any) -> Self:
        return self  # pragma: no cover


class NoCopyDict(dict[K, V], NoCopyMixin, Generic[K, V]):
    pass
