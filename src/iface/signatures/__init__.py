from __future__ import annotations

__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from collections.abc import Callable
from functools import partial
from types import GenericAlias
from typing import Any, ClassVar, Optional

from multimethod import subtype

from iface.internal.models import Model


def _is_instance(value: Any, *, hint: Any) -> bool:
    return isinstance(value, hint)


def _label(hint: Any) -> str:
    # Generic aliases proxy `__name__` to their origin, so use their full repr.
    if isinstance(hint, type) and not isinstance(hint, GenericAlias):
        return hint.__name__
    return str(hint)


class Param(Model):
    """Param describes one positional parameter of a Signature.

    `type` is only a label used in diagnostics. Calls are matched exclusively with the `support`
    predicate, which receives the actual argument and returns whether this Param accepts it.
    """

    # `type` labels and `support` predicates are arbitrary user values, which need not be hashable.
    _hashable_: ClassVar[bool] = False

    name: str
    type: Any = None
    support: Optional[Callable[[Any], bool]] = None

    @classmethod
    def of(cls, name: str, hint: Any) -> Param:
        """Create a Param supporting instances of `hint`.

        Generic hints (eg: `list[int]`) are checked against their parameters too.
        """
        return cls(name=name, type=hint, support=partial(_is_instance, hint=subtype(hint)))

    def describe(self) -> str:
        if self.type is None:
            return self.name
        return f"{self.name}: {_label(self.type)}"


class Signature(Model):
    """Signature is one declared overload of an Interface method.

    `args=None` marks a catch-all Signature, accepting any number and type of arguments. It is
    only selected when no other Signature matches.
    """

    _hashable_: ClassVar[bool] = False

    name: str
    owner: str
    args: Optional[tuple[Param, ...]] = ()
    implement: Optional[Callable[..., Any]] = None
    # NOTE: 0 is a valid id, always compare against None.
    id: Optional[int | str] = None

    @property
    def arity(self) -> Optional[int]:
        return None if self.args is None else len(self.args)

    @property
    def is_catch_all(self) -> bool:
        return self.args is None

    def describe(self) -> str:
        params = "any" if self.args is None else ", ".join(arg.describe() for arg in self.args)
        return f"{self.owner}.{self.name}({params})"

    def with_implement(self, implement: Callable[..., Any]) -> Signature:
        return self.model_copy(update={"implement": implement})
