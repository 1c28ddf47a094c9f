import reprlib
from functools import partial
from types import BuiltinFunctionType, FunctionType, MethodType
from typing import Any

from multimethod import multidispatch

# Arguments in diagnostics may be arbitrarily large (eg: dataframes), so bound their size.
_repr = reprlib.Repr()
_repr.maxstring = 80
_repr.maxother = 80


@multidispatch
def render(value: Any) -> str:
    """Render a value for diagnostics and error messages."""
    return _repr.repr(value)


@render.register
def _render_function(value: FunctionType | MethodType | BuiltinFunctionType) -> str:
    return f"{value.__module__}.{value.__qualname__}"


@render.register
def _render_partial(value: partial) -> str:  # type: ignore[type-arg]
    return f"partial({render(value.func)})"


def render_args(args: tuple[object, ...]) -> str:
    return ", ".join(render(arg) for arg in args)
