from __future__ import annotations

__path__ = __import__("pkgutil").extend_path(__path__, __name__)

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from inspect import getattr_static
from types import FunctionType
from typing import Any, Optional, Self

from pydantic import ConfigDict, Field, PrivateAttr, field_validator

from iface.errors import (
    ComplianceError,
    ConfigurationError,
    DeclarationError,
    ImplementationError,
    InterfaceError,
    MethodNotFoundError,
    ResolutionError,
)
from iface.internal import wrap_exc
from iface.internal.models import Model
from iface.internal.render import render, render_args
from iface.internal.utils import NoCopyDict, ordinal
from iface.signatures import Param, Signature


def _forward(method: Callable[..., Any]) -> Callable[..., Any]:
    # Adapt an already bound callable to the `implement(target, *args)` calling convention.
    def forward(_target: Any, *args: Any, **kwargs: Any) -> Any:
        return method(*args, **kwargs)

    return forward


def _existing_implementation(target: Any, name: str) -> Optional[Callable[..., Any]]:
    """Return the target's own implementation of `name`, if any."""
    try:
        attr = getattr_static(target, name)
    except AttributeError:
        return None
    # Plain functions defined on the class expect the target as their first argument, just like
    # Interface implementations. Anything else (instance attributes, static/class methods, etc) is
    # already bound.
    if isinstance(attr, FunctionType) and name not in getattr(target, "__dict__", {}):
        return attr
    bound = getattr(target, name)
    if not callable(bound):
        return None
    return _forward(bound)


class DispatchProxy:
    """DispatchProxy forwards calls on a target to an Interface method implementation.

    With a fixed `implement`, every call runs it. Otherwise the implementation is resolved from the
    Interface's Signatures on each call (using the positional arguments), so overloads and
    implementations attached later are picked up. In both cases, the implementation is called with
    the target as the first argument.
    """

    def __init__(
        self,
        interface: Interface,
        name: str,
        target: Any,
        implement: Optional[Callable[..., Any]] = None,
    ) -> None:
        self.interface = interface
        self.name = name
        self.target = target
        self.implement = implement

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        implementation = self.implement
        if implementation is None:
            implementation = self.interface.resolve(self.name, args)
        return implementation(self.target, *args, **kwargs)

    def __repr__(self) -> str:
        mode = "fixed" if self.implement is not None else "resolving"
        return f"<{type(self).__name__} {self.interface.name}.{self.name} ({mode}) of {type(self.target).__name__}>"


class Interface(Model):
    """Interface is a registry of method Signatures that can be implemented by arbitrary objects.

    Each method name maps to an ordered list of Signatures (overloads). Calls through an installed
    DispatchProxy are resolved to the first Signature whose arity matches and whose Params all
    `support` the arguments, falling back to a catch-all (`args=None`) implementation.

    When `debug` is set, declarations are type checked and diagnostics are emitted to `logger`.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    debug: bool = False
    logger: logging.Logger = Field(default_factory=lambda: logging.getLogger("iface"))

    # NOTE: Use a NoCopyDict to avoid copies of the registry. The Signature lists are mutated in
    # place as methods are declared and implemented.
    _methods: NoCopyDict[str, list[Signature]] = PrivateAttr(default_factory=NoCopyDict)

    @field_validator("name")
    @classmethod
    def _validate_name(cls, name: str) -> str:
        if not name:
            raise ValueError("an Interface must have a non-empty name")
        return name

    def _get_signatures(self, name: str) -> list[Signature]:
        signatures = self._methods.get(name)
        if not signatures:
            raise MethodNotFoundError(f"{self.name}.{name} - no method is declared with this name.")
        return signatures

    def __contains__(self, name: object) -> bool:
        return bool(self._methods.get(name))  # type: ignore[call-overload]

    @property
    def method_names(self) -> tuple[str, ...]:
        return tuple(self._methods)

    def signatures(self, name: str) -> tuple[Signature, ...]:
        return tuple(self._methods.get(name, ()))

    def declare(
        self,
        name: str,
        args: Optional[Sequence[Param | Mapping[str, Any]]] = (),
        implement: Optional[Callable[..., Any]] = None,
        *,
        owner: Optional[str] = None,
        id: Optional[int | str] = None,
    ) -> Self:
        """Declare a method Signature, optionally with a default implementation.

        `args=None` declares a catch-all Signature accepting any arguments. `owner` is set when the
        Signature is copied from another Interface (see `extend`).
        """
        if self.debug:
            if not isinstance(name, str):
                raise DeclarationError(
                    f"{self.name} - the method `name` must be a str, got: {render(name)}"
                )
            if args is not None and (isinstance(args, str) or not isinstance(args, Sequence)):
                raise DeclarationError(
                    f"{self.name}.{name} - `args` must be None or a sequence of Params, got: {render(args)}"
                )
            for i, arg in enumerate(args or (), 1):
                if not isinstance(arg, (Param, Mapping)):
                    raise DeclarationError(
                        f"{self.name}.{name} - `args` must only contain Params or mappings, got: {render(arg)} (the {ordinal(i)} element)"
                    )
            if implement is not None and not callable(implement):
                raise DeclarationError(
                    f"{self.name}.{name} - `implement` must be callable, got: {render(implement)}"
                )
        signature = Signature(
            name=name,
            owner=self.name if owner is None else f"{owner} extends {self.name}",
            args=(
                None
                if args is None
                else tuple(arg if isinstance(arg, Param) else Param(**arg) for arg in args)
            ),
            implement=implement,
            id=id,
        )
        if self.debug:
            self.logger.info(
                f"{self.name} - registered method: {'' if id is None else f'[{id}]'}{signature.describe()}"
            )
        self._methods.setdefault(name, []).append(signature)
        return self

    def bind(
        self, target: Any, name: str, implement: Optional[Callable[..., Any]] = None
    ) -> DispatchProxy:
        """Bind the `name` method to `target`, without installing it."""
        return DispatchProxy(self, name, target, implement)

    def _install(
        self, target: Any, name: str, implement: Optional[Callable[..., Any]] = None
    ) -> None:
        setattr(target, name, self.bind(target, name, implement))
        if self.debug:
            self.logger.info(
                f"{self.name} - installed {self.name}.{name}(...) on {type(target).__name__}:"
            )
            # Dump the implementation itself at a lower level.
            self.logger.debug("resolved on call" if implement is None else render(implement))

    def implement(
        self,
        target: Any,
        name: str,
        implement: Optional[Callable[..., Any]] = None,
        *,
        id: Optional[int | str] = None,
    ) -> Self:
        """Implement the `name` method on `target`.

        An explicit `implement` is saved on the selected Signature and always called directly.
        Otherwise, calls are resolved against all of the method's Signatures.

        `id` is required to select the Signature when the method has multiple declarations.
        """
        if self.debug:
            if not isinstance(name, str):
                raise DeclarationError(
                    f"{self.name} - the method `name` must be a str, got: {render(name)}"
                )
            if implement is not None and not callable(implement):
                raise DeclarationError(
                    f"{self.name}.{name} - `implement` must be callable, got: {render(implement)}"
                )
        signatures = self._get_signatures(name)
        if id is None:
            if len(signatures) > 1:
                raise ImplementationError(
                    f"{self.name}.{name} - multiple declarations found, `id` required: {[s.describe() for s in signatures]}"
                )
            indexes = [0]
        else:
            indexes = [i for i, signature in enumerate(signatures) if signature.id == id]
            if not indexes:
                raise ImplementationError(
                    f"{self.name}.{name} - no declaration found with id {render(id)}."
                )
            if len(indexes) > 1:
                raise ImplementationError(
                    f"{self.name}.{name} - multiple declarations found with id {render(id)}."
                )
        if implement is not None:
            (index,) = indexes
            signatures[index] = signatures[index].with_implement(implement)
        self._install(target, name, implement)
        return self

    def extend(self, others: Interface | Iterable[Interface]) -> Self:
        """Copy the Signatures of other Interfaces into this one.

        Signatures are appended in declaration order, after any existing ones. Existing Signatures
        with the same name and id are kept (and take precedence during resolution).
        """
        if isinstance(others, Interface):
            others = (others,)
        for other in others:
            # Copy the lists to support extending from self.
            for name, signatures in list(other._methods.items()):
                for signature in list(signatures):
                    self.declare(
                        name,
                        signature.args,
                        signature.implement,
                        owner=signature.owner,
                        id=signature.id,
                    )
        return self

    def resolve(self, name: str, args: Sequence[Any]) -> Callable[..., Any]:
        """Return the implementation of the `name` method matching the call `args`.

        The first Signature (in declaration order) whose arity matches and whose Params all
        `support` the respective arguments wins. If none match, the (last) catch-all implementation
        is used.
        """
        signatures = self._get_signatures(name)
        catch_all: Optional[Callable[..., Any]] = None
        for signature in signatures:
            if signature.args is None:
                if signature.implement is not None:
                    catch_all = signature.implement
                continue
            if len(args) != len(signature.args):
                continue
            supported = 0
            for i, (arg, param) in enumerate(zip(args, signature.args, strict=True), 1):
                if param.support is None:
                    raise ConfigurationError(
                        f"{signature.describe()} - the {ordinal(i)} parameter (`{param.name}`) has no `support` predicate to check arguments with."
                    )
                if param.support(arg):
                    supported += 1
                elif self.debug:
                    self.logger.warning(
                        f"{signature.describe()} - the {ordinal(i)} parameter (`{param.name}`) does not support {render(arg)}"
                    )
            if supported == len(args) and signature.implement is not None:
                if self.debug:
                    self.logger.info(
                        f"{self.name}.{name}({render_args(tuple(args))}) - matched {signature.describe()}"
                    )
                return signature.implement
        if catch_all is not None:
            if self.debug:
                self.logger.warning(
                    f"{self.name}.{name}({render_args(tuple(args))}) - no exact match, falling back to the catch-all implementation: {render(catch_all)}"
                )
            return catch_all
        raise ResolutionError(
            f"{self.name}.{name}({render_args(tuple(args))}) - no matching signature and no catch-all implementation."
        )

    def ensure_implements(self, target: Any) -> None:
        """Install every declared method on `target`.

        Methods the target already defines are kept. Otherwise, a method with a single Signature is
        installed with that Signature's implementation and overloaded methods are resolved on each
        call. A method is compliant when the target defines it or when any of its Signatures
        carries an implementation (the first one found is the default).
        """
        prefix = f"{type(target).__name__} does not implement {self.name}"
        for name, signatures in list(self._methods.items()):
            with wrap_exc(InterfaceError, prefix=prefix):
                existing = _existing_implementation(target, name)
                default = next(
                    (s.implement for s in signatures if s.implement is not None), None
                )
                if existing is None and default is None:
                    raise ComplianceError(
                        f"{self.name}.{name} - the target has no implementation and there is no default implementation."
                    )
                if existing is not None:
                    self._install(target, name, existing)
                elif len(signatures) > 1:
                    self._install(target, name)
                else:
                    self._install(target, name, default)


def create(
    name: str, debug: bool = False, *, logger: Optional[logging.Logger] = None
) -> Interface:
    """Create an Interface, logging diagnostics to `logger` (the "iface" logger by default)."""
    if logger is None:
        return Interface(name=name, debug=debug)
    return Interface(name=name, debug=debug, logger=logger)
