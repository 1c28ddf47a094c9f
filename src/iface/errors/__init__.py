__path__ = __import__("pkgutil").extend_path(__path__, __name__)


# Interface errors also subclass the closest builtin exception, so callers can catch them either
# way (eg: `except LookupError`).


class InterfaceError(Exception):
    """Base class for errors raised while declaring, implementing or resolving Interface methods."""


class DeclarationError(InterfaceError, TypeError):
    """A method declaration or implementation has an invalid type (checked in debug mode only)."""


class MethodNotFoundError(InterfaceError, LookupError):
    """The method name has no declared Signatures."""


class ImplementationError(InterfaceError, LookupError):
    """The Signature to implement could not be unambiguously selected."""


class ConfigurationError(InterfaceError, TypeError):
    """A declared Param cannot be checked, eg: it has no `support` predicate."""


class ResolutionError(InterfaceError, TypeError):
    """No Signature matched the call arguments and there is no catch-all implementation."""


class ComplianceError(InterfaceError, NotImplementedError):
    """A declared method has neither an implementation on the target nor a default."""
