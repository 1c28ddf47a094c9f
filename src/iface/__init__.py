from __future__ import annotations

import importlib.metadata

__path__ = __import__("pkgutil").extend_path(__path__, __name__)
__version__ = importlib.metadata.version("iface")

from iface.errors import (
    ComplianceError,
    ConfigurationError,
    DeclarationError,
    ImplementationError,
    InterfaceError,
    MethodNotFoundError,
    ResolutionError,
)
from iface.interfaces import DispatchProxy, Interface, create
from iface.signatures import Param, Signature

# Export all interfaces.
__all__ = [
    "ComplianceError",
    "ConfigurationError",
    "DeclarationError",
    "DispatchProxy",
    "ImplementationError",
    "Interface",
    "InterfaceError",
    "MethodNotFoundError",
    "Param",
    "ResolutionError",
    "Signature",
    "create",
]
