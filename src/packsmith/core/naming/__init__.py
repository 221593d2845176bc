"""Resource naming functionality: contexts, identifiers and resolution."""

from packsmith.core.naming.models import (
    DEFAULT_NAMESPACE,
    DoubleDotError,
    EmptyNameError,
    InvalidNamespaceError,
    InvalidPathError,
    NamespaceUnderBasePathError,
    NamingError,
    ResourceIdentifier,
    ResourceNamingContext,
    split_directory,
)
from packsmith.core.naming.operations import (
    NAMESPACE_PATTERN,
    PATH_PATTERN,
    derive_child,
    parse_identifier,
    resolve,
    split_name,
    validate,
)

__all__ = [
    # Models
    "DEFAULT_NAMESPACE",
    "ResourceNamingContext",
    "ResourceIdentifier",
    "split_directory",
    # Errors
    "NamingError",
    "NamespaceUnderBasePathError",
    "InvalidNamespaceError",
    "EmptyNameError",
    "InvalidPathError",
    "DoubleDotError",
    # Operations
    "NAMESPACE_PATTERN",
    "PATH_PATTERN",
    "resolve",
    "derive_child",
    "parse_identifier",
    "split_name",
    "validate",
]
