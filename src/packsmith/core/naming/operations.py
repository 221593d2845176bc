"""Identifier resolution: validate and assemble namespaced resource names.

The host loader silently ignores (or hard-fails on) malformed identifiers, so
every rule is checked here, once, before a resource exists.
"""

from __future__ import annotations

import re

from packsmith.core.naming.models import (
    DEFAULT_NAMESPACE,
    DoubleDotError,
    EmptyNameError,
    InvalidNamespaceError,
    InvalidPathError,
    NamespaceUnderBasePathError,
    ResourceIdentifier,
    ResourceNamingContext,
    split_directory,
)

NAMESPACE_PATTERN = re.compile(r"^[0-9a-z_-]+$")
PATH_PATTERN = re.compile(r"^[0-9a-z_\-/.]+$")


def split_name(name: str) -> tuple[str | None, str]:
    """Split `namespace:path` on the first colon.

    Returns:
        (namespace, path), namespace None when the name has no colon.
    """
    if ":" not in name:
        return None, name
    namespace, path = name.split(":", 1)
    return namespace, path


def validate(namespace: str, path: str) -> None:
    """Check a namespace/path pair against the host's identifier rules.

    Raises:
        InvalidNamespaceError: Namespace empty or outside [0-9a-z_-].
        EmptyNameError: Path empty.
        InvalidPathError: Path outside [0-9a-z_-/.].
        DoubleDotError: Path contains "..".
    """
    if not NAMESPACE_PATTERN.match(namespace):
        raise InvalidNamespaceError(
            "A namespace should only contain numbers, lowercase letters, underscores "
            f'and hyphen/minus, and be at least 1 character long: got "{namespace}"'
        )

    if not path:
        raise EmptyNameError("Empty name is not allowed.")

    if not PATH_PATTERN.match(path):
        raise InvalidPathError(
            "Resource names can only contain numbers, lowercase letters, underscores, "
            f'forward slash, period, and hyphens: got "{path}"'
        )

    # The loader does not recognize resources whose path contains "..".
    if ".." in path:
        raise DoubleDotError(f'Resource names cannot include two consecutive dots: got "{path}"')


def resolve(context: ResourceNamingContext, name: str) -> ResourceIdentifier:
    """Resolve a user-supplied name under a naming context.

    Args:
        context: Namespace and directory prefix to apply.
        name: Resource name, optionally `namespace:path`.

    Returns:
        Validated identifier. Its textual form omits the namespace when neither
        the context nor the name supplied one.

    Raises:
        NamespaceUnderBasePathError: Name spells a namespace in a fixed-namespace context.
        NamingError: Any other validation failure (see `validate`).
    """
    if not isinstance(name, str):
        raise TypeError(f"Resource name must be a string, got {type(name).__name__}")

    if context.namespace is not None and ":" in name:
        raise NamespaceUnderBasePathError(
            f'Cannot define namespace under a base path: got "{name}" '
            f'in namespace "{context.namespace}"'
        )

    explicit_namespace, bare_path = split_name(name)

    path = "/".join([*context.directory, *split_directory(bare_path)])

    if context.namespace is not None:
        namespace = context.namespace
    elif explicit_namespace is not None:
        namespace = explicit_namespace
    else:
        namespace = context.default_namespace

    validate(namespace, path)

    explicit = context.namespace is not None or explicit_namespace is not None
    return ResourceIdentifier(namespace=namespace, path=path, explicit=explicit)


def derive_child(context: ResourceNamingContext, directory: str | None) -> ResourceNamingContext:
    """Child context inheriting the namespace, with `directory` appended to the prefix."""
    return context.child(directory)


def parse_identifier(text: str, default_namespace: str = DEFAULT_NAMESPACE) -> ResourceIdentifier:
    """Parse a textual identifier back into its parts.

    A bare path takes `default_namespace` and is marked implicit.

    Raises:
        NamingError: If the identifier is not valid.
    """
    namespace, path = split_name(text)
    explicit = namespace is not None
    resolved_namespace = namespace if namespace is not None else default_namespace
    validate(resolved_namespace, path)
    return ResourceIdentifier(namespace=resolved_namespace, path=path, explicit=explicit)
