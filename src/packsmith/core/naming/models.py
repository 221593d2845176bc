"""Naming models: contexts, resolved identifiers, and naming errors.

Usage:
    context = ResourceNamingContext(namespace="mypack", directory="utils")
    nested = context.child("math")  # mypack, ("utils", "math")
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_NAMESPACE = "minecraft"
"""Namespace the host assumes when an identifier carries none."""


class NamingError(ValueError):
    """Raised when a resource name cannot be resolved to a valid identifier."""

    pass


class NamespaceUnderBasePathError(NamingError):
    """Raised when a name spells a namespace inside a fixed-namespace context."""

    pass


class InvalidNamespaceError(NamingError):
    """Raised when a namespace is empty or uses characters outside [0-9a-z_-]."""

    pass


class EmptyNameError(NamingError):
    """Raised when the resolved path is empty."""

    pass


class InvalidPathError(NamingError):
    """Raised when a path uses characters outside [0-9a-z_-/.]."""

    pass


class DoubleDotError(NamingError):
    """Raised when a path contains two consecutive dots."""

    pass


def split_directory(directory: str | None) -> tuple[str, ...]:
    """Split a slash-separated directory into its non-empty segments.

    Leading, trailing and repeated slashes never produce empty segments.
    """
    if not directory:
        return ()
    return tuple(segment for segment in directory.split("/") if segment)


@dataclass(frozen=True, slots=True)
class ResourceNamingContext:
    """Namespace and directory prefix applied to every name resolved under it.

    Immutable - `child()` returns a new context. The directory is accepted as a
    slash-separated string or as a sequence of segments and is always stored as
    a tuple without empty segments.
    """

    namespace: str | None = None
    directory: tuple[str, ...] = field(default=())
    default_namespace: str = DEFAULT_NAMESPACE

    def __post_init__(self) -> None:
        raw = self.directory
        if raw is None:
            segments: tuple[str, ...] = ()
        elif isinstance(raw, str):
            segments = split_directory(raw)
        else:
            segments = tuple(s for part in raw for s in split_directory(part))
        object.__setattr__(self, "directory", segments)

    def child(self, directory: str | None) -> ResourceNamingContext:
        """Nested context: same namespace, directory extended by `directory`.

        The namespace cannot be overridden by a child. Nothing is validated
        here; prefixes are checked when a name is resolved under them.
        """
        return ResourceNamingContext(
            namespace=self.namespace,
            directory=self.directory + split_directory(directory),
            default_namespace=self.default_namespace,
        )


@dataclass(frozen=True, slots=True)
class ResourceIdentifier:
    """Validated resource identifier.

    `explicit` records whether the namespace came from the context or the name.
    When it did not, the textual form is the bare path and the host applies its
    own default namespace at load time.
    """

    namespace: str
    path: str
    explicit: bool = True

    def __str__(self) -> str:
        if not self.explicit:
            return self.path
        return f"{self.namespace}:{self.path}"

    @property
    def full(self) -> str:
        """Always-namespaced form, `namespace:path`."""
        return f"{self.namespace}:{self.path}"

    def to_json(self) -> str:
        return str(self)
