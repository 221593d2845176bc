"""In-memory resource registry.

Indexes created resources by kind and fully-qualified identifier, so that
`foo` and `minecraft:foo` collide the way they do in the host.

Usage:
    registry = ResourceRegistry()
    registry.register(resource)
    registry.get(ResourceKind.FUNCTION, "mypack:main")
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from packsmith.core.naming import DEFAULT_NAMESPACE, ResourceIdentifier, parse_identifier
from packsmith.datapack.models import DuplicateResourceError, Resource, ResourceKind, TagType

logger = logging.getLogger(__name__)

RegistryKey = tuple[ResourceKind, TagType | None, str]


class ResourceRegistry:
    """Registration-ordered index of datapack resources.

    Not thread-safe: owned by a single authoring session.

    Args:
        default_namespace: Namespace used to qualify bare identifiers on lookup.
    """

    def __init__(self, default_namespace: str = DEFAULT_NAMESPACE):
        self._default_namespace = default_namespace
        self._resources: dict[RegistryKey, Resource] = {}

    def _key(
        self,
        kind: ResourceKind,
        identifier: ResourceIdentifier | str,
        tag_type: TagType | None = None,
    ) -> RegistryKey:
        if isinstance(identifier, str):
            identifier = parse_identifier(identifier, self._default_namespace)
        return (kind, tag_type, identifier.full)

    def register(self, resource: Resource) -> Resource:
        """Add a resource.

        Raises:
            DuplicateResourceError: Same kind (and tag type) already has this identifier.
        """
        key = self._key(resource.kind, resource.identifier, resource.tag_type)
        if key in self._resources:
            raise DuplicateResourceError(
                f"{resource.kind.name.lower()} {resource.identifier.full} is already registered"
            )
        self._resources[key] = resource
        logger.debug("Registered %s %s", resource.kind.name.lower(), resource.identifier.full)
        return resource

    def get(
        self,
        kind: ResourceKind,
        identifier: ResourceIdentifier | str,
        tag_type: TagType | None = None,
    ) -> Resource | None:
        """Look up a resource. Bare identifiers take the default namespace."""
        return self._resources.get(self._key(kind, identifier, tag_type))

    def of_kind(self, kind: ResourceKind) -> list[Resource]:
        """All resources of one kind, in registration order."""
        return [r for r in self._resources.values() if r.kind == kind]

    def __contains__(self, resource: object) -> bool:
        if not isinstance(resource, Resource):
            return False
        key = self._key(resource.kind, resource.identifier, resource.tag_type)
        return key in self._resources

    def __iter__(self) -> Iterator[Resource]:
        return iter(list(self._resources.values()))

    def __len__(self) -> int:
        return len(self._resources)
