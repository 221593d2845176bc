"""Datapack resource models.

A resource pairs a resolved identifier with an opaque payload. Payload
semantics (whether an advancement's criteria make sense) are never checked.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from packsmith.core.naming import ResourceIdentifier


class DuplicateResourceError(ValueError):
    """Raised when a resource is registered twice under the same identifier."""

    pass


class ResourceKind(Enum):
    """Resource families, valued by their datapack directory name."""

    FUNCTION = "functions"
    ADVANCEMENT = "advancements"
    PREDICATE = "predicates"
    TAG = "tags"
    LOOT_TABLE = "loot_tables"
    RECIPE = "recipes"


class TagType(Enum):
    """Registries a tag can group values of."""

    BLOCKS = "blocks"
    ENTITY_TYPES = "entity_types"
    FLUIDS = "fluids"
    FUNCTIONS = "functions"
    ITEMS = "items"
    GAME_EVENTS = "game_events"


@dataclass(frozen=True, slots=True)
class Resource:
    """A named datapack resource.

    Attributes:
        kind: Resource family.
        identifier: Identifier resolved at creation; never re-validated.
        payload: Opaque content handed to the resource writers
            (command lines for functions, JSON-like data otherwise).
        tag_type: Registry of a tag; None for every other kind.
    """

    kind: ResourceKind
    identifier: ResourceIdentifier
    payload: Any = None
    tag_type: TagType | None = None

    @property
    def name(self) -> str:
        """Identifier as written in commands (`namespace:path` or bare path)."""
        return str(self.identifier)

    def __str__(self) -> str:
        return self.name

    def to_json(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class TagValue:
    """Tag entry that may be absent at load time without failing the tag."""

    id: str
    required: bool = True

    def to_json(self) -> dict[str, Any] | str:
        if self.required:
            return self.id
        return {"id": self.id, "required": False}
