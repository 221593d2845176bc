"""Base paths: naming scopes that create and register resources.

Usage:
    pack = Datapack()
    utils = pack.base_path(namespace="mypack", directory="utils")
    utils.function("reset", ["scoreboard players reset @a"])  # mypack:utils/reset

    # Children keep the namespace and extend the directory
    math = utils.child("math")
    math.predicate("is_day", {"condition": "minecraft:time_check", "value": {"max": 12000}})
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from packsmith.core.naming import ResourceIdentifier, ResourceNamingContext, resolve
from packsmith.datapack.models import Resource, ResourceKind, TagType, TagValue

if TYPE_CHECKING:
    from packsmith.datapack.datapack import Datapack


def _tag_entry(value: Any) -> Any:
    if isinstance(value, TagValue):
        return value.to_json()
    return str(value)


class BasePath:
    """Changes the base namespace and directory of the resources it creates.

    Every creator resolves the name once, then registers the resource in the
    owning datapack. A name that fails to resolve registers nothing.

    Args:
        datapack: Datapack whose registry receives the resources.
        namespace: Namespace forced onto every resource (None: taken from the name).
        directory: Slash-separated directory prepended to every resource name.
    """

    def __init__(
        self,
        datapack: Datapack,
        namespace: str | None = None,
        directory: str | None = None,
        *,
        context: ResourceNamingContext | None = None,
    ):
        self.datapack = datapack
        if context is None:
            context = ResourceNamingContext(
                namespace=namespace,
                directory=directory or (),
                default_namespace=datapack.settings.default_namespace,
            )
        self.context = context

    @property
    def namespace(self) -> str | None:
        return self.context.namespace

    @property
    def directory(self) -> str:
        return "/".join(self.context.directory)

    def get_name(self, name: str) -> ResourceIdentifier:
        """Validate and build the identifier of a resource named `name` here."""
        return resolve(self.context, name)

    def child(self, directory: str) -> BasePath:
        """Base path nested under this one. The namespace cannot be changed."""
        return BasePath(self.datapack, context=self.context.child(directory))

    def _create(
        self,
        kind: ResourceKind,
        name: str,
        payload: Any,
        tag_type: TagType | None = None,
    ) -> Resource:
        resource = Resource(
            kind=kind,
            identifier=self.get_name(name),
            payload=payload,
            tag_type=tag_type,
        )
        return self.datapack.registry.register(resource)

    def function(self, name: str, commands: Iterable[Any] = ()) -> Resource:
        """Create a function from command lines (selectors and resources are stringified)."""
        return self._create(ResourceKind.FUNCTION, name, tuple(str(c) for c in commands))

    def advancement(self, name: str, advancement: dict[str, Any]) -> Resource:
        """Create an advancement. A `criteria` entry is expected by the host.

        Example:
            advancement("bred_two_cows", {
                "criteria": {
                    "bred_cows": {
                        "trigger": "minecraft:bred_animals",
                        "conditions": {"child": {"type": "minecraft:cow"}},
                    }
                }
            })
        """
        return self._create(ResourceKind.ADVANCEMENT, name, advancement)

    def predicate(self, name: str, predicate: dict[str, Any]) -> Resource:
        """Create a predicate, e.g. `{"condition": "minecraft:weather_check", "raining": True}`."""
        return self._create(ResourceKind.PREDICATE, name, predicate)

    def tag(
        self,
        tag_type: TagType | str,
        name: str,
        values: Iterable[Any],
        replace: bool = False,
    ) -> Resource:
        """Create a tag grouping `values` of one registry.

        Values may be identifiers, resources created by this library, or
        `TagValue` entries for optional members.

        Raises:
            ValueError: Unknown tag type.
        """
        tag_type = TagType(tag_type)
        payload = {"replace": replace, "values": [_tag_entry(v) for v in values]}
        return self._create(ResourceKind.TAG, name, payload, tag_type=tag_type)

    def loot_table(self, name: str, loot_table: dict[str, Any]) -> Resource:
        """Create a loot table. Each pool needs `rolls` and `entries` to load.

        Example:
            loot_table("give_diamond", {
                "pools": [{"rolls": 1, "entries": [{"type": "item", "name": "minecraft:diamond"}]}]
            })
        """
        return self._create(ResourceKind.LOOT_TABLE, name, loot_table)

    def recipe(self, name: str, recipe: dict[str, Any]) -> Resource:
        return self._create(ResourceKind.RECIPE, name, recipe)

    def __repr__(self) -> str:
        return f"BasePath(namespace={self.namespace!r}, directory={self.directory!r})"
