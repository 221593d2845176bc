"""Datapack root: configuration, registry and the root base path.

Usage:
    pack = Datapack()
    pack.function("tick", ["say hello"])  # registered as "tick" (host default namespace)

    mypack = pack.base_path(namespace="mypack")
    mypack.function("main", [])  # "mypack:main"
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from packsmith.config import PacksmithSettings
from packsmith.datapack.base_path import BasePath
from packsmith.datapack.models import Resource, TagType
from packsmith.datapack.registry import ResourceRegistry

logger = logging.getLogger(__name__)


class Datapack:
    """Authoring session owning every created resource.

    Args:
        settings: Naming defaults. Read once here; loaded from the environment if omitted.
    """

    def __init__(self, settings: PacksmithSettings | None = None):
        self.settings = settings or PacksmithSettings()
        self.registry = ResourceRegistry(default_namespace=self.settings.default_namespace)
        self.root = BasePath(self, directory=self.settings.default_directory)
        logger.debug(
            "Datapack created (default namespace %r, default directory %r)",
            self.settings.default_namespace,
            self.settings.default_directory,
        )

    def base_path(self, namespace: str | None = None, directory: str | None = None) -> BasePath:
        """New naming scope. The root's default directory does not apply to it."""
        return BasePath(self, namespace=namespace, directory=directory)

    def function(self, name: str, commands: Iterable[Any] = ()) -> Resource:
        return self.root.function(name, commands)

    def advancement(self, name: str, advancement: dict[str, Any]) -> Resource:
        return self.root.advancement(name, advancement)

    def predicate(self, name: str, predicate: dict[str, Any]) -> Resource:
        return self.root.predicate(name, predicate)

    def tag(
        self,
        tag_type: TagType | str,
        name: str,
        values: Iterable[Any],
        replace: bool = False,
    ) -> Resource:
        return self.root.tag(tag_type, name, values, replace)

    def loot_table(self, name: str, loot_table: dict[str, Any]) -> Resource:
        return self.root.loot_table(name, loot_table)

    def recipe(self, name: str, recipe: dict[str, Any]) -> Resource:
        return self.root.recipe(name, recipe)
