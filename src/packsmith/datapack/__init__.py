"""Datapack authoring surface: base paths, resources and their registry."""

from packsmith.datapack.base_path import BasePath
from packsmith.datapack.datapack import Datapack
from packsmith.datapack.models import (
    DuplicateResourceError,
    Resource,
    ResourceKind,
    TagType,
    TagValue,
)
from packsmith.datapack.registry import ResourceRegistry

__all__ = [
    "Datapack",
    "BasePath",
    "Resource",
    "ResourceKind",
    "TagType",
    "TagValue",
    "ResourceRegistry",
    "DuplicateResourceError",
]
