"""packsmith: validated identifiers and target selectors for Minecraft datapacks.

Usage:
    from packsmith import Datapack, selector

    pack = Datapack()
    mypack = pack.base_path(namespace="mypack")

    winners = selector("@a", tag=["alive", "winner"], limit=1)
    mypack.function("announce", [f"say {winners} won", "scoreboard players reset @a"])

    str(winners)  # "@a[tag=alive, tag=winner, limit=1]"
"""

import logging

__version__ = "0.1.0"

# Core primitives
from packsmith.core import (
    Condition,
    DoubleDotError,
    EmptyNameError,
    InvalidNamespaceError,
    InvalidPathError,
    InvalidTypeForPlayerSelectorError,
    LimitRequiredError,
    NamespaceUnderBasePathError,
    NamingError,
    Range,
    ResourceIdentifier,
    ResourceNamingContext,
    SelectorError,
    SelectorSpec,
    Target,
    derive_child,
    encode,
    exists_condition,
    parse_identifier,
    player_selector,
    resolve,
    selector,
    selector_argument,
    single_player_selector,
    single_selector,
)

# Authoring surface
from packsmith.datapack import (
    BasePath,
    Datapack,
    DuplicateResourceError,
    Resource,
    ResourceKind,
    ResourceRegistry,
    TagType,
    TagValue,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Naming
    "ResourceNamingContext",
    "ResourceIdentifier",
    "resolve",
    "derive_child",
    "parse_identifier",
    "NamingError",
    "NamespaceUnderBasePathError",
    "InvalidNamespaceError",
    "EmptyNameError",
    "InvalidPathError",
    "DoubleDotError",
    # Selector
    "Target",
    "Range",
    "SelectorSpec",
    "Condition",
    "selector",
    "single_selector",
    "player_selector",
    "single_player_selector",
    "selector_argument",
    "encode",
    "exists_condition",
    "SelectorError",
    "LimitRequiredError",
    "InvalidTypeForPlayerSelectorError",
    # Datapack
    "Datapack",
    "BasePath",
    "Resource",
    "ResourceKind",
    "TagType",
    "TagValue",
    "ResourceRegistry",
    "DuplicateResourceError",
]
