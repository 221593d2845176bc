"""Core functionalities: stateless naming and selector transforms.

Architecture Note:
    core/ contains pure, stateless functionalities. Every operation is a
    function of immutable inputs and may be called concurrently.
    For the stateful authoring surface, see datapack/.
"""

from packsmith.core.naming import (
    DoubleDotError,
    EmptyNameError,
    InvalidNamespaceError,
    InvalidPathError,
    NamespaceUnderBasePathError,
    NamingError,
    ResourceIdentifier,
    ResourceNamingContext,
    derive_child,
    parse_identifier,
    resolve,
)
from packsmith.core.selector import (
    Condition,
    InvalidTypeForPlayerSelectorError,
    LimitRequiredError,
    Range,
    SelectorError,
    SelectorSpec,
    Target,
    encode,
    exists_condition,
    format_range,
    player_selector,
    selector,
    selector_argument,
    single_player_selector,
    single_selector,
)

__all__ = [
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
    "format_range",
    "SelectorError",
    "LimitRequiredError",
    "InvalidTypeForPlayerSelectorError",
]
