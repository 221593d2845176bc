"""Target selector functionality: selector specs and their serialization."""

from packsmith.core.selector.models import (
    GAME_MODES,
    PLAYER_TARGETS,
    PLAYER_TYPES,
    SINGLE_TARGETS,
    SORT_ORDERS,
    Condition,
    InvalidTypeForPlayerSelectorError,
    LimitRequiredError,
    Range,
    SelectorError,
    SelectorSpec,
    Target,
)
from packsmith.core.selector.operations import (
    SPECIAL_KEYS,
    encode,
    exists_condition,
    format_generic,
    format_number,
    format_range,
    player_selector,
    selector,
    selector_argument,
    single_player_selector,
    single_selector,
)

__all__ = [
    # Models
    "Target",
    "Range",
    "SelectorSpec",
    "Condition",
    "SINGLE_TARGETS",
    "PLAYER_TARGETS",
    "PLAYER_TYPES",
    "SORT_ORDERS",
    "GAME_MODES",
    # Errors
    "SelectorError",
    "LimitRequiredError",
    "InvalidTypeForPlayerSelectorError",
    # Constructors
    "selector",
    "single_selector",
    "player_selector",
    "single_player_selector",
    # Operations
    "SPECIAL_KEYS",
    "encode",
    "exists_condition",
    "format_generic",
    "format_number",
    "format_range",
    "selector_argument",
]
