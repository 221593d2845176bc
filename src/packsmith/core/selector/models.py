"""Selector models: target glyphs, selector specs, and conditions.

Usage:
    spec = SelectorSpec(Target.ALL_ENTITIES, {"tag": ["alive", "winner"]})
    str(spec)  # "@e[tag=alive, tag=winner]"

    # Capability tags are checked at construction, never at serialization
    SelectorSpec("@e", {"type": "minecraft:cow"}, single_result_only=True)  # LimitRequiredError
"""

from __future__ import annotations

import os
import sys
import warnings
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any, TypeAlias

Range: TypeAlias = int | float | tuple[int | float | None, int | float | None]
"""Scalar, or (min, max) bounds where either side may be None (open)."""


class SelectorError(ValueError):
    """Raised when a selector violates one of its capability tags."""

    pass


class LimitRequiredError(SelectorError):
    """Raised when a single-result selector does not carry limit=0 or limit=1."""

    pass


class InvalidTypeForPlayerSelectorError(SelectorError):
    """Raised when a player-only selector filters on a non-player entity type."""

    pass


class Target(StrEnum):
    """Target selector shorthand glyphs understood by the host."""

    SELF = "@s"
    NEAREST_PLAYER = "@p"
    RANDOM_PLAYER = "@r"
    ALL_PLAYERS = "@a"
    ALL_ENTITIES = "@e"


SINGLE_TARGETS = frozenset({Target.SELF, Target.NEAREST_PLAYER, Target.RANDOM_PLAYER})
"""Glyphs that can never match more than one entity."""

PLAYER_TARGETS = frozenset({Target.NEAREST_PLAYER, Target.RANDOM_PLAYER, Target.ALL_PLAYERS})
"""Glyphs that only ever match players."""

PLAYER_TYPES = frozenset({"minecraft:player", "player"})

SORT_ORDERS = frozenset({"nearest", "furthest", "random", "arbitrary"})

GAME_MODES = frozenset({"adventure", "creative", "spectator", "survival"})


def as_many(value: Any) -> tuple[Any, ...]:
    """Normalize a one-or-many argument to a tuple, dropping absent elements."""
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(v for v in value if v is not None)
    return (value,)


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def freeze_arguments(arguments: Mapping[str, Any] | None) -> Mapping[str, Any]:
    """Read-only copy of selector arguments. None-valued keys are dropped."""
    if arguments is None:
        return MappingProxyType({})
    if not isinstance(arguments, Mapping):
        raise TypeError(f"Selector arguments must be a mapping, got {type(arguments).__name__}")
    return MappingProxyType({k: _freeze(v) for k, v in arguments.items() if v is not None})


def is_single_limit(limit: Any) -> bool:
    return not isinstance(limit, bool) and isinstance(limit, (int, float)) and limit in (0, 1)


def limits_to_single(target: str, limit: Any) -> bool:
    """Whether `target` with this `limit` argument can match at most one entity.

    `@s`, `@p` and `@r` are single without a limit, but an explicit limit
    still has to be 0 or 1.
    """
    if target in SINGLE_TARGETS and limit is None:
        return True
    return is_single_limit(limit)


_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))) + os.sep


def _warn_caller(message: str) -> None:
    """Warn, attributing the warning to the first frame outside packsmith.

    Frames of dataclass-generated `__init__` methods are skipped as well.
    """
    stacklevel = 2
    frame = sys._getframe(1)
    while frame is not None:
        code = frame.f_code
        internal = code.co_filename.startswith(_PACKAGE_DIR) or (
            code.co_name == "__init__" and code.co_filename.startswith("<")
        )
        if not internal:
            break
        frame = frame.f_back
        stacklevel += 1
    warnings.warn(message, stacklevel=stacklevel)


@dataclass(frozen=True, slots=True)
class SelectorSpec:
    """Immutable target selector: a glyph plus filter arguments.

    `single_result_only` and `players_only` are capability tags. They narrow
    which arguments the selector may carry and are not part of its textual
    form. Violations raise at construction.

    Args:
        target: A `Target` glyph or any literal string understood by the host.
        arguments: Filter key -> value. None values are treated as absent.
        single_result_only: Selector must match at most one entity.
        players_only: Selector must only match players.
    """

    target: str
    arguments: Mapping[str, Any] = field(default_factory=dict)
    single_result_only: bool = False
    players_only: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "target", str(self.target))
        object.__setattr__(self, "arguments", freeze_arguments(self.arguments))
        self._check_capabilities()
        self._check_tokens()

    def _check_capabilities(self) -> None:
        if (
            self.single_result_only
            and not limits_to_single(self.target, self.arguments.get("limit"))
        ):
            raise LimitRequiredError(
                f"Selector {self.target} must match a single entity: "
                f"limit must be 0 or 1, got {self.arguments.get('limit')!r}"
            )

        if self.players_only:
            invalid = [t for t in as_many(self.arguments.get("type")) if t not in PLAYER_TYPES]
            if invalid:
                raise InvalidTypeForPlayerSelectorError(
                    f"Selector {self.target} only matches players: got type {invalid[0]!r}"
                )

    def _check_tokens(self) -> None:
        sort = self.arguments.get("sort")
        if sort is not None and sort not in SORT_ORDERS:
            _warn_caller(
                f"Unknown sort order {sort!r}, expected one of {sorted(SORT_ORDERS)}",
            )
        gamemode = self.arguments.get("gamemode")
        if gamemode is not None and str(gamemode).removeprefix("!") not in GAME_MODES:
            _warn_caller(
                f"Unknown game mode {gamemode!r}, expected one of {sorted(GAME_MODES)}",
            )

    @property
    def is_single(self) -> bool:
        """Whether this selector can match at most one entity."""
        return limits_to_single(self.target, self.arguments.get("limit"))

    @property
    def is_player(self) -> bool:
        """Whether this selector can only match players."""
        if self.target in PLAYER_TARGETS:
            return True
        types = as_many(self.arguments.get("type"))
        return bool(types) and all(t in PLAYER_TYPES for t in types)

    def __str__(self) -> str:
        from packsmith.core.selector.operations import encode

        return encode(self)

    def to_json(self) -> str:
        return str(self)

    def to_text_component(self) -> dict[str, str]:
        """Chat text component displaying the names of the matched entities."""
        return {"selector": str(self)}


@dataclass(frozen=True, slots=True)
class Condition:
    """Host condition value, e.g. `entity @e[tag=boss]` for `execute if`."""

    kind: str
    value: Any

    def __str__(self) -> str:
        return f"{self.kind} {self.value}"

    def to_json(self) -> list[str]:
        return [self.kind, str(self.value)]
