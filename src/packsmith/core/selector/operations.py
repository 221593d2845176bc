"""Selector encoding and construction.

Encoding runs in two phases. Special-cased keys (score, advancements, tag,
predicate, team) are matched first, in that fixed order; every other key falls
through to generic formatting in argument order. The output order is stable so
generated files diff cleanly, even though the host does not care about it.

Usage:
    encode(selector("@e", tag=["a", "b"], distance=(2, None)))
    # "@e[tag=a, tag=b, distance=2..]"

    single_selector("@e", type="minecraft:cow", limit=1)
    player_selector("@a", type="minecraft:cow")  # InvalidTypeForPlayerSelectorError
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from packsmith.core.selector.models import (
    Condition,
    LimitRequiredError,
    SelectorSpec,
    Target,
    as_many,
    is_single_limit,
)

Pair = tuple[str, str]


def format_number(value: Any) -> str:
    """Render a number the way the host reads it (integral floats lose the `.0`)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_range(value: Any) -> str:
    """Render a scalar or (min, max) range. A None bound is left open: `2..`, `..5`."""
    if isinstance(value, (list, tuple)):
        if len(value) != 2:
            raise TypeError(f"Range must be a number or a (min, max) pair, got {value!r}")
        low, high = value
        low_repr = "" if low is None else format_number(low)
        high_repr = "" if high is None else format_number(high)
        return f"{low_repr}..{high_repr}"
    return format_number(value)


def _format_score(scores: Mapping[str, Any]) -> list[Pair]:
    inner = ", ".join(
        f"{objective}={format_range(value)}"
        for objective, value in scores.items()
        if value is not None
    )
    return [("score", f"{{{inner}}}")] if inner else []


def _format_advancement_group(advancements: Mapping[str, Any]) -> str:
    parts = []
    for name, value in advancements.items():
        if value is None:
            continue
        if isinstance(value, Mapping):
            criteria = _format_advancement_group(value)
            if criteria != "{}":
                parts.append(f"{name}={criteria}")
        else:
            parts.append(f"{name}={format_number(bool(value))}")
    return "{" + ", ".join(parts) + "}"


def _format_advancements(advancements: Mapping[str, Any]) -> list[Pair]:
    group = _format_advancement_group(advancements)
    return [("advancements", group)] if group != "{}" else []


def _repeated(key: str) -> Callable[[Any], list[Pair]]:
    def expand(value: Any) -> list[Pair]:
        return [(key, str(item)) for item in as_many(value)]

    return expand


def _format_team(team: str | bool) -> list[Pair]:
    if team is True:
        return [("team", "!")]
    if team is False:
        return [("team", "")]
    return [("team", str(team))]


SPECIAL_KEYS: tuple[tuple[str, Callable[[Any], list[Pair]]], ...] = (
    ("score", _format_score),
    ("advancements", _format_advancements),
    ("tag", _repeated("tag")),
    ("predicate", _repeated("predicate")),
    ("team", _format_team),
)
"""Matchers tried first, in this order. Unmatched keys use `format_generic`."""

_SPECIAL_KEY_NAMES = frozenset(key for key, _ in SPECIAL_KEYS)


def format_generic(key: str, value: Any) -> list[Pair]:
    """Format a key with no special handling.

    Strings and numbers render as-is, a (min, max) pair renders as a range, and
    a sequence of strings expands into one pair per element (as for `type`).
    """
    if isinstance(value, str):
        return [(key, value)]
    if isinstance(value, (list, tuple)):
        if all(isinstance(item, str) for item in value):
            return [(key, item) for item in value]
        return [(key, format_range(value))]
    return [(key, format_number(value))]


def encode(spec: SelectorSpec) -> str:
    """Serialize a selector to its textual form.

    Pure: builds a fresh list of pairs, never touches the spec's arguments.

    Returns:
        `target` alone when there are no arguments, otherwise
        `target[key=value, key=value, ...]`. Arguments that emit no pairs,
        such as an empty tag list, count as absent.
    """
    pairs: list[Pair] = []
    for key, matcher in SPECIAL_KEYS:
        value = spec.arguments.get(key)
        if value is not None:
            pairs.extend(matcher(value))

    for key, value in spec.arguments.items():
        if key not in _SPECIAL_KEY_NAMES:
            pairs.extend(format_generic(key, value))

    if not pairs:
        return spec.target

    return f"{spec.target}[{', '.join(f'{key}={value}' for key, value in pairs)}]"


def exists_condition(spec: SelectorSpec) -> Condition:
    """Condition the host evaluates to true when the selector finds at least one entity."""
    return Condition(kind="entity", value=spec)


def selector(target: Target | str, **arguments: Any) -> SelectorSpec:
    """General selector, capability tags inferred from glyph and arguments.

    `@p` and `@r` only match players. `@a` only matches players and becomes
    single-result when given limit 0 or 1; so does `@e`. Any other literal
    carries no tags.
    """
    target = str(target)
    players_only = target in (Target.NEAREST_PLAYER, Target.RANDOM_PLAYER, Target.ALL_PLAYERS)
    single = target in (Target.ALL_PLAYERS, Target.ALL_ENTITIES) and is_single_limit(
        arguments.get("limit")
    )
    return SelectorSpec(
        target,
        arguments,
        single_result_only=single,
        players_only=players_only,
    )


def single_selector(target: Target | str, **arguments: Any) -> SelectorSpec:
    """Selector that must match at most one entity (limit 0 or 1 unless `@s`/`@p`/`@r`)."""
    return SelectorSpec(target, arguments, single_result_only=True)


def player_selector(target: Target | str, **arguments: Any) -> SelectorSpec:
    """Selector that must only match players."""
    return SelectorSpec(target, arguments, players_only=True)


def single_player_selector(target: Target | str, **arguments: Any) -> SelectorSpec:
    """Selector that must match at most one player."""
    return SelectorSpec(target, arguments, single_result_only=True, players_only=True)


def selector_argument(value: SelectorSpec | str, single: bool = False) -> str:
    """Serialize a command argument that takes a selector, player name or UUID.

    Args:
        value: Selector spec, or a literal name/UUID passed through verbatim.
        single: The argument position accepts only one entity.

    Raises:
        LimitRequiredError: `single` is set and the selector may match several entities.
        TypeError: `value` is neither a selector nor a string.
    """
    if isinstance(value, SelectorSpec):
        if single and not value.is_single:
            raise LimitRequiredError(
                f"Argument expects a single entity, but {value} can match several: "
                "use @s, @p, @r or limit=0/1"
            )
        return encode(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"Expected a selector or a string, got {type(value).__name__}")
