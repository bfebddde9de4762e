"""Interpolation helpers and easing curves."""
from __future__ import annotations

from typing import Callable

from tick_anim.types import Vec2


def lerp(start: float, end: float, t: float) -> float:
    return start * (1 - t) + end * t


def lerp_vec(start: Vec2, end: Vec2, t: float) -> Vec2:
    return (lerp(start[0], end[0], t), lerp(start[1], end[1], t))


def clamp(value: float, low: float, high: float) -> float:
    return min(high, max(value, low))


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def ease_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
}


def get_easing(name: str) -> Callable[[float], float]:
    """Look up an easing curve by name, raising ValueError if unknown."""
    try:
        return EASINGS[name]
    except KeyError:
        raise ValueError(
            f"Unknown easing {name!r}, expected one of {sorted(EASINGS)}"
        ) from None
