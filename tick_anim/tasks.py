"""Primitive animation tasks: delay, move_to, rotate_to, scale_to."""
from __future__ import annotations

import logging
from typing import Any

from tick_anim.easing import clamp, get_easing, lerp, lerp_vec
from tick_anim.types import Entity, Vec2

log = logging.getLogger(__name__)


class Task:
    """A suspendable unit of time-driven work.

    ``start()`` primes the task to its first suspension point. Each
    ``resume(elapsed)`` then feeds it one time increment and returns True on
    the resumption where it completes. A finished task ignores further
    resumptions and keeps reporting True.
    """

    def __init__(self) -> None:
        self._started = False
        self._done = False

    @property
    def started(self) -> bool:
        return self._started

    @property
    def done(self) -> bool:
        return self._done

    def start(self) -> None:
        if self._started:
            return
        self._started = True
        self._on_start()

    def resume(self, elapsed: float) -> bool:
        if self._done:
            return True
        if not self._started:
            self.start()
        self._done = self._advance(elapsed)
        return self._done

    def _on_start(self) -> None:
        pass

    def _advance(self, elapsed: float) -> bool:
        raise NotImplementedError


class Delay(Task):
    """Timing gate that mutates nothing."""

    def __init__(self, duration: float) -> None:
        super().__init__()
        self.duration = duration
        self._total = 0.0

    def _advance(self, elapsed: float) -> bool:
        self._total += elapsed
        return self.duration <= 0 or self._total >= self.duration

    def __repr__(self) -> str:
        return f"Delay({self.duration!r})"


class _Interpolate(Task):
    """Blends one entity attribute from its start value to a target."""

    name = ""
    field = ""

    def __init__(
        self,
        entity: Entity,
        target: Any,
        duration: float,
        easing: str = "linear",
    ) -> None:
        super().__init__()
        self.entity = entity
        self.target = target
        self.duration = duration
        self.easing = easing
        self._ease = get_easing(easing)
        self._total = 0.0
        self._origin: Any = None

    def _on_start(self) -> None:
        self._origin = getattr(self.entity, self.field)

    def _blend(self, origin: Any, target: Any, t: float) -> Any:
        return lerp(origin, target, t)

    def _advance(self, elapsed: float) -> bool:
        self._total += elapsed
        if self.duration <= 0 or self._total >= self.duration:
            setattr(self.entity, self.field, self.target)
            log.debug("%s complete %r", self.name, self.target)
            return True
        t = clamp(self._total / self.duration, 0, 1)
        setattr(self.entity, self.field, self._blend(self._origin, self.target, self._ease(t)))
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.target!r}, {self.duration!r}, easing={self.easing!r})"


class MoveTo(_Interpolate):
    name = "move_to"
    field = "position"

    def _blend(self, origin: Vec2, target: Vec2, t: float) -> Vec2:
        return lerp_vec(origin, target, t)


class RotateTo(_Interpolate):
    # Raw blend, no wrapping: angles past 2*pi spin through whole turns.
    name = "rotate_to"
    field = "rotation"


class ScaleTo(_Interpolate):
    name = "scale_to"
    field = "scale"


def delay(duration: float) -> Delay:
    return Delay(duration)


def move_to(
    entity: Entity, destination: Vec2, duration: float, easing: str = "linear",
) -> MoveTo:
    return MoveTo(entity, (float(destination[0]), float(destination[1])), duration, easing)


def rotate_to(
    entity: Entity, angle: float, duration: float, easing: str = "linear",
) -> RotateTo:
    return RotateTo(entity, angle, duration, easing)


def scale_to(
    entity: Entity, scale: float, duration: float, easing: str = "linear",
) -> ScaleTo:
    return ScaleTo(entity, scale, duration, easing)
