"""tick-anim - Cooperative, externally clocked property animation."""
from __future__ import annotations

from tick_anim.animator import Animator
from tick_anim.clock import FrameClock
from tick_anim.combinators import Parallel, Sequence, parallel, sequence
from tick_anim.config import StageConfig, load_config
from tick_anim.driver import Driver, coroutine
from tick_anim.easing import EASINGS, clamp, lerp
from tick_anim.loop import FrameLoop
from tick_anim.tasks import (
    Delay,
    MoveTo,
    RotateTo,
    ScaleTo,
    Task,
    delay,
    move_to,
    rotate_to,
    scale_to,
)
from tick_anim.types import ConfigError, Entity, Vec2

__all__ = [
    "Animator",
    "FrameClock",
    "FrameLoop",
    "Driver",
    "coroutine",
    "Task",
    "Delay",
    "MoveTo",
    "RotateTo",
    "ScaleTo",
    "Sequence",
    "Parallel",
    "delay",
    "move_to",
    "rotate_to",
    "scale_to",
    "sequence",
    "parallel",
    "Entity",
    "Vec2",
    "EASINGS",
    "lerp",
    "clamp",
    "StageConfig",
    "load_config",
    "ConfigError",
]
