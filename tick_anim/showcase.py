"""The three-square demo choreography."""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from tick_anim.combinators import parallel, sequence
from tick_anim.tasks import Task, delay, move_to, rotate_to, scale_to
from tick_anim.types import Entity

# Sum of the top-level steps below, in ms.
SHOWCASE_DURATION = 2000 + 1000 + 1000 + 4000 + 1000 + 500 + 1000


@dataclass
class Stage:
    red: Entity = field(default_factory=lambda: Entity(color="red"))
    yellow: Entity = field(
        default_factory=lambda: Entity(position=(50.0, 50.0), color="yellow")
    )
    green: Entity = field(
        default_factory=lambda: Entity(position=(50.0, 50.0), color="green")
    )

    @property
    def entities(self) -> list[Entity]:
        """Entities in draw order."""
        return [self.red, self.yellow, self.green]


def make_stage() -> Stage:
    return Stage()


def build_showcase(stage: Stage) -> Task:
    red, yellow, green = stage.red, stage.yellow, stage.green
    return sequence(
        delay(2000),
        parallel(
            move_to(yellow, (50, 50), 1000),
            move_to(red, (200, 200), 1000),
        ),
        delay(1000),
        parallel(
            sequence(
                move_to(yellow, (50, 550), 1000),
                move_to(yellow, (750, 550), 1000),
                move_to(yellow, (750, 50), 1000),
                move_to(yellow, (50, 50), 1000),
            ),
            sequence(
                move_to(green, (750, 50), 1000),
                move_to(green, (750, 550), 1000),
                move_to(green, (50, 550), 1000),
                move_to(green, (50, 50), 1000),
            ),
            rotate_to(red, math.pi, 1000),
            scale_to(red, 2, 1000),
            sequence(
                delay(500),
                move_to(red, (300, 300), 500),
            ),
        ),
        scale_to(red, 0.1, 1000),
        move_to(red, (200, 100), 500),
        rotate_to(red, 4 * math.pi, 1000),
    )
