"""Shared types and errors for tick-anim."""
from __future__ import annotations

from dataclasses import dataclass

Vec2 = tuple[float, float]


@dataclass(slots=True)
class Entity:
    """Mutable attribute bag read by the renderer and written by tasks."""

    position: Vec2 = (0.0, 0.0)
    rotation: float = 0.0
    scale: float = 1.0
    color: str = "red"

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]


class ConfigError(ValueError):
    """Raised when a stage configuration file cannot be used."""
