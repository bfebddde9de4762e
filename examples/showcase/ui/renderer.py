"""Entity rendering: one filled square per entity."""
from __future__ import annotations

import math

import pygame

from tick_anim import Entity


def clear(surface: pygame.Surface, background: str) -> None:
    surface.fill(pygame.Color(background))


def draw_entities(surface: pygame.Surface, entities: list[Entity], size: int) -> None:
    """Draw each entity centred on its position, rotated then scaled."""
    for entity in entities:
        square = pygame.Surface((size, size), pygame.SRCALPHA)
        square.fill(pygame.Color(entity.color))
        # pygame rotates counter-clockwise; canvas rotation is clockwise with y down.
        image = pygame.transform.rotozoom(
            square, -math.degrees(entity.rotation), entity.scale
        )
        rect = image.get_rect(center=(round(entity.x), round(entity.y)))
        surface.blit(image, rect)
