"""Showcase - three squares driven by a sequence/parallel choreography.

Run from this directory:
  python main.py [--config stage.yaml]

Esc or closing the window quits.
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick_anim import Animator, FrameClock, FrameLoop, StageConfig, load_config
from tick_anim.showcase import build_showcase, make_stage

from ui.renderer import clear, draw_entities


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="tick-anim showcase")
    parser.add_argument("--config", help="YAML stage configuration")
    parser.add_argument("--debug", action="store_true", help="log task completions")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    config = load_config(args.config) if args.config else StageConfig()

    pygame.init()
    screen = pygame.display.set_mode((config.width, config.height))
    pygame.display.set_caption("tick-anim showcase")

    stage = make_stage()
    animator = Animator()
    animator.play(build_showcase(stage))

    def render(elapsed: float) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                animator.stop()
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                animator.stop()
        clear(screen, config.background)
        draw_entities(screen, stage.entities, config.square_size)
        pygame.display.flip()

    loop = FrameLoop(animator, render, clock=FrameClock(), fps=config.fps)
    try:
        loop.run_forever()
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
