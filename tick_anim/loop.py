"""FrameLoop - measure, update, render, with optional frame pacing."""
from __future__ import annotations

import time
from typing import Callable

from tick_anim.animator import Animator
from tick_anim.clock import FrameClock


class FrameLoop:
    def __init__(
        self,
        animator: Animator,
        render: Callable[[float], None],
        clock: FrameClock | None = None,
        fps: int = 60,
        sleep_fn: Callable[[float], None] = time.sleep,
    ) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._animator = animator
        self._render = render
        self._clock = clock if clock is not None else FrameClock()
        self._fps = fps
        self._sleep = sleep_fn
        self._start_hooks: list[Callable[[Animator], None]] = []
        self._stop_hooks: list[Callable[[Animator], None]] = []

    @property
    def animator(self) -> Animator:
        return self._animator

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def fps(self) -> int:
        return self._fps

    def on_start(self, hook: Callable[[Animator], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[Animator], None]) -> None:
        self._stop_hooks.append(hook)

    def step(self) -> float:
        elapsed = self._clock.tick()
        self._animator.update(elapsed)
        self._render(elapsed)
        return elapsed

    def run(self, n: int) -> None:
        for hook in self._start_hooks:
            hook(self._animator)

        for _ in range(n):
            if not self._animator.running:
                break
            self.step()

        for hook in self._stop_hooks:
            hook(self._animator)

    def run_forever(self, until_idle: bool = False) -> None:
        for hook in self._start_hooks:
            hook(self._animator)

        frame_time = 1.0 / self._fps
        self._clock.reset()
        while self._animator.running:
            if until_idle and self._animator.idle:
                break
            start = time.monotonic()
            self.step()
            elapsed = time.monotonic() - start
            sleep_time = frame_time - elapsed
            if sleep_time > 0:
                self._sleep(sleep_time)

        for hook in self._stop_hooks:
            hook(self._animator)
