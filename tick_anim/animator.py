"""Animator - owns the active top-level animations and the running flag."""
from __future__ import annotations

import logging
from typing import Callable

from tick_anim.driver import Driver
from tick_anim.tasks import Task

log = logging.getLogger(__name__)


class Animator:
    def __init__(self) -> None:
        self._drivers: list[Driver] = []
        self._complete_hooks: list[Callable[[Driver], None]] = []
        self._running = True
        self._fault: BaseException | None = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def fault(self) -> BaseException | None:
        return self._fault

    @property
    def active(self) -> tuple[Driver, ...]:
        return tuple(self._drivers)

    @property
    def idle(self) -> bool:
        return not self._drivers

    def play(self, task: Task) -> Driver:
        driver = Driver(task)
        self._drivers.append(driver)
        return driver

    def on_complete(self, hook: Callable[[Driver], None]) -> None:
        self._complete_hooks.append(hook)

    def stop(self) -> None:
        self._running = False

    def update(self, elapsed: float) -> None:
        """Advance every active animation by ``elapsed``.

        A task that raises stops the animator for good; the exception is
        recorded on ``fault`` and re-raised to the caller.
        """
        if not self._running:
            return
        finished: list[Driver] = []
        try:
            for driver in self._drivers:
                if driver(elapsed):
                    finished.append(driver)
        except Exception as exc:
            self._running = False
            self._fault = exc
            log.exception("animation failed, stopping animator")
            raise

        for driver in finished:
            self._drivers.remove(driver)
            log.info("animation complete %s", driver.elapsed)
            for hook in self._complete_hooks:
                hook(driver)
