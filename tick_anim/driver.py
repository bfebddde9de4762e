"""Driver - turns a built task tree into a per-tick stepper."""
from __future__ import annotations

from tick_anim.tasks import Task


class Driver:
    def __init__(self, task: Task) -> None:
        self._task = task
        self._elapsed = 0.0
        self._ticks = 0
        task.start()

    @property
    def task(self) -> Task:
        return self._task

    @property
    def done(self) -> bool:
        return self._task.done

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def ticks(self) -> int:
        return self._ticks

    def __call__(self, elapsed: float) -> bool:
        self._ticks += 1
        self._elapsed += elapsed
        return self._task.resume(elapsed)

    def __repr__(self) -> str:
        return f"Driver({self._task!r})"


def coroutine(task: Task) -> Driver:
    """Prime ``task`` and return a callable that advances it by one tick."""
    return Driver(task)
