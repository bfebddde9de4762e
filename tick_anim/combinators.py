"""Composite tasks: sequence and parallel."""
from __future__ import annotations

from tick_anim.tasks import Task


class Sequence(Task):
    """Runs children one at a time, in order.

    Time left over when a child finishes is dropped; the next child is
    started at that boundary and first receives time on the next resumption.
    """

    def __init__(self, *children: Task) -> None:
        super().__init__()
        self.children: tuple[Task, ...] = children
        self._index = 0

    @property
    def current(self) -> Task | None:
        if self._index < len(self.children):
            return self.children[self._index]
        return None

    def _on_start(self) -> None:
        if self.children:
            self.children[0].start()

    def _advance(self, elapsed: float) -> bool:
        child = self.current
        if child is None:
            return True
        if not child.resume(elapsed):
            return False
        self._index += 1
        child = self.current
        if child is None:
            return True
        child.start()
        return False

    def __repr__(self) -> str:
        return f"Sequence{self.children!r}"


class Parallel(Task):
    """Feeds every unfinished child the same elapsed time each resumption."""

    def __init__(self, *children: Task) -> None:
        super().__init__()
        self.children: tuple[Task, ...] = children

    def _on_start(self) -> None:
        for child in self.children:
            child.start()

    def _advance(self, elapsed: float) -> bool:
        all_done = True
        for child in self.children:
            if child.done:
                continue
            if not child.resume(elapsed):
                all_done = False
        return all_done

    def __repr__(self) -> str:
        return f"Parallel{self.children!r}"


def sequence(*tasks: Task) -> Sequence:
    return Sequence(*tasks)


def parallel(*tasks: Task) -> Parallel:
    return Parallel(*tasks)
