from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class TaskRunner(Protocol):
    def submit(self, work: Callable[[], T], on_done: Callable[[T], None]) -> None:
        ...


class ImmediateTaskRunner:
    """Runs work and its continuation inline."""

    def submit(self, work: Callable[[], T], on_done: Callable[[T], None]) -> None:
        on_done(work())


class ThreadedTaskRunner:
    """Runs work on a daemon thread and hands the result back to the Tk loop."""

    def __init__(self, root: Any) -> None:
        self.root = root

    def submit(self, work: Callable[[], T], on_done: Callable[[T], None]) -> None:
        def worker() -> None:
            result = work()
            if self.root:
                self.root.after(0, lambda: on_done(result))

        threading.Thread(target=worker, daemon=True).start()
