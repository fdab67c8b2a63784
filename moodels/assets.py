"""Track resources whose assets are still loading."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable
from dataclasses import dataclass, field

InsertLoaded = Callable[[Hashable], None]


@dataclass
class ResourceHandles:
    """Handles waiting to load and those already turned into resources."""

    waiting: deque[tuple[Hashable, InsertLoaded]] = field(default_factory=deque)
    finished: list[Hashable] = field(default_factory=list)

    def request(self, handle: Hashable, insert: InsertLoaded) -> None:
        """Queue ``handle``; ``insert`` is called with it once it has loaded."""
        self.waiting.append((handle, insert))

    def poll(self, is_loaded: Callable[[Hashable], bool]) -> list[Hashable]:
        """Insert every loaded resource once; return the handles that finished."""
        pending, self.waiting = self.waiting, deque()
        done = []
        for handle, insert in pending:
            if is_loaded(handle):
                insert(handle)
                self.finished.append(handle)
                done.append(handle)
            else:
                self.waiting.append((handle, insert))
        return done

    def is_all_done(self) -> bool:
        """True when nothing is waiting to load."""
        return not self.waiting