"""Bounded ancestor path used to locate configuration errors."""

from __future__ import annotations

from rjsconfig.config import DEFAULT_TRACKED_DEPTH


class ElementPath:
    """Fixed-capacity stack of the currently open element names.

    Only the first *capacity* levels are recorded.  Deeper elements still
    move the depth counter, so the stack stays aligned once the walk
    returns above the limit, but they never appear in :meth:`location`.
    """

    def __init__(self, capacity: int = DEFAULT_TRACKED_DEPTH) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._slots: list[str | None] = [None] * capacity
        self._depth = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def depth(self) -> int:
        return self._depth

    def enter(self, name: str) -> None:
        if self._depth < len(self._slots):
            self._slots[self._depth] = name
        self._depth += 1

    def leave(self) -> None:
        if self._depth == 0:
            raise ValueError("leave() called with no open element")
        self._depth -= 1
        if self._depth < len(self._slots):
            self._slots[self._depth] = None

    def location(self) -> str:
        """Slash-joined names of the tracked open elements, root first."""
        return "/".join(name for name in self._slots if name is not None)
