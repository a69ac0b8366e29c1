"""Process-wide allocation pool for Skim runtime objects.

Every Pair, Environment and Closure built while an arena is active is recorded
here in allocation order and kept until the whole pool is released in one
step. Python's own reference ownership decides when an object is actually
usable; the arena only guarantees nothing is reclaimed mid-run and that the
run's allocations are dropped together at the end.
"""

from __future__ import annotations

import logging
from collections import Counter

from skim import runtime_context

logger = logging.getLogger(__name__)


class Arena:
    """Append-only pool of tracked objects, released as one unit."""

    __slots__ = ("_objects", "generation", "_released")

    def __init__(self):
        self._objects: list[object] = []
        self.generation: int = 0
        self._released: int = 0

    def track(self, obj: object) -> int:
        """Record `obj` and return its index within the current generation."""
        self._objects.append(obj)
        return len(self._objects) - 1

    def __len__(self) -> int:
        return len(self._objects)

    def stats(self) -> dict[str, int]:
        """Count tracked objects per kind for the current generation."""
        counts = Counter(type(o).__name__ for o in self._objects)
        result = {kind: counts.get(kind, 0) for kind in ("Pair", "Environment", "Closure")}
        result["total"] = len(self._objects)
        result["generation"] = self.generation
        result["released"] = self._released
        return result

    def release(self) -> int:
        """Drop every tracked object at once; returns how many were dropped."""
        n = len(self._objects)
        logger.debug("arena generation %d: releasing %d objects", self.generation, n)
        self._objects = []
        self._released += n
        self.generation += 1
        return n

    def activate(self) -> None:
        runtime_context.set_current_arena(self)

    def deactivate(self) -> None:
        if runtime_context.get_current_arena() is self:
            runtime_context.set_current_arena(None)

    def __repr__(self) -> str:
        return f"<Arena generation={self.generation} objects={len(self._objects)}>"
