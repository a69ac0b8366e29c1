from __future__ import annotations
from typing import Optional

# NOTE: For now this is process-global. If threading is introduced,
# consider switching to contextvars or threading.local.
_current_arena: Optional["Arena"] = None


def set_current_arena(arena: Optional["Arena"]) -> None:
    global _current_arena
    _current_arena = arena


def get_current_arena() -> Optional["Arena"]:
    return _current_arena


def track(obj: object) -> None:
    """Register a freshly constructed runtime object with the active arena, if any."""
    if _current_arena is not None:
        _current_arena.track(obj)
