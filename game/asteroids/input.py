"""
Player input as a polled snapshot

Keyboard keys and on-screen touch zones both feed the same three booleans.
The simulation only ever reads an InputState; the host writes to the
InputTracker between frames.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, Optional, Set

LEFT = "left"
RIGHT = "right"
FIRE = "fire"
ACTIONS = (LEFT, RIGHT, FIRE)

# Browser-style key names; hosts with their own key codes pass their own bindings
DEFAULT_BINDINGS: Dict[str, Iterable[Hashable]] = {
    LEFT: ("ArrowLeft", "a"),
    RIGHT: ("ArrowRight", "d"),
    FIRE: (" ", "z"),
}

TOUCH_ZONE_HEIGHT = 28  # px along the bottom edge
TOUCH_ZONES = (LEFT, FIRE, RIGHT)  # left to right


@dataclass(frozen=True)
class InputState:
    """Pressed/released state for one tick"""
    left: bool = False
    right: bool = False
    fire: bool = False


class InputTracker:
    """Tracks held keys and touch zones and produces InputState snapshots"""

    def __init__(self, bindings: Optional[Dict[str, Iterable[Hashable]]] = None):
        bindings = bindings if bindings is not None else DEFAULT_BINDINGS
        unknown = set(bindings) - set(ACTIONS)
        if unknown:
            raise ValueError(f"Unknown input actions: {sorted(unknown)}")

        self._key_to_action: Dict[Hashable, str] = {}
        for action, keys in bindings.items():
            for key in keys:
                self._key_to_action[key] = action

        self._keys: Set[Hashable] = set()
        self._zones: Set[str] = set()

    def key_down(self, key: Hashable):
        self._keys.add(key)

    def key_up(self, key: Hashable):
        self._keys.discard(key)

    def press_zone(self, zone: str):
        if zone not in ACTIONS:
            raise ValueError(f"Unknown touch zone: {zone!r}")
        self._zones.add(zone)

    def release_zone(self, zone: str):
        self._zones.discard(zone)

    def release_all(self):
        """Forget everything held, e.g. when the window loses focus"""
        self._keys.clear()
        self._zones.clear()

    def _active(self, action: str) -> bool:
        if action in self._zones:
            return True
        return any(self._key_to_action.get(k) == action for k in self._keys)

    def snapshot(self) -> InputState:
        return InputState(
            left=self._active(LEFT),
            right=self._active(RIGHT),
            fire=self._active(FIRE),
        )


def zone_at(x: float, y: float, width: float, zone_height: float = TOUCH_ZONE_HEIGHT) -> Optional[str]:
    """
    Touch zone under a point, or None.

    The strip along the bottom edge (y measured upwards, as arcade reports
    it) is split into equal columns, one per entry of TOUCH_ZONES.
    """
    if y > zone_height or not 0 <= x < width:
        return None
    return TOUCH_ZONES[int(x * len(TOUCH_ZONES) // width)]
