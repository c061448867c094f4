from typing import List, Optional

from ..mpc.types import MPZ

RING_SIZE = 4


class ConvergentRing:
    """Circular buffer holding the last four continued-fraction convergents.

    Only the two most recent values feed the recurrence, the older slots are
    overwritten as the cursor wraps.
    """

    def __init__(self, first: MPZ, second: MPZ) -> None:
        self._slots: List[Optional[MPZ]] = [first, second, None, None]
        self._cursor = 1

    def advance(self) -> int:
        """Move the cursor to the next slot and return its position."""
        self._cursor = (self._cursor + 1) % RING_SIZE
        return self._cursor

    def push(self, cf: MPZ) -> MPZ:
        """Store cf * previous + before_previous in the current slot."""
        value = cf * self.previous() + self._slots[(self._cursor - 2) % RING_SIZE]
        self._slots[self._cursor] = value
        return value

    def current(self) -> MPZ:
        return self._slots[self._cursor]

    def previous(self) -> MPZ:
        return self._slots[(self._cursor - 1) % RING_SIZE]
