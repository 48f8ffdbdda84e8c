"""
Reference/target selection state.
"""

from dataclasses import dataclass, replace
from enum import Enum

NO_SELECTION = -1


class Side(str, Enum):
    REFERENCE = "reference"
    TARGET = "target"


@dataclass(frozen=True)
class DualCursor:
    """Two independent positions into a catalog of ``size`` images.

    Every operation returns a new cursor; out-of-range requests return the
    cursor unchanged.
    """

    size: int
    reference_index: int = NO_SELECTION
    target_index: int = NO_SELECTION

    @classmethod
    def initial(cls, size: int) -> "DualCursor":
        """Reference on the first image and target on the second, when present."""
        reference_index = 0 if size >= 1 else NO_SELECTION
        target_index = 1 if size >= 2 else NO_SELECTION
        return cls(size, reference_index, target_index)

    def current(self, side: Side) -> int:
        if side == Side.REFERENCE:
            return self.reference_index
        return self.target_index

    def in_bounds(self, index: int) -> bool:
        return 0 <= index < self.size

    def select(self, side: Side, index: int) -> "DualCursor":
        if not self.in_bounds(index):
            return self
        if side == Side.REFERENCE:
            return replace(self, reference_index=index)
        return replace(self, target_index=index)

    def navigate(self, side: Side, delta: int) -> "DualCursor":
        return self.select(side, self.current(side) + delta)

    def has_selection(self, side: Side) -> bool:
        return self.current(side) != NO_SELECTION

    def is_complete(self) -> bool:
        return self.reference_index != NO_SELECTION and self.target_index != NO_SELECTION

    def can_navigate(self, side: Side, delta: int) -> bool:
        return self.in_bounds(self.current(side) + delta)
