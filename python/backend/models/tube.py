"""Tube model for the water sort puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field

EMPTY = 0


@dataclass
class Tube:
    """A single tube of fixed capacity.

    Slots are stored bottom-up: index 0 is the bottom, ``capacity - 1`` the
    top.  0 marks an empty slot, any positive int is a drop of that color.
    Drops only ever enter at the lowest empty slot and leave from the highest
    filled one, so a tube built empty stays settled (no gap under a drop).
    """

    capacity: int
    slots: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.slots:
            self.slots = [EMPTY] * self.capacity
        elif len(self.slots) != self.capacity:
            raise ValueError(
                f"Expected {self.capacity} slots, got {len(self.slots)}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_slots(cls, slots: list[int], capacity: int | None = None) -> Tube:
        """Create a tube from a bottom-up slot list.

        Example::

            Tube.from_slots([2, 1, 1, 0])
        """
        if capacity is None:
            capacity = len(slots)
        if len(slots) != capacity:
            raise ValueError(
                f"Expected {capacity} slots for a tube of capacity {capacity}, "
                f"got {len(slots)}."
            )
        return cls(capacity=capacity, slots=list(slots))

    # -- queries --------------------------------------------------------------

    def is_empty(self) -> bool:
        return all(c == EMPTY for c in self.slots)

    def is_full(self) -> bool:
        return all(c != EMPTY for c in self.slots)

    def top_index(self) -> int:
        """Index of the highest drop, or -1 if the tube is empty."""
        for i in range(self.capacity - 1, -1, -1):
            if self.slots[i] != EMPTY:
                return i
        return -1

    def top_color(self) -> int:
        idx = self.top_index()
        return self.slots[idx] if idx >= 0 else EMPTY

    def first_empty_slot(self) -> int:
        """Index of the lowest empty slot, or -1 if the tube is full."""
        for i in range(self.capacity):
            if self.slots[i] == EMPTY:
                return i
        return -1

    def can_receive(self, color: int) -> bool:
        """A drop lands on an empty tube or on a drop of its own color."""
        if self.is_full():
            return False
        if self.is_empty():
            return True
        return self.top_color() == color

    def count_top_run(self) -> int:
        """Number of same-colored drops stacked at the top.

        ``[0, 1, 1, 1]`` gives 3, ``[2, 2, 0, 0]`` gives 2.
        """
        top = self.top_index()
        if top < 0:
            return 0
        color = self.slots[top]
        count = 0
        for i in range(top, -1, -1):
            if self.slots[i] != color:
                break
            count += 1
        return count

    def is_monochrome(self) -> bool:
        """True if every slot holds the same color (so the tube is also full)."""
        if self.top_index() < 0:
            return False
        first = self.slots[0]
        if first == EMPTY:
            return False
        return all(c == first for c in self.slots)

    def is_settled(self) -> bool:
        """True if no empty slot lies below a drop."""
        seen_empty = False
        for c in self.slots:
            if c == EMPTY:
                seen_empty = True
            elif seen_empty:
                return False
        return True

    def snapshot(self) -> list[int]:
        return self.slots[:]

    # -- single-drop mutation -------------------------------------------------

    def pour_out(self) -> int:
        """Remove the top drop and return its color (0 if empty)."""
        idx = self.top_index()
        if idx < 0:
            return EMPTY
        color = self.slots[idx]
        self.slots[idx] = EMPTY
        return color

    def pour_in(self, color: int) -> bool:
        """Place one drop in the lowest empty slot.  False if full."""
        idx = self.first_empty_slot()
        if idx < 0:
            return False
        self.slots[idx] = color
        return True

    # -- run mutation ---------------------------------------------------------

    def pop_run(self, count: int) -> list[int]:
        """Remove up to *count* drops from the top, in pop order."""
        popped: list[int] = []
        for _ in range(count):
            color = self.pour_out()
            if color == EMPTY:
                break
            popped.append(color)
        return popped

    def push_run(self, color: int, count: int) -> int:
        """Pour up to *count* drops of *color*; return how many fit."""
        placed = 0
        while placed < count and self.pour_in(color):
            placed += 1
        return placed
