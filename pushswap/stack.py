"""The two stacks of the puzzle and their primitive operations."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

A = "A"
B = "B"


def lowest(values: Sequence[int]) -> int:
    """Return the smallest value of a non-empty sequence."""
    return min(values)


def highest(values: Sequence[int]) -> int:
    """Return the largest value of a non-empty sequence."""
    return max(values)


def is_balanced(a: Optional["Stack"], b: Optional["Stack"]) -> bool:
    """True when every value on ``a`` is greater than every value on ``b``.

    An empty or missing stack is always balanced.
    """
    if a is None or b is None or not a.content or not b.content:
        return True
    return lowest(a.content) > highest(b.content)


@dataclass
class Stack:
    """One stack of integers; index 0 is the top."""

    name: str
    content: list[int] = field(default_factory=list)
    is_segmented: bool = False
    n_rotates: int = 0
    pivot: int = 0
    other: Optional["Stack"] = field(default=None, repr=False, compare=False)

    def __len__(self) -> int:
        return len(self.content)

    def swap(self) -> None:
        """Exchange the two top elements; does nothing with fewer than two."""
        if len(self.content) > 1:
            self.content[0], self.content[1] = self.content[1], self.content[0]

    def push_from(self, other: "Stack") -> int:
        """Move the top of ``other`` onto this stack; return 1 if moved, else 0."""
        if not other.content:
            return 0
        self.content.insert(0, other.content.pop(0))
        return 1

    def rotate(self) -> int:
        """Move the top element to the bottom.

        Returns 1 when the stack is non-empty and segmented, otherwise 0.
        """
        if not self.content:
            return 0
        self.content.append(self.content.pop(0))
        return 1 if self.is_segmented else 0

    def reverse_rotate(self) -> int:
        """Move the bottom element to the top.

        Returns -1 when the stack is non-empty and segmented, otherwise 0.
        """
        if not self.content:
            return 0
        self.content.insert(0, self.content.pop())
        return -1 if self.is_segmented else 0

    def is_correct(self, length: int) -> bool:
        """True when the first ``length`` values form an ascending rotation."""
        content = self.content
        if len(content) < 2:
            return True
        lowest_pos = content.index(lowest(content))
        for i in range(lowest_pos):
            if content[i] != lowest(content[i:lowest_pos]):
                return False
        for i in range(lowest_pos, length):
            if content[i] != lowest(content[i:length]):
                return False
        if lowest_pos > 0 and content[length - 1] > content[0]:
            return False
        return is_balanced(self, self.other)

    def is_reverse_correct(self, length: int) -> bool:
        """True when the first ``length`` values form a descending rotation."""
        content = self.content
        if len(content) < 2:
            return True
        highest_pos = content.index(highest(content))
        for i in range(highest_pos):
            if content[i] != highest(content[i:highest_pos]):
                return False
        for i in range(highest_pos, length):
            if content[i] != highest(content[i:length]):
                return False
        if highest_pos > 0 and content[length - 1] < content[0]:
            return False
        return is_balanced(self.other, self)