"""Recorded stack operations and the heuristics that pick combined moves."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from .stack import A, B, Stack, highest, lowest


class NextMove(IntEnum):
    """What a stack would like to do next."""

    NONE = 0
    ROTATE = 1
    REVERSE_ROTATE = -1
    SWAP = 2


def _values(stack: Optional[Stack]) -> list[int]:
    return stack.content if stack is not None else []


def _scan(a: Optional[Stack], b: Optional[Stack], value: int, better) -> int:
    candidates = [*_values(a), *_values(b)]
    if not candidates:
        raise ValueError("both stacks are empty")
    result = candidates[0]
    for candidate in candidates[1:]:
        if better(candidate, result) and candidate != value:
            result = candidate
    return result


def find_next_smallest(a: Optional[Stack], b: Optional[Stack], value: int) -> int:
    """Smallest value across both stacks other than ``value``.

    The top of ``a`` is the starting candidate even when it equals ``value``.
    """
    return _scan(a, b, value, lambda x, y: x < y)


def find_next_biggest(a: Optional[Stack], b: Optional[Stack], value: int) -> int:
    """Largest value across both stacks other than ``value``.

    The top of ``a`` is the starting candidate even when it equals ``value``.
    """
    return _scan(a, b, value, lambda x, y: x > y)


def _suffix(stack: Stack) -> str:
    return stack.name.lower()


@dataclass
class Operator:
    """Applies operations to the two stacks and records their names."""

    a: Stack
    b: Stack
    moves: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.a.other = self.b
        self.b.other = self.a

    def swap(self, stack: Stack) -> None:
        """``sa`` or ``sb``."""
        self.moves.append("s" + _suffix(stack))
        stack.swap()

    def swap_both(self, first: Stack, second: Stack) -> None:
        """``ss``."""
        self.moves.append("ss")
        first.swap()
        second.swap()

    def try_swap_both(self, first: Stack, second: Stack) -> None:
        """Swap ``first``, taking ``second`` along when that helps it too."""
        top = second.content
        if first.name == A and second.name == B:
            if len(top) >= 2 and top[0] < top[1]:
                self.swap_both(first, second)
            else:
                self.swap(first)
        elif first.name == B and second.name == A:
            if len(top) >= 2 and top[0] > top[1]:
                self.swap_both(first, second)
            else:
                self.swap(first)

    def push(self, dest: Stack) -> int:
        """``pa`` or ``pb`` onto ``dest``; returns 1 if an element moved."""
        source = self.b if dest is self.a else self.a
        self.moves.append("p" + _suffix(dest))
        return dest.push_from(source)

    def rotate(self, stack: Stack) -> int:
        """``ra`` or ``rb``; returns the rotation count change."""
        self.moves.append("r" + _suffix(stack))
        return stack.rotate()

    def rotate_both(self, first: Stack, second: Stack) -> int:
        """``rr``; returns the count change of ``first``."""
        self.moves.append("rr")
        second.rotate()
        return first.rotate()

    def try_rotate_both(self, first: Stack, second: Stack) -> int:
        """Rotate ``first``, taking ``second`` along when it wants to rotate."""
        if (first.name, second.name) in ((A, B), (B, A)):
            if self.get_next_move(second, first.pivot) == NextMove.ROTATE:
                return self.rotate_both(first, second)
            return self.rotate(first)
        return 0

    def reverse_rotate(self, stack: Stack) -> int:
        """``rra`` or ``rrb``; returns the rotation count change."""
        self.moves.append("rr" + _suffix(stack))
        return stack.reverse_rotate()

    def reverse_rotate_both(self, first: Stack, second: Stack) -> int:
        """``rrr``; returns the count change of ``first``."""
        self.moves.append("rrr")
        second.reverse_rotate()
        return first.reverse_rotate()

    def try_reverse_rotate_both(self, first: Stack, second: Stack) -> int:
        """Reverse-rotate ``first``, taking ``second`` along when it helps."""
        if len(second) < 2 and first.name in (A, B):
            return self.reverse_rotate(first)
        top, bottom = second.content[0], second.content[-1]
        if first.name == A and second.name == B:
            if top != first.pivot and top < bottom:
                return self.reverse_rotate_both(first, second)
            return self.reverse_rotate(first)
        if first.name == B and second.name == A:
            if top != first.pivot and top > bottom:
                return self.reverse_rotate_both(first, second)
            return self.reverse_rotate(first)
        return 0

    def get_next_move(self, stack: Stack, pivot: int) -> NextMove:
        """Decide whether ``stack`` would gain from rotating alongside the other."""
        content = stack.content
        if len(content) < 2 or (stack.is_segmented and content[0] != pivot):
            return NextMove.NONE
        last = content[-1]
        if content[0] == pivot:
            return NextMove.ROTATE
        if stack.name == B:
            successor = find_next_biggest(stack.other, stack, pivot)
        else:
            successor = find_next_smallest(stack, stack.other, pivot)
        if last != pivot:
            if (stack.name == B and content[0] < last) or (
                stack.name == A and content[0] > last
            ):
                return NextMove.ROTATE
            return NextMove.REVERSE_ROTATE
        if content[0] == successor:
            return NextMove.ROTATE
        return NextMove.NONE

    def fast_solution_check(self, stack: Stack, length: int) -> bool:
        """True when ``stack`` is solved up to rotation; rotates it into place."""
        if len(stack) <= 3:
            return True
        window = stack.content[: max(length, 1)]
        if stack.name == A and stack.is_correct(length):
            top = lowest(window)
        elif stack.name == B and stack.is_reverse_correct(length):
            top = highest(window)
        else:
            return False
        top_pos = stack.content.index(top)
        while stack.content[0] != top:
            if top_pos > length // 2:
                self.try_reverse_rotate_both(stack, stack.other)
            else:
                self.try_rotate_both(stack, stack.other)
        return True