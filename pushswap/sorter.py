"""The recursive two-stack sorting strategy."""

from __future__ import annotations

from collections.abc import Iterable

from .moves import NextMove, Operator
from .stack import A, B, Stack, highest, lowest


def _in_order(stack: Stack) -> bool:
    if stack.name == A:
        return stack.is_correct(len(stack))
    return stack.is_reverse_correct(len(stack))


def find_pivot(stack: Stack, length: int) -> int:
    """Pick the pivot among the first ``length`` values of ``stack``.

    For A it is the value with ``length // 2`` values less than or equal to
    it, for B the value with ``length // 2`` values greater than or equal to
    it.  A stack holding exactly four values uses its extreme value instead.
    """
    content = stack.content
    window = content[:length]
    for candidate in window:
        if stack.name == A:
            count = sum(1 for value in window if value <= candidate)
        else:
            count = sum(1 for value in window if value >= candidate)
        if len(stack) == 4 and count == 1:
            return candidate
        if len(stack) != 4 and count == length // 2:
            return candidate
    return content[min(length, len(content) - 1)]


def should_swap(stack: Stack, pushes_left: int) -> bool:
    """True when swapping the top two values is a sensible next step.

    That is when the swap leaves the stack in order, or when the values
    that still have to be pushed all lie right below the top.
    """
    if len(stack) < 2 or _in_order(stack):
        return False
    stack.swap()
    fixes = _in_order(stack)
    stack.swap()
    following = stack.content[1 : pushes_left + 1]
    if stack.name == A:
        pushable = sum(1 for value in following if value <= stack.pivot)
    else:
        pushable = sum(1 for value in following if value >= stack.pivot)
    return fixes or pushable == pushes_left


def should_rotate(stack: Stack, pushes_left: int) -> NextMove:
    """Whether rotating or reverse-rotating brings the stack closer to order."""
    del pushes_left
    if len(stack) < 2 or _in_order(stack):
        return NextMove.NONE
    flag = NextMove.NONE
    stack.rotate()
    if _in_order(stack):
        flag = NextMove.ROTATE
    stack.reverse_rotate()
    stack.reverse_rotate()
    top, second = stack.content[0], stack.content[1]
    if stack.name == A:
        if stack.is_correct(len(stack)) or (top <= stack.pivot and top < second):
            flag = NextMove.REVERSE_ROTATE
    elif stack.name == B:
        if stack.is_reverse_correct(len(stack)) or (
            top >= stack.pivot and top > second
        ):
            flag = NextMove.REVERSE_ROTATE
    stack.rotate()
    return flag


def push_swap_3a(ops: Operator) -> None:
    """Sort a stack A of at most three values in place."""
    a = ops.a
    if len(a) == 3 and a.content[1] == highest(a.content[:3]):
        ops.reverse_rotate(a)
    if len(a) == 3 and a.content[0] == highest(a.content[:3]):
        ops.rotate(a)
    if not a.is_correct(min(3, len(a))):
        ops.swap(a)


def push_swap_3b(ops: Operator) -> None:
    """Sort a stack B of at most three values and push them all onto A."""
    b = ops.b
    if len(b) == 3 and b.content[1] == lowest(b.content[:3]):
        ops.reverse_rotate(b)
    if len(b) == 3 and b.content[0] == lowest(b.content[:3]):
        ops.rotate(b)
    if not b.is_reverse_correct(min(3, len(b))):
        ops.swap(b)
    while b.content:
        ops.push(ops.a)


def put_on_top_a(ops: Operator) -> None:
    """Undo A's rotations and bring A's pivot to the top of B."""
    a, b = ops.a, ops.b
    b_has_pivot = a.pivot in b.content
    if a.n_rotates > 0:
        while b_has_pivot and b.content[0] != a.pivot and a.n_rotates > 0:
            a.n_rotates += ops.reverse_rotate_both(a, b)
        while a.n_rotates > 0 and not ops.fast_solution_check(a, len(a)):
            a.n_rotates += ops.reverse_rotate(a)
    while b_has_pivot and b.content[0] != a.pivot:
        ops.reverse_rotate(b)


def put_on_top_b(ops: Operator) -> None:
    """Undo B's rotations and bring B's pivot to the top of A.

    Only the first ``len(b)`` values of A are searched for the pivot.
    """
    a, b = ops.a, ops.b
    a_has_pivot = b.pivot in a.content[: len(b)]
    if b.n_rotates > 0:
        while a_has_pivot and a.content[0] != b.pivot and b.n_rotates > 0:
            b.n_rotates += ops.reverse_rotate_both(b, a)
        while b.n_rotates > 0 and not ops.fast_solution_check(b, len(b)):
            b.n_rotates += ops.reverse_rotate(b)
    while a_has_pivot and a.content[0] != b.pivot:
        ops.reverse_rotate(a)


def _split_a(ops: Operator, length: int) -> int:
    a, b = ops.a, ops.b
    half = length // 2
    n_pushes = 0
    while not ops.fast_solution_check(a, len(a)) and n_pushes < half:
        pushes_left = half - n_pushes
        if should_swap(a, pushes_left):
            ops.try_swap_both(a, b)
            continue
        rotation = should_rotate(a, pushes_left)
        if rotation == NextMove.ROTATE:
            a.n_rotates += ops.try_rotate_both(a, b)
        elif rotation == NextMove.REVERSE_ROTATE:
            ops.try_reverse_rotate_both(a, b)
        elif a.content[0] > a.pivot:
            a.n_rotates += ops.try_rotate_both(a, b)
        else:
            if b.content and b.content[0] == a.pivot and n_pushes != half - 1:
                ops.rotate(b)
            n_pushes += ops.push(b)
    if len(b) > 1 and b.content[1] == a.pivot:
        ops.try_swap_both(b, a)
    put_on_top_a(ops)
    return n_pushes


def _split_b(ops: Operator, length: int) -> int:
    a, b = ops.a, ops.b
    half = length // 2
    n_pushes = 0
    while not ops.fast_solution_check(b, len(b)) and n_pushes < half:
        pushes_left = half - n_pushes
        if should_swap(b, pushes_left):
            ops.try_swap_both(b, a)
            continue
        rotation = should_rotate(b, pushes_left)
        if rotation == NextMove.ROTATE:
            b.n_rotates += ops.try_rotate_both(b, a)
        elif rotation == NextMove.REVERSE_ROTATE:
            ops.try_reverse_rotate_both(b, a)
        elif b.content[0] < b.pivot:
            b.n_rotates += ops.try_rotate_both(b, a)
        else:
            if a.content and a.content[0] == b.pivot and n_pushes != half - 1:
                ops.rotate(a)
            n_pushes += ops.push(a)
    if len(a) > 1 and a.content[1] == b.pivot:
        ops.try_swap_both(a, b)
    put_on_top_b(ops)
    return n_pushes


def mutual_sort_a(ops: Operator, length: int) -> None:
    """Sort the top ``length`` values of A, splitting halves onto B."""
    a, b = ops.a, ops.b
    a.is_segmented = len(a) != length
    a.pivot = find_pivot(a, length)
    if len(a) <= 3:
        push_swap_3a(ops)
        return
    if length <= 2 or ops.fast_solution_check(a, length):
        if length == 2 and a.content[0] > a.content[1]:
            ops.try_swap_both(a, b)
        return
    n_pushes = _split_a(ops, length)
    if not ops.fast_solution_check(a, length - n_pushes):
        mutual_sort_a(ops, length - n_pushes)
    if not ops.fast_solution_check(b, n_pushes):
        mutual_sort_b(ops, n_pushes)


def mutual_sort_b(ops: Operator, length: int) -> None:
    """Sort the top ``length`` values of B, splitting halves onto A."""
    a, b = ops.a, ops.b
    b.is_segmented = len(b) != length
    b.pivot = find_pivot(b, length)
    if len(b) <= 3:
        push_swap_3b(ops)
        return
    if length <= 2 or ops.fast_solution_check(b, length):
        if length == 2 and b.content[0] < b.content[1]:
            ops.try_swap_both(b, a)
        if ops.fast_solution_check(a, len(a)):
            for _ in range(length):
                ops.push(a)
        return
    n_pushes = _split_b(ops, length)
    if not ops.fast_solution_check(a, n_pushes):
        mutual_sort_a(ops, n_pushes)
    if not ops.fast_solution_check(b, length - n_pushes):
        mutual_sort_b(ops, length - n_pushes)


def solve(numbers: Iterable[int]) -> list[str]:
    """Return the instructions the strategy emits for the given stack A."""
    a = Stack(A, list(numbers))
    if len(a) <= 1:
        return []
    ops = Operator(a, Stack(B))
    mutual_sort_a(ops, len(a))
    return ops.moves