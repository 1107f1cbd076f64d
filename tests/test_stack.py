import pytest

from pushswap.stack import A, B, Stack, highest, is_balanced, lowest


def linked(a_values, b_values):
    a = Stack(A, list(a_values))
    b = Stack(B, list(b_values))
    a.other = b
    b.other = a
    return a, b


def test_lowest_and_highest():
    assert lowest([4, -2, 9]) == -2
    assert highest([4, -2, 9]) == 9


def test_swap_exchanges_top_two():
    s = Stack(A, [2, 1, 3])
    s.swap()
    assert s.content == [1, 2, 3]


def test_swap_single_element_untouched():
    s = Stack(A, [5])
    s.swap()
    assert s.content == [5]


def test_push_from_moves_top():
    a, b = linked([1, 2, 3], [])
    assert b.push_from(a) == 1
    assert a.content == [2, 3]
    assert b.content == [1]


def test_push_from_empty_returns_zero():
    a, b = linked([1], [])
    assert a.push_from(b) == 0
    assert a.content == [1]
    assert b.content == []


def test_rotate_and_reverse_rotate_are_inverse():
    s = Stack(A, [1, 2, 3, 4])
    s.rotate()
    assert s.content == [2, 3, 4, 1]
    s.reverse_rotate()
    assert s.content == [1, 2, 3, 4]


@pytest.mark.parametrize("segmented,rot,rrot", [(True, 1, -1), (False, 0, 0)])
def test_rotation_counts(segmented, rot, rrot):
    s = Stack(A, [1, 2, 3], is_segmented=segmented)
    assert s.rotate() == rot
    assert s.reverse_rotate() == rrot


def test_rotation_of_empty_stack_counts_nothing():
    s = Stack(A, [], is_segmented=True)
    assert s.rotate() == 0
    assert s.reverse_rotate() == 0
    assert s.content == []


@pytest.mark.parametrize(
    "values,expected",
    [
        ([1, 2, 3], True),
        ([3, 1, 2], True),
        ([2, 3, 1], True),
        ([2, 1, 3], False),
        ([1, 3, 2], False),
        ([7], True),
    ],
)
def test_is_correct(values, expected):
    s = Stack(A, values)
    assert s.is_correct(len(values)) is expected


def test_is_correct_respects_length():
    s = Stack(A, [1, 2, 5, 3])
    assert s.is_correct(3) is True
    assert s.is_correct(4) is False


@pytest.mark.parametrize(
    "values,expected",
    [
        ([3, 2, 1], True),
        ([1, 3, 2], True),
        ([2, 3, 1], False),
        ([1, 2, 3], False),
    ],
)
def test_is_reverse_correct(values, expected):
    s = Stack(B, values)
    assert s.is_reverse_correct(len(values)) is expected


def test_is_correct_requires_balance_with_other():
    a, _ = linked([3, 4], [1, 2])
    assert a.is_correct(2) is True
    a, _ = linked([3, 4], [5, 0])
    assert a.is_correct(2) is False


def test_is_balanced():
    a, b = linked([3, 4], [1, 2])
    assert is_balanced(a, b) is True
    assert is_balanced(b, a) is False
    assert is_balanced(a, None) is True
    assert is_balanced(Stack(A, []), b) is True


def test_len():
    assert len(Stack(A, [1, 2, 3])) == 3