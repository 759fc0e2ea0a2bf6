import pytest

from drillrunner.lessons.sharing import (
    Cons,
    Nil,
    abs_all,
    create_empty_list,
    create_non_empty_list,
    offset_sums,
)


def test_create_empty_list():
    assert create_empty_list() == Nil()


def test_create_non_empty_list():
    non_empty = create_non_empty_list()
    assert non_empty == Cons(0, Nil())
    assert non_empty != create_empty_list()


def test_cons_iteration():
    assert list(Cons(1, Cons(2, Nil()))) == [1, 2]
    assert list(create_empty_list()) == []


def test_offset_sums_small():
    assert offset_sums([1, 2, 3, 4], 2) == [6, 4]


def test_offset_sums_cover_everything():
    numbers = list(range(100))
    sums = offset_sums(numbers)
    assert len(sums) == 8
    assert sum(sums) == sum(numbers)


def test_offset_sums_rejects_no_workers():
    with pytest.raises(ValueError):
        offset_sums([1, 2], 0)


def test_abs_all_borrows_when_unchanged():
    values = [0, 1, 2]
    assert abs_all(values) is values


def test_abs_all_copies_when_changed():
    values = [-1, 0, 1]
    result = abs_all(values)
    assert result == [1, 0, 1]
    assert values == [-1, 0, 1]