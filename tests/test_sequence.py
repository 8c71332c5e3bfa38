import pytest

from pycoll.errors import IndexOutOfRangeError
from pycoll.sequence import Sequence, UniqueSequence


def test_sequence():
    s = Sequence()
    assert s.is_empty()
    assert s.size() == 0

    for i in range(5):
        assert s.add(i * 10)

    assert not s.is_empty()
    assert s.size() == 5
    assert list(s) == [0, 10, 20, 30, 40]

    # should find elements by value
    assert s.index_of(20) == 2
    assert s.index_of(99) == -1
    assert s.contains(40)
    assert not s.contains(41)

    s.set(0, 5)
    assert s.get(0) == 5


def test_sequence_grows():
    s = Sequence()
    assert s.capacity() == 8

    for i in range(9):
        s.add(str(i))

    # should keep every element in order after doubling
    assert s.capacity() == 16
    assert s.size() == 9
    assert [s.get(i) for i in range(9)] == [str(i) for i in range(9)]


def test_sequence_remove_shifts_left():
    s = Sequence()
    for c in "abcab":
        s.add(c)

    # should remove only the first match
    assert s.remove("b")
    assert list(s) == ["a", "c", "a", "b"]
    assert s.size() == 4
    assert s.get(3) == "b"

    assert not s.remove("z")
    assert s.size() == 4

    for c in "acab":
        assert s.remove(c)
    assert s.is_empty()


def test_sequence_index_errors():
    s = Sequence()
    s.add(1)

    for index in (-1, 1, 8):
        with pytest.raises(IndexOutOfRangeError):
            s.get(index)
        with pytest.raises(IndexOutOfRangeError):
            s.set(index, 0)

    # should be catchable as a plain IndexError
    with pytest.raises(IndexError):
        Sequence().get(0)


def test_sequence_bad_capacity():
    with pytest.raises(ValueError):
        Sequence(0)

    s = Sequence(1)
    s.add(1)
    s.add(2)
    assert s.capacity() == 2


def test_unique_sequence():
    u = UniqueSequence()

    assert u.add("x")
    # should reject a duplicate without changing anything
    assert not u.add("x")
    assert u.size() == 1
    assert len(u) == 1

    for c in "yzxy":
        u.add(c)
    assert list(u) == ["x", "y", "z"]
    assert u.index_of("z") == 2
    assert u.contains("y")

    assert u.remove("y")
    assert not u.contains("y")
    # should accept a removed element again
    assert u.add("y")
    assert list(u) == ["x", "z", "y"]


def test_unique_sequence_grows():
    u = UniqueSequence()
    for i in range(20):
        u.add(i)
        u.add(i)

    assert u.size() == 20
    assert u.capacity() == 32
    assert u.get(19) == 19
    with pytest.raises(IndexOutOfRangeError):
        u.get(20)
