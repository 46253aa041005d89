from dataclasses import dataclass

import pytest

from codexkit.array import Array

TAROT_SIZE = 24
INT_SIZE = 4


@dataclass(frozen=True)
class Tarot:
    number: int
    original: str
    emulacrum: str


TOWER = Tarot(16, "The Tower", "Fractura")
FOOL = Tarot(0, "The Fool", "Zero")
STAR = Tarot(17, "The Star", "1337")
TEMPERANCE = Tarot(14, "Temperance", "Meridian")
PRIESTESS = Tarot(2, "High Priestess", "Reflexia Void")
MAGICIAN = Tarot(1, "The Magician", "The One")


def make(items, elem_size=TAROT_SIZE):
    arr = Array(elem_size)
    for item in items:
        arr.add(item)
    return arr


def form_array_1():
    return make([TOWER, FOOL, STAR])


def form_array_2():
    return make([TEMPERANCE, PRIESTESS, MAGICIAN])


def form_array_3():
    return make([0, 1337, 1], INT_SIZE)


def test_equals():
    a1, a2, a3 = form_array_1(), form_array_2(), form_array_3()
    a4, a5, a6 = form_array_1(), form_array_2(), form_array_3()

    assert a1.equals(a1) is True
    assert a1.equals(a2) is False
    assert a1.equals(a3) is False
    assert a1.equals(a4) is True

    assert a2.equals(a1) is False
    assert a2.equals(a2) is True
    assert a2.equals(a3) is False
    assert a2.equals(a5) is True

    assert a3.equals(a1) is False
    assert a3.equals(a2) is False
    assert a3.equals(a3) is True
    assert a3.equals(a6) is True


def test_equals_requires_same_elem_size():
    assert make([1, 2], 4).equals(make([1, 2], 8)) is False
    assert make([1, 2], 4) == make([1, 2], 4)


def test_sort():
    arr = make([TOWER, FOOL, STAR, TEMPERANCE, PRIESTESS, MAGICIAN])
    by_number = make([FOOL, MAGICIAN, PRIESTESS, TEMPERANCE, TOWER, STAR])
    by_original = make([PRIESTESS, TEMPERANCE, FOOL, MAGICIAN, STAR, TOWER])
    by_emulacrum = make([STAR, TOWER, TEMPERANCE, PRIESTESS, MAGICIAN, FOOL])

    assert arr.equals(by_number) is False
    arr.sort(key=lambda t: t.number)
    assert arr.equals(by_number) is True

    assert arr.equals(by_original) is False
    arr.sort(key=lambda t: t.original)
    assert arr.equals(by_original) is True

    assert arr.equals(by_emulacrum) is False
    arr.sort(key=lambda t: t.emulacrum)
    assert arr.equals(by_emulacrum) is True


def test_item_release_called_for_every_item():
    called = [False] * 5
    arr = Array(INT_SIZE, item_release=lambda n: called.__setitem__(n, True))
    for n in range(5):
        arr.add(n)
    arr.release()
    assert called == [True] * 5
    assert len(arr) == 0


def test_context_manager_releases():
    released = []
    with Array(INT_SIZE, item_release=released.append) as arr:
        arr.add(7)
        arr.add(9)
    assert released == [7, 9]


def test_add_none_stores_zero():
    arr = Array(INT_SIZE, zero=0)
    for n in range(4):
        arr.add(n)
    arr.add(None)
    for n in range(4):
        assert arr.get(n) == n
    assert arr.get(4) == 0


def test_set_none_stores_copy_of_zero():
    arr = Array(8, zero=[])
    arr.add([1])
    arr.add([2])
    arr.set(0, None)
    arr.set(1, None)
    assert arr.get(0) == []
    assert arr.get(0) is not arr.get(1)


def test_set_replaces_value():
    arr = make([1, 2, 3], INT_SIZE)
    arr.set(1, 42)
    assert list(arr) == [1, 42, 3]


def test_fast_remove_moves_last_into_place():
    arr = make([0, 1, 2, 3], INT_SIZE)
    arr.fast_remove(1)
    assert list(arr) == [0, 3, 2]
    arr.fast_remove(2)
    assert list(arr) == [0, 3]


def test_fast_remove_single_item():
    arr = make([5], INT_SIZE)
    arr.fast_remove(0)
    assert len(arr) == 0


@pytest.mark.parametrize("index", [3, -1, 100])
def test_out_of_bounds(index):
    arr = make([1, 2, 3], INT_SIZE)
    with pytest.raises(IndexError):
        arr.get(index)
    with pytest.raises(IndexError):
        arr.set(index, 0)
    with pytest.raises(IndexError):
        arr.fast_remove(index)


def test_grows_beyond_initial_capacity():
    arr = make(range(25), INT_SIZE)
    assert len(arr) == 25
    assert list(arr) == list(range(25))


def test_negative_elem_size_rejected():
    with pytest.raises(ValueError):
        Array(-1)