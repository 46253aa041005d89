from functools import cmp_to_key

from codexkit.comparator import identity_compare, str_compare, uint16_compare

WORDS = ["Emulacrum", "Zero", "Reflexia", "TheMainframe", "4by55", "Anatta", "Maya"]
SORTED_WORDS = ["4by55", "Anatta", "Emulacrum", "Maya", "Reflexia", "TheMainframe", "Zero"]


def test_str_compare_orders_like_builtin_sort():
    for lhs, rhs in zip(SORTED_WORDS, SORTED_WORDS[1:]):
        assert str_compare(lhs, rhs) < 0
        assert str_compare(rhs, lhs) > 0
    assert sorted(WORDS, key=cmp_to_key(str_compare)) == SORTED_WORDS


def test_str_compare_equal_strings():
    assert str_compare("Zero", "Zero") == 0


def test_str_compare_antisymmetric():
    for a in WORDS:
        for b in WORDS:
            assert str_compare(a, b) == -str_compare(b, a)


def test_uint16_compare_orders_numbers():
    ordered = [0, 1, 2, 14, 16, 17, 1337, 7331]
    for lhs, rhs in zip(ordered, ordered[1:]):
        assert uint16_compare(lhs, rhs) == -1
        assert uint16_compare(rhs, lhs) == 1
    numbers = [16, 0, 17, 14, 2, 1, 1337, 7331]
    assert sorted(numbers, key=cmp_to_key(uint16_compare)) == ordered


def test_uint16_compare_wraps_to_sixteen_bits():
    assert uint16_compare(65536, 0) == 0


def test_uint16_compare_antisymmetric():
    assert uint16_compare(1337, 7331) == -uint16_compare(7331, 1337)
    assert uint16_compare(7331, 7331) == 0


def test_identity_compare_same_object():
    item = ["x"]
    assert identity_compare(item, item) == 0


def test_identity_compare_distinct_equal_objects():
    a = ["x"]
    b = ["x"]
    assert identity_compare(a, b) in (-1, 1)
    assert identity_compare(a, b) == -identity_compare(b, a)