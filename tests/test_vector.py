import pytest

from oscalib.vector import ByteVector


def test_push_back_then_pop_back_round_trip():
    vec = ByteVector(16)
    vec.push_back(b"ab")
    vec.push_back(b"cd")
    assert vec.data == b"abcd"
    assert vec.pop_back() == b"cd"
    assert vec.data == b"ab"
    assert len(vec) == len(b"ab")


def test_only_one_pop_back_per_push():
    vec = ByteVector(16)
    vec.push_back(b"ab")
    vec.push_back(b"cd")
    assert vec.pop_back() == b"cd"
    assert vec.pop_back() is None
    assert vec.data == b"ab"


def test_push_front_prepends_and_pops():
    vec = ByteVector(16)
    vec.push_back(b"ab")
    vec.push_front(b"xy")
    assert vec.data == b"xyab"
    assert vec.pop_front() == b"xy"
    assert vec.data == b"ab"


def test_first_push_back_sets_front_size():
    vec = ByteVector(16)
    vec.push_back(b"abc")
    assert vec.pop_front() == b"abc"
    assert len(vec) == 0


def test_first_push_front_sets_back_size():
    vec = ByteVector(16)
    vec.push_front(b"abc")
    assert vec.pop_back() == b"abc"
    assert len(vec) == 0


def test_capacity_doubles_when_filled():
    vec = ByteVector(4)
    vec.push_back(b"ab")
    assert vec.capacity == 4
    vec.push_back(b"cd")
    assert vec.capacity == 8
    assert vec.data == b"abcd"


def test_growth_on_first_push_leaves_front_unknown():
    vec = ByteVector(2)
    vec.push_back(b"abc")
    assert vec.pop_front() is None
    assert vec.pop_back() == b"abc"


def test_capacity_always_holds_the_data():
    vec = ByteVector(1)
    for chunk in (b"a", b"bcdefgh", b"ijklmnopqrstuvwxyz"):
        vec.push_back(chunk)
        assert vec.capacity >= len(vec)
    assert vec.data == b"abcdefghijklmnopqrstuvwxyz"


def test_find_returns_byte_offset():
    vec = ByteVector(16)
    vec.push_back(b"hello")
    assert vec.find(b"ll") == 2
    assert vec.find(b"h") == 0


def test_find_missing_value():
    vec = ByteVector(16)
    vec.push_back(b"hello")
    assert vec.find(b"zz") is None


def test_find_in_empty_vector():
    assert ByteVector(8).find(b"a") is None


def test_empty_push_is_ignored():
    vec = ByteVector(8)
    vec.push_back(b"ab")
    vec.push_back(b"")
    vec.push_front(b"")
    assert vec.data == b"ab"
    assert vec.pop_back() == b"ab"


def test_destroy_empties_the_vector():
    vec = ByteVector(8)
    vec.push_back(b"ab")
    vec.destroy()
    assert len(vec) == 0
    assert vec.pop_back() is None
    assert vec.pop_front() is None
    vec.push_back(b"cd")
    assert vec.data == b""


def test_zero_capacity_is_rejected():
    with pytest.raises(ValueError):
        ByteVector(0)


def test_non_bytes_value_is_rejected():
    vec = ByteVector(8)
    with pytest.raises(TypeError):
        vec.push_back(5)


def test_pop_on_empty_vector():
    vec = ByteVector(8)
    assert vec.pop_back() is None
    assert vec.pop_front() is None