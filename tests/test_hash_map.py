import pytest

from mazealgos.hash_map import HashMap


def test_default_map_is_empty():
    h = HashMap()
    assert h.is_empty()
    assert len(h) == 0
    assert h.bucket_count() == 10


def test_insert_contains_at():
    h = HashMap()
    h.insert("one", 1)
    h.insert("two", 2)
    assert not h.is_empty()
    assert len(h) == 2
    assert "one" in h
    assert "two" in h
    assert h.at("one") == 1
    assert h.at("two") == 2


def test_overwrite_keeps_size():
    h = HashMap()
    h.insert("one", 1)
    h.insert("two", 2)
    h.insert("one", 11)
    assert len(h) == 2
    assert h.at("one") == 11


def test_subscript_access_and_assignment():
    h = HashMap()
    h.insert("one", 1)
    h.insert("two", 2)
    assert h["two"] == 2
    h["two"] = 22
    assert h["two"] == 22
    h["three"] = 3
    assert len(h) == 3
    assert h.at("three") == 3


def test_get_or_insert_inserts_default():
    h = HashMap()
    assert h.get_or_insert("missing", 0) == 0
    assert "missing" in h
    assert len(h) == 1
    h["missing"] = 5
    assert h.get_or_insert("missing", 0) == 5
    assert len(h) == 1


def test_erase():
    h = HashMap([("one", 1), ("two", 2), ("three", 3)])
    assert h.erase("two")
    assert "two" not in h
    assert len(h) == 2
    assert not h.erase("twenty")
    assert len(h) == 2


def test_missing_key_raises():
    h = HashMap([("one", 1)])
    with pytest.raises(KeyError):
        h.at("hundred")
    with pytest.raises(KeyError):
        h["hundred"]


def test_initializer_and_clear():
    m2 = HashMap([(10, 100), (20, 200), (30, 300)])
    assert len(m2) == 3
    assert m2.at(10) == 100
    assert m2.at(20) == 200
    assert m2.at(30) == 300
    m2.clear()
    assert m2.is_empty()
    assert len(m2) == 0


def test_mapping_initializer():
    m = HashMap({"a": 1, "b": 2})
    assert dict(m.items()) == {"a": 1, "b": 2}


def test_small_bucket_count_holds_values():
    mh = HashMap(bucket_count=2)
    mh.insert(1, 1)
    mh.insert(2, 4)
    mh.insert(3, 9)
    for i in range(1, 4):
        assert i in mh
        assert mh.at(i) == i * i


def test_copy_is_independent():
    mh = HashMap(bucket_count=2)
    for i in range(1, 4):
        mh.insert(i, i * i)
    clone = mh.copy()
    assert len(clone) == len(mh)
    for i in range(1, 4):
        assert clone.at(i) == mh.at(i)
    clone[1] = 100
    assert mh.at(1) == 1


def test_load_factor_and_rehash():
    m = HashMap(bucket_count=10)
    for i in range(20):
        m.insert(i, i * i)
    assert m.bucket_count() == 10
    assert len(m) == 20
    assert m.load_factor() == 2.0

    m.insert(20, 200)
    assert len(m) == 21
    assert m.load_factor() <= 2.0
    assert m.bucket_count() > 10
    for i in range(20):
        assert m.at(i) == i * i
    assert m.at(20) == 200


def test_iteration_yields_every_key_once():
    m = HashMap((i, str(i)) for i in range(30))
    assert sorted(m) == list(range(30))
    assert sorted(m.items()) == [(i, str(i)) for i in range(30)]


def test_str_format():
    m = HashMap([("k", 1)])
    assert str(m) == '{"k": 1}'
    assert str(HashMap()) == "{}"


def test_invalid_bucket_count():
    with pytest.raises(ValueError):
        HashMap(bucket_count=0)