import pytest

from cityroutes.hashtable import HashTable, is_prime, next_prime


def test_is_prime_small_values():
    assert [n for n in range(1, 20) if is_prime(n)] == [2, 3, 5, 7, 11, 13, 17, 19]


@pytest.mark.parametrize("n", [1, 4, 10, 50, 100, 1000])
def test_next_prime_is_smallest_odd_prime_not_below(n):
    p = next_prime(n)
    assert p >= n
    assert is_prime(p)
    assert not any(is_prime(k) for k in range(n, p) if k % 2 == 1)


def test_next_prime_of_prime_is_itself():
    assert next_prime(101) == 101


def test_sample_size_from_usage():
    table = HashTable("ZZZ", 50)
    assert table.table_size == 53


def test_default_size():
    assert HashTable("ZZZ").table_size == 101


def test_insert_and_find():
    table = HashTable("ZZZ")
    table.insert("Boston")
    table.insert("Denver")
    assert table.find("Boston") == "Boston"
    assert table.find("Denver") == "Denver"
    assert table.find("Austin") == "ZZZ"
    assert "Boston" in table
    assert "Austin" not in table


def test_duplicate_insert_ignored():
    table = HashTable(-1, 10)
    table.insert(42)
    table.insert(42)
    assert len(table) == 1


def test_remove():
    table = HashTable("ZZZ", 7)
    for word in ["ab", "ba", "cd"]:
        table.insert(word)
    table.remove("ab")
    assert table.find("ab") == "ZZZ"
    assert table.find("ba") == "ba"
    assert len(table) == 2
    table.remove("missing")
    assert len(table) == 2


def test_anagrams_share_bucket():
    table = HashTable("ZZZ", 13)
    size = table.table_size
    assert table.hash("listen", size) == table.hash("silent", size)


def test_hash_in_range():
    table = HashTable(0, 20)
    size = table.table_size
    for key in ["", "a", "Chicago", 0, 5, -999, 123456]:
        assert 0 <= table.hash(key, size) < size


def test_negative_int_hash_matches_positive():
    table = HashTable(0)
    size = table.table_size
    assert table.hash(-37, size) == table.hash(37, size)


def test_hash_rejects_other_types():
    table = HashTable(0)
    with pytest.raises(TypeError):
        table.hash(1.5, table.table_size)


def test_make_empty():
    table = HashTable(-1, 5)
    for n in range(20):
        table.insert(n)
    assert len(table) == 20
    table.make_empty()
    assert len(table) == 0
    assert table.find(3) == -1


def test_copy_is_independent():
    table = HashTable("ZZZ")
    table.insert("x")
    duplicate = table.copy()
    duplicate.remove("x")
    duplicate.insert("y")
    assert "x" in table
    assert "y" not in table
    assert duplicate.find("x") == "ZZZ"
    assert duplicate.table_size == table.table_size