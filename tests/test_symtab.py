import pytest

from krtools.symtab import HASHSIZE, SymbolTable, hash_name, main


def test_hash_in_range_and_stable():
    names = ["foo", "bar", "baz", "", "a" * 300, "naïve"]
    for name in names:
        h = hash_name(name)
        assert 0 <= h < HASHSIZE
        assert hash_name(name) == h


def test_hash_of_empty_name_is_zero():
    assert hash_name("") == 0


def test_hash_with_single_bucket():
    assert {hash_name(n, 1) for n in ["x", "yy", "zzz"]} == {0}


def test_hash_rejects_bad_size():
    with pytest.raises(ValueError):
        hash_name("foo", 0)


def test_install_and_lookup():
    table = SymbolTable()
    entry = table.install("foo", "first definition")
    assert table.lookup("foo") is entry
    assert entry.defn == "first definition"
    assert table.lookup("baz") is None


def test_install_replaces_definition():
    table = SymbolTable()
    first = table.install("foo", "first definition")
    second = table.install("foo", "updated definition")
    assert second is first
    assert table.lookup("foo").defn == "updated definition"
    assert len(table) == 1


def test_contains_and_len():
    table = SymbolTable()
    table.install("foo", "1")
    table.install("bar", "2")
    assert "foo" in table
    assert "baz" not in table
    assert 42 not in table
    assert len(table) == 2


def test_collisions_in_one_bucket():
    table = SymbolTable(size=1)
    names = [f"name{i}" for i in range(20)]
    for name in names:
        table.install(name, name.upper())
    assert len(table) == len(names)
    assert all(table.lookup(n).defn == n.upper() for n in names)


def test_table_rejects_bad_size():
    with pytest.raises(ValueError):
        SymbolTable(0)


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "foo => updated definition",
        "bar => second definition",
        "baz not found",
    ]