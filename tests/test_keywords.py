import io
import sys

from krtools.keywords import (
    Key,
    binsearch,
    binsearch_key,
    count_keywords,
    format_counts,
    main,
    make_keytab,
)


def test_keytab_is_sorted_and_unique():
    words = [k.word for k in make_keytab()]
    assert words == sorted(set(words))
    assert len(words) == 32


def test_keytab_starts_with_zero_counts():
    assert all(k.count == 0 for k in make_keytab())


def test_keytab_is_fresh_each_call():
    first = make_keytab()
    first[0].count = 7
    assert make_keytab()[0].count == 0


def test_binsearch_finds_every_keyword():
    table = make_keytab()
    for i, key in enumerate(table):
        assert binsearch(key.word, table) == i


def test_binsearch_missing_words():
    table = make_keytab()
    assert binsearch("main", table) is None
    assert binsearch("aaa", table) is None
    assert binsearch("zzz", table) is None
    assert binsearch("int", []) is None


def test_binsearch_key_returns_table_entry():
    table = make_keytab()
    key = binsearch_key("struct", table)
    assert key is table[binsearch("struct", table)]
    assert binsearch_key("printf", table) is None


def test_count_keywords_counts_occurrences():
    text = " ".join(["while"] * 5 + ["int"] * 2 + ["foo"])
    table = count_keywords(io.StringIO(text))
    counts = {k.word: k.count for k in table if k.count}
    assert counts == {"int": 2, "while": 5}


def test_format_counts_layout():
    table = [Key("int", 3), Key("long", 0), Key("while", 12)]
    assert format_counts(table) == "   3 int\n  12 while\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("int i; if (i) return i;"))
    assert main([]) == 0
    assert capsys.readouterr().out == "   1 if\n   1 int\n   1 return\n"