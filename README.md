# krtools

Small, classic text-processing tools, usable from the command line and as a
Python library. No third-party dependencies.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line tools

All tools except `kr-cat` read standard input (where they read anything) and
write to standard output.

| Command          | What it does |
|------------------|--------------|
| `kr-count MODE`  | `MODE` is one of `hello`, `copy`, `chars`, `lines`, `words`, `classes`. `hello` prints `hello, world`; `copy` copies input to output; `chars` and `lines` print a count; `words` prints lines, words and characters; `classes` prints per-digit counts, white space and other characters. |
| `kr-power`       | Prints `i 2^i (-3)^i` for `i` from 0; `--rows N` sets the number of rows (default 10). |
| `kr-temperature` | Prints a Fahrenheit to Celsius table. `--lower`, `--upper`, `--step` (defaults 0, 300, 20) and `--style` one of `int`, `wide`, `float`, `const`. |
| `kr-longest`     | Prints the first longest line of its input; `--limit` sets the line buffer size (default 1000). |
| `kr-keywords`    | Counts C keywords in its input and prints `count keyword` for each one seen. |
| `kr-wordtree`    | Counts every word that starts with a letter and prints them in sorted order. |
| `kr-symtab`      | Installs `foo` and `bar`, redefines `foo`, and prints the lookups of `foo`, `bar` and `baz`. |
| `kr-runsum`      | Reads numbers and prints the running total after each, to two decimals; stops at the first thing that is not a number. |
| `kr-cat [FILE...]` | Concatenates the named files, or standard input when none are given, to standard output. |

Examples:

```
kr-count words < essay.txt
kr-keywords < program.c
kr-wordtree < essay.txt
printf '1 2.5 3\n' | kr-runsum
kr-cat first.txt second.txt
```

`kr-cat` copies files in order; on a file it cannot open it prints
`krcat: can't open NAME` to standard error and exits with status 1. A failure
writing standard output exits with status 2.

## Library use

```python
import io

from krtools.counting import count_words
from krtools.keywords import count_keywords, format_counts
from krtools.wordtree import build_tree, tree_lines
from krtools.symtab import SymbolTable
from krtools.minprintf import minformat
from krtools.power import power

counts = count_words("hello, world\n")      # WordCount(lines=1, words=2, chars=13)

table = count_keywords(io.StringIO("int main(void) { return 0; }"))
print(format_counts(table), end="")

root = build_tree(io.StringIO("now is the time for all good men"))
for line in tree_lines(root):
    print(line)

symbols = SymbolTable()
symbols.install("foo", "first definition")
symbols.install("foo", "updated definition")
print(symbols.lookup("foo").defn)   # updated definition
print("baz" in symbols)             # False

print(minformat("%d items, %s%%", 3, "done"))   # 3 items, done%
print(power(-3, 3))                 # -27
```

The modules:

- `krtools.counting` – `count_chars`, `count_lines`, `count_words` (returns
  `WordCount`), `classify_chars` (returns `CharClasses`), their formatters,
  `greeting` and `copy_stream`.
- `krtools.power` – `power` and `power2` (both return 0 for a negative
  exponent) and `power_table`.
- `krtools.temperature` – `celsius_int` (integer, truncating toward zero),
  `celsius`, `integer_table` and `float_table`.
- `krtools.lines` – `read_line` (bounded, keeps the newline), `iter_lines` and
  `longest_line`.
- `krtools.words` – `WordReader`, a word tokenizer with `getch`/`ungetch`
  push-back (raising `PushbackOverflow` when full), and `iter_words`.
- `krtools.keywords` – `Key`, `make_keytab`, `binsearch`, `binsearch_key`,
  `count_keywords` and `format_counts`.
- `krtools.wordtree` – `TreeNode`, `addtree`, `walk` (in-order), `tree_lines`
  and `build_tree`.
- `krtools.symtab` – `hash_name`, `Entry` and `SymbolTable` with `lookup`,
  `install`, `in` and `len`.
- `krtools.fileio` – `filecopy`, `fputs` and `getline` on streams.
- `krtools.minprintf` – `minformat` and `minprintf` for `%d`, `%f`, `%s` and
  `%%`; other conversions are copied through as written.
- `krtools.runsum` – `running_sums`, a generator of running totals.
- `krtools.cat` – `cat` and `CatError`.

## Limits

The symbol table lives in memory only; nothing is saved between runs, and
`kr-symtab` only demonstrates it with fixed names. Keyword counting knows the
32 C keywords and does not skip comments or string literals.