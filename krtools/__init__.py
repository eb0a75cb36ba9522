"""Small text tools: counting filters, tables, word and keyword tallies, a symbol table, a mini printf and cat."""

__version__ = "0.1.0"