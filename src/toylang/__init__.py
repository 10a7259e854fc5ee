"""Toylang: a parser-combinator front end for a small imperative language."""

__version__ = "0.1.0"
