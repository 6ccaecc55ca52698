from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from lispy import SExpression
from lispy.types.cons import make_list

if TYPE_CHECKING:
    from lispy.reader.parser import Reader

ReaderMacroFn = Callable[["Reader"], SExpression]


class ReaderMacros:
    """
    Registry of reader macros: single dispatch characters mapped to handlers
    that consume what follows from the Reader and return the resulting form.
    """

    def __init__(self):
        self.macros: dict[str, ReaderMacroFn] = {}

    def define(self, char: str, fn: ReaderMacroFn) -> None:
        """Register a reader macro for a given character."""
        if len(char) != 1:
            raise ValueError(f"Reader macros dispatch on one character, got {char!r}")
        self.macros[char] = fn

    def is_macro(self, char: str) -> bool:
        return char in self.macros

    def dispatch(self, char: str, reader: Reader) -> SExpression:
        if char not in self.macros:
            raise ValueError(f"No reader macro defined for {char!r}")
        return self.macros[char](reader)


def read_quote(reader: Reader) -> SExpression:
    """'expr => (quote expr)"""
    expr = reader.read_datum("quote")
    return make_list([reader.symbols.intern("quote"), expr])


def default_reader_macros() -> ReaderMacros:
    macros = ReaderMacros()
    macros.define("'", read_quote)
    return macros
