"""
  Lisp Reader

- Character-at-a-time reading from any text stream; blocks on the stream
  when a token needs more input.
- One S-expression per read() call:

    - integers -> int
    - symbols -> Symbol (interned through the SymbolTable)
    - lists -> Cons chains ending in Nil
    - dotted lists -> Cons chains ending in the tail value
    - () -> Nil
    - 'expr -> (quote expr)
    - `)` and `.` -> the RightParen / Dot markers, consumed by list parsing
    - end of input -> None
"""

from __future__ import annotations

import string
from io import StringIO
from typing import Iterator, Optional, TextIO

from lispy import SExpression
from lispy.config import SYMBOL_MAX_LEN
from lispy.errors import LispySyntaxError
from lispy.reader.reader_macros import ReaderMacros, default_reader_macros
from lispy.types.cons import make_list
from lispy.types.sentinel import Dot, Nil, RightParen
from lispy.types.symbol import SymbolTable

_WHITESPACE = frozenset(" \t\r\n")
_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_SYMBOL_START = _LETTERS | frozenset("+=!@#$%^&*")
_SYMBOL_CHARS = _LETTERS | _DIGITS | {"-"}


class CharStream:
    """One character of lookahead over a text stream, with line tracking."""

    def __init__(self, source: TextIO | str):
        if isinstance(source, str):
            source = StringIO(source)
        self.source = source
        self.line = 1
        self._peeked: Optional[str] = None

    def peek(self) -> str:
        """Next character without consuming it; "" at end of input."""
        if self._peeked is None:
            self._peeked = self.source.read(1)
        return self._peeked

    def next(self) -> str:
        c = self.peek()
        self._peeked = None
        if c == "\n":
            self.line += 1
        return c

    def skip_line(self) -> None:
        """Consume through the end of the current line (LF, CR or CR LF)."""
        while True:
            c = self.next()
            if c == "" or c == "\n":
                return
            if c == "\r":
                if self.peek() == "\n":
                    self.next()
                return


class Reader:
    def __init__(
        self,
        source: TextIO | str | CharStream,
        symbols: SymbolTable,
        macros: Optional[ReaderMacros] = None,
    ):
        self.chars = source if isinstance(source, CharStream) else CharStream(source)
        self.symbols = symbols
        self.macros = macros if macros is not None else default_reader_macros()

    def error(self, message: str) -> LispySyntaxError:
        return LispySyntaxError(message, self.chars.line)

    def read(self) -> Optional[SExpression]:
        """Read one expression, a RightParen/Dot marker, or None at end of input."""
        while True:
            c = self.chars.next()
            if c == "":
                return None
            if c in _WHITESPACE:
                continue
            if c == ";":
                self.chars.skip_line()
                continue
            if c == "(":
                return self._read_list()
            if c == ")":
                return RightParen
            if c == ".":
                return Dot
            if self.macros.is_macro(c):
                return self.macros.dispatch(c, self)
            if c in _DIGITS:
                return self._read_number(int(c))
            if c == "-":
                # A bare "-" reads as 0
                return -self._read_number(0)
            if c in _SYMBOL_START:
                return self._read_symbol(c)
            raise self.error(f"unknown character: {c!r}")

    def read_form(self) -> Optional[SExpression]:
        """Top-level read: markers are errors here, None means end of input."""
        obj = self.read()
        if obj is RightParen:
            raise self.error("stray parenthesis")
        if obj is Dot:
            raise self.error("stray dot")
        return obj

    def read_datum(self, after: str) -> SExpression:
        """Read one complete expression that must follow `after`."""
        obj = self.read()
        if obj is None:
            raise self.error(f"unexpected end of input after {after}")
        if obj is RightParen:
            raise self.error("stray parenthesis")
        if obj is Dot:
            raise self.error("stray dot")
        return obj

    def __iter__(self) -> Iterator[SExpression]:
        while (expr := self.read_form()) is not None:
            yield expr

    def _read_list(self) -> SExpression:
        obj = self.read()
        if obj is None:
            raise self.error("unclosed parenthesis")
        if obj is Dot:
            raise self.error("stray dot")
        if obj is RightParen:
            return Nil

        items = [obj]
        while True:
            obj = self.read()
            if obj is None:
                raise self.error("unclosed parenthesis")
            if obj is RightParen:
                return make_list(items)
            if obj is Dot:
                tail = self.read()
                if tail is None:
                    raise self.error("unclosed parenthesis")
                if tail is RightParen or tail is Dot:
                    raise self.error("malformed dotted list")
                closing = self.read()
                if closing is None:
                    raise self.error("unclosed parenthesis")
                if closing is not RightParen:
                    raise self.error("malformed dotted list")
                return make_list(items, tail)
            items.append(obj)

    def _read_number(self, value: int) -> int:
        while self.chars.peek() in _DIGITS:
            value = value * 10 + int(self.chars.next())
        return value

    def _read_symbol(self, first: str) -> SExpression:
        buf = [first]
        while self.chars.peek() in _SYMBOL_CHARS:
            if len(buf) >= SYMBOL_MAX_LEN:
                raise self.error("symbol too long")
            buf.append(self.chars.next())
        return self.symbols.intern("".join(buf))
