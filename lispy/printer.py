"""Canonical text form of lispy values.

Integers print in decimal, lists in parentheses, symbols by name. Natives and
closures print as opaque placeholders that cannot be read back.
"""

from __future__ import annotations

from io import StringIO
from typing import TextIO

from lispy import LispValue
from lispy.errors import LispyInternalError
from lispy.types.closure import Closure
from lispy.types.cons import Cons
from lispy.types.native import Native
from lispy.types.sentinel import Nil, TRUE, Sentinel
from lispy.types.symbol import Symbol


def print_value(value: LispValue, out: TextIO) -> None:
    if isinstance(value, bool):
        raise LispyInternalError(f"Unknown value: {value!r}")
    if isinstance(value, int):
        out.write(str(value))
    elif isinstance(value, Cons):
        out.write("(")
        while True:
            print_value(value.first, out)
            if value.rest is Nil:
                break
            if not isinstance(value.rest, Cons):
                out.write(" . ")
                print_value(value.rest, out)
                break
            out.write(" ")
            value = value.rest
        out.write(")")
    elif isinstance(value, Symbol):
        out.write(value.name)
    elif isinstance(value, Native):
        out.write("<primitive>")
    elif isinstance(value, Closure):
        out.write("<function>")
    elif value is Nil:
        out.write("()")
    elif value is TRUE:
        out.write("t")
    elif isinstance(value, Sentinel):
        raise LispyInternalError(f"Unknown sentinel: {value!r}")
    else:
        raise LispyInternalError(f"Unknown value: {value!r}")


def to_str(value: LispValue) -> str:
    with StringIO() as buffer:
        print_value(value, buffer)
        return buffer.getvalue()
