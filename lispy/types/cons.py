"""Pairs and the list helpers built on them."""

from __future__ import annotations

from typing import Iterable, Iterator

from lispy import LispValue
from lispy.errors import LispyEvaluationError
from lispy.types.sentinel import Nil


class Cons:
    __slots__ = ("first", "rest")

    def __init__(self, first: LispValue, rest: LispValue = Nil):
        self.first = first
        self.rest = rest

    def __repr__(self):
        return f"Cons({self.first!r}, {self.rest!r})"


def is_list(obj: LispValue) -> bool:
    """True for Nil or a Cons; says nothing about the tail."""
    return obj is Nil or isinstance(obj, Cons)


def make_list(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a list from items, ending in `tail` (Nil for a proper list)."""
    values = list(items)
    result = tail
    for item in reversed(values):
        result = Cons(item, result)
    return result


def iter_list(lst: LispValue, message: str = "cannot handle dotted list") -> Iterator[LispValue]:
    """Yield the elements of a proper list; raise on a dotted tail."""
    while lst is not Nil:
        if not isinstance(lst, Cons):
            raise LispyEvaluationError(message)
        yield lst.first
        lst = lst.rest


def to_list(lst: LispValue, message: str = "cannot handle dotted list") -> list[LispValue]:
    return list(iter_list(lst, message))


def list_length(lst: LispValue) -> int:
    length = 0
    for _ in iter_list(lst):
        length += 1
    return length
