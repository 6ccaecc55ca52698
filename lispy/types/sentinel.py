from __future__ import annotations


class Sentinel:
    """Process-wide marker value; compared by identity only."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return self.name


# Empty list and false
Nil = Sentinel("Nil")
# Canonical true, printed as `t`
TRUE = Sentinel("True")
# Reader-internal markers; never visible outside list parsing and the driver
Dot = Sentinel("Dot")
RightParen = Sentinel("RightParen")
