from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

from lispy.config import get_max_depth
from lispy.errors import LispyDepthError
from lispy.types.macro_environment import MacroEnvironment
from lispy.types.symbol import SymbolTable


class RuntimeContext:
    """Interpreter state threaded explicitly through evaluation.

    One instance exists per Interpreter; nothing here is module-global.
    """

    __slots__ = ("symbols", "macros", "out", "max_depth", "depth")

    def __init__(
        self,
        symbols: Optional[SymbolTable] = None,
        macros: Optional[MacroEnvironment] = None,
        out: Optional[TextIO] = None,
        max_depth: Optional[int] = None,
    ):
        self.symbols: SymbolTable = symbols if symbols is not None else SymbolTable()
        self.macros: MacroEnvironment = macros if macros is not None else MacroEnvironment()
        self.out: TextIO = out if out is not None else sys.stdout
        self.max_depth: int = max_depth if max_depth is not None else get_max_depth()
        self.depth: int = 0

    @contextmanager
    def nested(self) -> Iterator[None]:
        """Account for one level of evaluation nesting."""
        if self.depth >= self.max_depth:
            raise LispyDepthError(f"evaluation depth exceeded ({self.max_depth})")
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1
