from __future__ import annotations

import sys
from typing import Optional, TextIO

from loguru import logger

from lispy import SExpression, LispValue
from lispy.builtin.env_builtin import register
from lispy.config import FRAMES_PER_DEPTH, RECURSION_LIMIT_CAP
from lispy.errors import LispyDepthError, LispyError, LispySyntaxError
from lispy.evaluation.evaluator import evaluate
from lispy.printer import print_value
from lispy.reader.parser import CharStream, Reader
from lispy.runtime_context import RuntimeContext
from lispy.types.environment import Environment
from lispy.types.macro_environment import MacroEnvironment
from lispy.types.sentinel import Nil
from lispy.types.symbol import SymbolTable


class Interpreter:
    """
    Owns the interpreter state: one SymbolTable, one root Environment and the
    RuntimeContext threaded through evaluation. Definitions persist across calls.
    """

    def __init__(
        self,
        out: Optional[TextIO] = None,
        max_depth: Optional[int] = None,
        macros: Optional[MacroEnvironment] = None,
    ):
        self.symbols = SymbolTable()
        self.runtime = RuntimeContext(self.symbols, macros, out, max_depth)
        self.env = Environment()
        register(self.env, self.symbols)
        _reserve_host_stack(self.runtime.max_depth)

    @property
    def out(self) -> TextIO:
        return self.runtime.out

    def reader(self, source: TextIO | str | CharStream) -> Reader:
        return Reader(source, self.symbols)

    def read(self, code: str) -> Optional[SExpression]:
        """Parse the first top-level form of `code` (None if there is none)."""
        reader = self.reader(code)
        return _read_next(reader, reader.read_form)

    def evaluate(self, expr: SExpression) -> LispValue:
        """Evaluate one form in the root environment."""
        self.runtime.depth = 0
        try:
            return evaluate(expr, self.env, self.runtime)
        except RecursionError:
            raise LispyDepthError("evaluation depth exceeded (host stack)") from None

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`; return the last value, Nil for none."""
        result: LispValue = Nil
        reader = self.reader(code)
        while (expr := _read_next(reader, reader.read_form)) is not None:
            result = self.evaluate(expr)
        return result

    def run(self, source: TextIO | str, recover: bool = False, err: Optional[TextIO] = None) -> None:
        """Read-eval-print loop over `source` until end of input.

        Each result is printed to `out` followed by a newline. Errors propagate
        unless `recover` is set, in which case they are reported on `err` and
        the loop continues with the next form. (exit) always propagates.
        """
        chars = source if isinstance(source, CharStream) else CharStream(source)
        reader = self.reader(chars)
        err = err if err is not None else sys.stderr
        while True:
            try:
                expr = _read_next(reader, reader.read_form)
                if expr is None:
                    logger.debug("end of input at line {}", chars.line)
                    return
                logger.debug("line {}: evaluating form", chars.line)
                print_value(self.evaluate(expr), self.out)
                self.out.write("\n")
            except LispyError as exc:
                if not recover:
                    raise
                logger.opt(exception=exc).debug("recovered from error")
                err.write(f"error: {exc}\n")
                if isinstance(exc, LispySyntaxError):
                    chars.skip_line()


def _read_next(reader: Reader, read) -> Optional[SExpression]:
    try:
        return read()
    except RecursionError:
        raise reader.error("nesting too deep") from None


def _reserve_host_stack(max_depth: int) -> None:
    """Raise the interpreter recursion limit so `max_depth` levels fit; never lower it."""
    wanted = min(max_depth * FRAMES_PER_DEPTH + 1000, RECURSION_LIMIT_CAP)
    if wanted > sys.getrecursionlimit():
        logger.debug("recursion limit raised to {}", wanted)
        sys.setrecursionlimit(wanted)
