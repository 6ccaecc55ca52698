from io import StringIO

import pytest

from lispy.interpreter import Interpreter
from lispy.printer import to_str
from lispy.types.symbol import SymbolTable


@pytest.fixture
def symbols():
    """A fresh symbol table for each test."""
    return SymbolTable()


@pytest.fixture
def interp():
    """An interpreter whose println output is captured in a StringIO."""
    return Interpreter(out=StringIO())


@pytest.fixture
def run(interp):
    """Evaluate source in the shared interpreter and return the printed result."""
    def _run(code: str) -> str:
        return to_str(interp.eval(code))
    return _run
