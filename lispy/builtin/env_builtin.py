"""Built-in functions for the lispy runtime environment.

This module defines the primitives that evaluate all of their arguments
(list, +, =, println, exit) and the registration helper that installs them,
together with the special forms and the constant `t`, into a root environment.
"""
from __future__ import annotations

from loguru import logger

from lispy import SExpression, LispValue
from lispy.errors import LispyArityError, LispyExit, LispyTypeError
from lispy.evaluation.evaluator import eval_list
from lispy.evaluation.special_forms import SPECIAL_FORMS
from lispy.printer import print_value
from lispy.runtime_context import RuntimeContext
from lispy.types.cons import list_length, make_list
from lispy.types.environment import Environment
from lispy.types.native import Native
from lispy.types.sentinel import Nil, TRUE
from lispy.types.symbol import SymbolTable


def _is_integer(value: LispValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def list_builtin(tail: SExpression, env: Environment, runtime: RuntimeContext) -> LispValue:
    """(list expr ...) evaluates every argument into a fresh proper list."""
    return make_list(eval_list(tail, env, runtime))


def add(tail: SExpression, env: Environment, runtime: RuntimeContext) -> LispValue:
    """Return the sum of all arguments; (+) is 0."""
    total = 0
    for value in eval_list(tail, env, runtime):
        if not _is_integer(value):
            raise LispyTypeError("+ takes only numbers")
        total += value
    return total


def equals(tail: SExpression, env: Environment, runtime: RuntimeContext) -> LispValue:
    """(= a b) is t when both integers are equal, else ()."""
    if list_length(tail) != 2:
        raise LispyArityError("malformed =")
    x, y = eval_list(tail, env, runtime)
    if not _is_integer(x) or not _is_integer(y):
        raise LispyTypeError("= only takes numbers")
    return TRUE if x == y else Nil


def println(tail: SExpression, env: Environment, runtime: RuntimeContext) -> LispValue:
    if list_length(tail) != 1:
        raise LispyArityError("malformed println")
    (value,) = eval_list(tail, env, runtime)
    print_value(value, runtime.out)
    runtime.out.write("\n")
    return Nil


def exit_builtin(tail: SExpression, env: Environment, runtime: RuntimeContext) -> LispValue:
    if tail is not Nil:
        raise LispyArityError("malformed exit")
    logger.debug("exit requested")
    raise LispyExit(0)


BUILTINS = {
    "list": list_builtin,
    "+": add,
    "=": equals,
    "println": println,
    "exit": exit_builtin,
}


def register(env: Environment, symbols: SymbolTable) -> None:
    """Register all special forms, builtin functions and constants into `env`."""
    natives = {**SPECIAL_FORMS, **BUILTINS}
    env.update({symbols.intern(name): Native(name, fn) for name, fn in natives.items()})
    env.define(symbols.intern("t"), TRUE)
    logger.debug("registered {} primitives", len(natives))
