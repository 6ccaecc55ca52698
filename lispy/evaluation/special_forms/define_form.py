from lispy import SExpression, LispValue
from lispy.errors import LispyArityError, LispyTypeError
from lispy.evaluation.evaluator import evaluate
from lispy.runtime_context import RuntimeContext
from lispy.types.cons import to_list
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol


def define_form(tail: SExpression, env: Environment, runtime: RuntimeContext) -> LispValue:
    """
    (define name value)
    Binds in the current frame, shadowing any outer binding, and returns the value.
    """
    args = to_list(tail)
    if len(args) != 2:
        raise LispyArityError("malformed define")

    name, val_expr = args
    if not isinstance(name, Symbol):
        raise LispyTypeError("malformed define: name must be a symbol")
    value = evaluate(val_expr, env, runtime)
    env.define(name, value)
    return value
