from lispy import SExpression, LispValue
from lispy.errors import LispyArityError, LispyTypeError, LispyUnboundVariable
from lispy.evaluation.evaluator import evaluate
from lispy.runtime_context import RuntimeContext
from lispy.types.cons import to_list
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol


def set_form(tail: SExpression, env: Environment, runtime: RuntimeContext) -> LispValue:
    args = to_list(tail)
    if len(args) != 2:
        raise LispyArityError("malformed setvalue: (setvalue var value)")
    var_sym, val_expr = args
    if not isinstance(var_sym, Symbol):
        raise LispyTypeError("malformed setvalue: first argument must be a symbol")
    # The target must already be bound before the value is evaluated
    binding = env.find_binding(var_sym)
    if binding is None:
        raise LispyUnboundVariable(f"unbound variable: {var_sym}")
    value = evaluate(val_expr, env, runtime)
    binding.value = value
    return value
