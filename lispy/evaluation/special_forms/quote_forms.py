from lispy import SExpression, LispValue
from lispy.errors import LispyArityError
from lispy.runtime_context import RuntimeContext
from lispy.types.cons import to_list
from lispy.types.environment import Environment


def quote_form(tail: SExpression, env: Environment, runtime: RuntimeContext) -> LispValue:
    """(quote expr) returns expr unevaluated."""
    args = to_list(tail)
    if len(args) != 1:
        raise LispyArityError("malformed quote")
    return args[0]
