from lispy import SExpression, LispValue
from lispy.errors import LispyArityError
from lispy.evaluation.evaluator import evaluate, progn
from lispy.runtime_context import RuntimeContext
from lispy.types.cons import list_length
from lispy.types.environment import Environment
from lispy.types.sentinel import Nil


def if_form(tail: SExpression, env: Environment, runtime: RuntimeContext) -> LispValue:
    """(if cond then else...) where every form after `then` is an implicit progn."""
    if list_length(tail) < 2:
        raise LispyArityError("malformed if")

    cond = evaluate(tail.first, env, runtime)
    # Anything but Nil is true
    if cond is not Nil:
        return evaluate(tail.rest.first, env, runtime)
    return progn(tail.rest.rest, env, runtime)
