from lispy import SExpression, LispValue
from lispy.errors import LispyArityError, LispyTypeError
from lispy.runtime_context import RuntimeContext
from lispy.types.closure import Closure
from lispy.types.cons import Cons, is_list, to_list
from lispy.types.environment import Environment
from lispy.types.sentinel import Nil
from lispy.types.symbol import Symbol


def _parse_params(params: SExpression) -> list[Symbol]:
    result = []
    while params is not Nil:
        if not isinstance(params, Cons):
            raise LispyTypeError("parameter list is not a flat list")
        if not isinstance(params.first, Symbol):
            raise LispyTypeError("parameter must be a symbol")
        result.append(params.first)
        params = params.rest
    return result


def lambda_form(tail: SExpression, env: Environment, runtime: RuntimeContext) -> LispValue:
    # (lambda (params) body...) needs at least one body form; several forms
    # form an implicit progn.
    if not isinstance(tail, Cons) or not is_list(tail.first) or not isinstance(tail.rest, Cons):
        raise LispyArityError("malformed lambda")

    params = _parse_params(tail.first)
    body_forms = to_list(tail.rest)
    return Closure(params, body_forms, env)
