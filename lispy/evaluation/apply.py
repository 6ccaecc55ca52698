"""Application engine for lispy.

- Natives receive the unevaluated argument list and the calling environment.
- Closures get their arguments evaluated in the calling environment and run
  their body in a new frame whose parent is the captured environment.
"""

from __future__ import annotations

from lispy import LispValue, SExpression, EvaluatorFn
from lispy.errors import LispyNotCallable
from lispy.runtime_context import RuntimeContext
from lispy.types.closure import Closure
from lispy.types.cons import to_list
from lispy.types.environment import Environment
from lispy.types.native import Native
from lispy.types.sentinel import Nil


def apply_closure(
    fn: Closure,
    arg_forms: list[SExpression],
    env: Environment,
    runtime: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Call-by-value application of a Closure; the body is an implicit progn."""
    values = [evaluate_fn(arg, env, runtime) for arg in arg_forms]
    new_env = fn.extend_env(values)
    result: LispValue = Nil
    for form in fn.body:
        result = evaluate_fn(form, new_env, runtime)
    return result


def apply(
    fn: Native | Closure | object,
    args: SExpression,
    env: Environment,
    runtime: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Native or a Closure to an unevaluated argument list.

    Raises LispyEvaluationError if `args` is not a proper list, and
    LispyNotCallable for anything that is not a function.
    """
    arg_forms = to_list(args, "arguments must be a list")
    if isinstance(fn, Native):
        return fn.fn(args, env, runtime)
    if isinstance(fn, Closure):
        return apply_closure(fn, arg_forms, env, runtime, evaluate_fn)
    raise LispyNotCallable(f"Cannot apply non-function {fn!r}")
