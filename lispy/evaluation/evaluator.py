"""Core evaluator for the lispy interpreter.

Consults the macro hook, resolves the operator of an application form and
hands the unevaluated arguments to the application engine. Evaluation recurses
on the Python stack; RuntimeContext.nested() bounds the depth.
"""

from __future__ import annotations

from lispy import SExpression, LispValue
from lispy.errors import LispyEvaluationError, LispyNotCallable
from lispy.evaluation.apply import apply
from lispy.printer import to_str
from lispy.runtime_context import RuntimeContext
from lispy.types.closure import Closure
from lispy.types.cons import Cons, iter_list
from lispy.types.environment import Environment
from lispy.types.native import Native
from lispy.types.sentinel import Nil, Sentinel
from lispy.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment, runtime: RuntimeContext) -> LispValue:
    match expr:
        case Symbol():
            return env.lookup(expr)

        case Cons():
            with runtime.nested():
                expanded = runtime.macros.expand(expr, env)
                if expanded is not expr:
                    return evaluate(expanded, env, runtime)

                fn = evaluate(expr.first, env, runtime)
                if not isinstance(fn, (Native, Closure)):
                    raise LispyNotCallable(f"head must be callable: {to_str(fn)}")
                return apply(fn, expr.rest, env, runtime, evaluate)

        case bool():
            raise LispyEvaluationError(f"Cannot evaluate {expr!r}")

        # --- Atoms return as-is ---
        case int() | Native() | Closure() | Sentinel():
            return expr

    raise LispyEvaluationError(f"Cannot evaluate {expr!r}")


def progn(forms: SExpression, env: Environment, runtime: RuntimeContext) -> LispValue:
    """Evaluate each form of a list in order and return the last value (Nil if none)."""
    result: LispValue = Nil
    for form in iter_list(forms):
        result = evaluate(form, env, runtime)
    return result


def eval_list(forms: SExpression, env: Environment, runtime: RuntimeContext) -> list[LispValue]:
    """Evaluate every element of a list, left to right."""
    return [evaluate(form, env, runtime) for form in iter_list(forms)]
