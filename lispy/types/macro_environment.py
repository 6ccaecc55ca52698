from __future__ import annotations

from lispy import SExpression
from lispy.types.environment import Environment


class MacroEnvironment:
    """
    Expansion hook consulted by the evaluator before every application form.

    The stock hook rewrites nothing: `expand` hands back the very form it was
    given, and the evaluator carries on with ordinary application. A subclass
    that returns a different object makes the evaluator evaluate that object
    instead.
    """

    def expand(self, form: SExpression, env: Environment) -> SExpression:
        return form
