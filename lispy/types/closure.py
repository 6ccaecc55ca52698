"""Closure representation and argument binding for lispy."""

from __future__ import annotations

from lispy import SExpression, LispValue
from lispy.errors import LispyArityError
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol


class Closure:
    """A first-class function: formal parameters, body forms, defining env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: list[SExpression], env: Environment):
        self.params: list[Symbol] = params
        self.body: list[SExpression] = body
        self.env: Environment = env

    def __repr__(self) -> str:
        return f"<function ({' '.join(str(p) for p in self.params)})>"

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind already-evaluated `args` positionally to the parameters in a new
        frame whose parent is the captured environment, not the caller's.
        """
        if len(args) != len(self.params):
            raise LispyArityError(
                f"argument count mismatch: expected {len(self.params)}, got {len(args)}"
            )
        new_env = Environment(outer=self.env)
        for param, value in zip(self.params, args):
            new_env.define(param, value)
        return new_env
