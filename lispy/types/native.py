from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from lispy import LispValue, SExpression

if TYPE_CHECKING:
    from lispy.runtime_context import RuntimeContext
    from lispy.types.environment import Environment

NativeFn = Callable[[SExpression, "Environment", "RuntimeContext"], LispValue]


class Native:
    """A built-in operation. It receives its arguments unevaluated together
    with the calling environment and decides what to evaluate."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __call__(self, tail: SExpression, env: Environment, runtime: RuntimeContext) -> LispValue:
        return self.fn(tail, env, runtime)

    def __repr__(self):
        return f"<primitive {self.name}>"
