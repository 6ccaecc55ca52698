"""Runtime environment for lispy.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Frames are created once for the root and once
per closure application; a frame's `outer` never changes after creation.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from lispy import LispValue
from lispy.errors import LispyEvaluationError, LispyUnboundSymbol, LispyUnboundVariable
from lispy.types.symbol import Symbol


class Binding:
    """Mutable value slot for one symbol in one frame."""

    __slots__ = ("symbol", "value")

    def __init__(self, symbol: Symbol, value: LispValue):
        self.symbol = symbol
        self.value = value

    def __repr__(self):
        return f"Binding({self.symbol}, {self.value!r})"


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, Binding] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Always creates a fresh binding: a binding of the same name in an outer
        frame is shadowed, and an earlier binding in this frame is replaced by
        a new slot rather than overwritten.

        Raises LispyEvaluationError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispyEvaluationError(f"Cannot define {name!r} as a symbol")
        self.vars.pop(name, None)
        self.vars[name] = Binding(name, value)

    def find_binding(self, symbol: Symbol) -> Optional[Binding]:
        """Return the nearest binding slot for `symbol`, innermost frame first."""
        env: Optional[Environment] = self
        while env is not None:
            binding = env.vars.get(symbol)
            if binding is not None:
                return binding
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Overwrite the existing binding for `name` in place.

        Raises LispyUnboundVariable if the symbol is not bound anywhere in the chain.
        """
        binding = self.find_binding(name)
        if binding is None:
            raise LispyUnboundVariable(f"unbound variable: {name}")
        binding.value = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises LispyUnboundSymbol if not found.
        """
        binding = self.find_binding(name)
        if binding is None:
            raise LispyUnboundSymbol(f"undefined symbol: {name}")
        return binding.value

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {b.value!r}" for k, b in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation, innermost frame first, for debugging."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env = self
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
