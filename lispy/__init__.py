# Core type aliases for lispy's data model.
# Runtime values are tagged variants: Python int for integers plus the
# classes in lispy.types (Cons, Symbol, Native, Closure, Environment, Sentinel).
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

from loguru import logger

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: Python evaluator used inside apply and special forms
EvaluatorFn = Callable[..., LispValue]

# Library convention: stay silent until an application calls configure_logging().
logger.disable("lispy")
