# Core type aliases for Skim's data model.
# Atoms are plain Python values (int, float, str, bool); Symbol, Pair, Nil and
# Void are the only dedicated classes. Expression trees and runtime values are
# built from the same variants, so code is data.
#
# Naming guidance:
# - SExpression: Use in reader/parser/special-form code for unevaluated forms.
# - LispValue:  Use in evaluator/runtime code for evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type passed to special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
