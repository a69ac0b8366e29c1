"""Core evaluator for the Skim interpreter.

Dispatches on the value variant of an expression: atoms evaluate to
themselves, symbols are looked up in the frame chain, and pairs are either
special forms (recognised by the head symbol) or applications.
"""

from __future__ import annotations

from skim import SExpression, LispValue
from skim.errors import SkimEvaluationError
from skim.evaluation.apply import apply
from skim.evaluation.special_forms import SPECIAL_FORMS
from skim.types.environment import Environment
from skim.types.nil import NilType
from skim.types.pair import Pair, iter_list, to_list
from skim.types.symbol import Symbol
from skim.types.values import type_name


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`, recursing on the host stack."""
    match expr:
        case bool() | int() | float() | str() | NilType():
            return expr

        case Symbol():
            return env.lookup(expr)

        case Pair(car=head, cdr=tail):
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](to_list(tail, f"({head} ...) form"), env, evaluate)

            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in iter_list(tail, "argument list")]
            return apply(fn, args, env, evaluate)

    # Closures, primitives and void never appear in a well-formed expression tree
    raise SkimEvaluationError(f"Cannot evaluate a {type_name(expr)} value: {expr!r}")
