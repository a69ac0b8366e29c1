from skim import EvaluatorFn
from skim import SExpression, LispValue
from skim.errors import SkimArityError, SkimInvalidSymbol
from skim.types.environment import Environment
from skim.types.nil import Void
from skim.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    The value is evaluated in the current frame but the binding always goes
    into the global frame, even when define appears inside a let or lambda.
    """
    if len(tail) != 2:
        raise SkimArityError("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise SkimInvalidSymbol(f"define first argument must be a Symbol, got {name!r}")
    value = evaluate_fn(val_expr, env)
    env.define_global(name, value)
    return Void
