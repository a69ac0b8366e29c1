from skim import EvaluatorFn
from skim import SExpression, LispValue
from skim.errors import SkimInvalidSymbol, SkimArityError
from skim.types.environment import Environment
from skim.types.nil import Void
from skim.types.symbol import Symbol


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise SkimArityError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise SkimInvalidSymbol(f"set! first argument must be a Symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)
    return Void
