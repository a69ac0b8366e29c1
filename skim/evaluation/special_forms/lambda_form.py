from skim import EvaluatorFn
from skim import SExpression, LispValue
from skim.errors import SkimArityError, SkimInvalidSymbol
from skim.types.closure import Closure
from skim.types.environment import Environment
from skim.types.pair import to_list
from skim.types.symbol import Symbol


def parse_params(params: SExpression) -> list[Symbol]:
    """Validate a parameter list: a proper list of symbols."""
    names = to_list(params, "lambda parameter list")
    for name in names:
        if not isinstance(name, Symbol):
            raise SkimInvalidSymbol(f"lambda parameter must be a Symbol, got {name!r}")
    return names


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(lambda (params...) body) closes over the current frame."""
    if len(tail) < 2:
        raise SkimArityError("lambda requires a parameter list and a body")
    if len(tail) > 2:
        raise SkimArityError("lambda body must be a single expression")

    params, body = tail
    return Closure(parse_params(params), body, env)
