from skim import EvaluatorFn
from skim import SExpression, LispValue
from skim.errors import SkimArityError
from skim.types.environment import Environment


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote datum) returns datum unevaluated."""
    if len(tail) != 1:
        raise SkimArityError("quote requires exactly 1 argument")
    return tail[0]
