from skim import EvaluatorFn
from skim import SExpression, LispValue
from skim.errors import SkimArityError
from skim.types.environment import Environment
from skim.types.values import as_condition


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise SkimArityError("if requires exactly 3 arguments: (if test then else)")

    # Conditions are integer-valued booleans: #t/#f or 1/0
    if as_condition(evaluate_fn(tail[0], env), "if"):
        return evaluate_fn(tail[1], env)
    return evaluate_fn(tail[2], env)
