from skim import EvaluatorFn
from skim import SExpression, LispValue
from skim.types.environment import Environment
from skim.types.nil import Void


def begin_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = Void
    for e in tail:
        result = evaluate_fn(e, env)
    return result
