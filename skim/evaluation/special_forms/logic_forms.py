from skim import EvaluatorFn
from skim import SExpression, LispValue
from skim.types.environment import Environment
from skim.types.values import as_condition


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until a false value
    is found, which is returned immediately. If all operands are true, returns
    the value of the last operand. With zero operands, returns #t.
    """
    result: LispValue = True
    for expr in tail:
        result = evaluate_fn(expr, env)
        if not as_condition(result, "and"):
            return result
    return result


def or_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    true value. If none are true, returns the last value. With zero operands,
    returns #f.
    """
    result: LispValue = False
    for expr in tail:
        result = evaluate_fn(expr, env)
        if as_condition(result, "or"):
            return result
    return result
