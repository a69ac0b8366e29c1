from skim import EvaluatorFn
from skim import SExpression, LispValue
from skim.errors import SkimArityError
from skim.types.environment import Environment
from skim.types.nil import Void
from skim.types.pair import to_list
from skim.types.symbol import Symbol
from skim.types.values import as_condition

ELSE = Symbol("else")


def cond_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(cond (test expr) ... (else expr))

    Clauses are tried in order; the expr of the first clause whose test is
    true is evaluated and returned. No matching clause yields Void.
    """
    for clause in tail:
        parts = to_list(clause, "cond clause")
        if len(parts) != 2:
            raise SkimArityError("cond clause must be (test expr)")
        test, expr = parts
        if test == ELSE or as_condition(evaluate_fn(test, env), "cond"):
            return evaluate_fn(expr, env)
    return Void
