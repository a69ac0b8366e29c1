"""let, let* and letrec.

All three take `(bindings body)` where bindings is a proper list of
`(name init)` pairs; they differ only in which frame each init sees.
"""

from skim import EvaluatorFn
from skim import SExpression, LispValue
from skim.errors import SkimArityError, SkimInvalidSymbol
from skim.types.environment import Environment
from skim.types.nil import Void
from skim.types.pair import to_list
from skim.types.symbol import Symbol


def parse_bindings(tail: list[SExpression], form: str) -> tuple[list[tuple[Symbol, SExpression]], SExpression]:
    """Split `(bindings body)` into [(name, init), ...] and the body."""
    if len(tail) != 2:
        raise SkimArityError(f"{form} requires a binding list and a single body expression")
    spec, body = tail
    bindings = []
    for entry in to_list(spec, f"{form} binding list"):
        parts = to_list(entry, f"{form} binding")
        if len(parts) != 2:
            raise SkimArityError(f"{form} binding must be (name value)")
        name, init = parts
        if not isinstance(name, Symbol):
            raise SkimInvalidSymbol(f"{form} variable must be a Symbol, got {name!r}")
        bindings.append((name, init))
    return bindings, body


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Inits are evaluated in the outer frame; none sees another's binding."""
    bindings, body = parse_bindings(tail, "let")
    values = [(name, evaluate_fn(init, env)) for name, init in bindings]
    new_env = Environment(parent=env)
    for name, value in values:
        new_env.bind(name, value)
    return evaluate_fn(body, new_env)


def let_star_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Each init sees every earlier binding: one new child frame per binding."""
    bindings, body = parse_bindings(tail, "let*")
    new_env = Environment(parent=env)
    for i, (name, init) in enumerate(bindings):
        value = evaluate_fn(init, new_env)
        if i > 0:
            new_env = Environment(parent=new_env)
        new_env.bind(name, value)
    return evaluate_fn(body, new_env)


def letrec_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Every name is bound before any init runs, so inits may refer to each other.

    Reading a name before its own init has finished yields the Void placeholder.
    """
    bindings, body = parse_bindings(tail, "letrec")
    new_env = Environment(parent=env)
    cells = [(new_env.bind(name, Void), init) for name, init in bindings]
    for cell, init in cells:
        cell.value = evaluate_fn(init, new_env)
    return evaluate_fn(body, new_env)
