"""Application engine for Skim.

Closures and primitives share this single application path. Arguments are
always evaluated by the caller, left to right, before `apply` sees them.
"""

from skim import LispValue, EvaluatorFn
from skim.errors import SkimArityError, SkimNotCallable
from skim.types.closure import Closure
from skim.types.environment import Environment
from skim.types.primitive import Primitive
from skim.types.values import type_name


def apply_closure(fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Closure.

    The new frame's parent is the frame captured when the closure was created,
    not the caller's frame; that is what makes scoping lexical. The parameter
    count must match the argument count exactly.
    """
    if len(args) != fn.arity:
        raise SkimArityError(
            f"Procedure expects {fn.arity} argument(s), got {len(args)}"
        )
    new_env = Environment(parent=fn.env)
    for name, value in zip(fn.params, args):
        new_env.bind(name, value)
    return evaluate_fn(fn.body, new_env)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Closure or a Primitive; anything else is an error."""
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    elif isinstance(head, Primitive):
        return head(env, args)
    else:
        raise SkimNotCallable(f"Cannot apply non-procedure {type_name(head)}")
