from __future__ import annotations

import logging
import sys
from typing import TextIO

from skim import SExpression, LispValue
from skim.arena import Arena
from skim.builtin.env_builtin import register
from skim.config import get_recursion_limit
from skim.errors import SkimEvaluationError
from skim.evaluation.evaluator import evaluate
from skim.printer import to_string
from skim.reader.parser import parse
from skim.types.environment import Environment
from skim.types.nil import Void, VoidType

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads Skim programs and evaluates each top-level form against one
    persistent global frame. Owns the arena that tracks every allocation of
    the run; `close()` releases it in one step.
    """

    def __init__(self, arena: Arena | None = None, recursion_limit: int | None = None):
        self.recursion_limit = recursion_limit or get_recursion_limit()
        self.arena: Arena = arena if arena is not None else Arena()
        self.arena.activate()
        self.env: Environment = Environment()
        register(self.env)

    def parse(self, code: str) -> list[SExpression]:
        return parse(code)

    def eval_form(self, expr: SExpression) -> LispValue:
        """Evaluate one expression tree in the global frame."""
        previous = sys.getrecursionlimit()
        sys.setrecursionlimit(max(previous, self.recursion_limit))
        try:
            return evaluate(expr, self.env)
        except RecursionError:
            raise SkimEvaluationError("Maximum recursion depth exceeded") from None
        finally:
            sys.setrecursionlimit(previous)

    def eval(self, code: str) -> LispValue:
        """Read all of `code`, then evaluate every form in order.

        Returns the single result for a one-form program, a list of results
        otherwise, and Void for an empty program.
        """
        results = [self.eval_form(expr) for expr in self.parse(code)]
        if not results:
            return Void
        if len(results) == 1:
            return results[0]
        return results

    def run(self, code: str, out: TextIO | None = None, show_tree: bool = False) -> int:
        """Evaluate a program, printing each non-void result on its own line.

        Nothing is evaluated if the program does not read cleanly. Returns the
        number of forms evaluated.
        """
        out = out if out is not None else sys.stdout
        forms = self.parse(code)
        if show_tree:
            for expr in forms:
                print(to_string(expr), file=out)
            print("-->", file=out)
        for expr in forms:
            result = self.eval_form(expr)
            if not isinstance(result, VoidType):
                print(to_string(result), file=out)
        return len(forms)

    def close(self) -> None:
        stats = self.arena.stats()
        logger.debug("arena stats at close: %s", stats)
        self.arena.release()
        self.arena.deactivate()

    def __enter__(self) -> Interpreter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
