"""Built-in procedures for the Skim runtime environment.

This module defines arithmetic with integer/double coercion, numeric
comparison, pair construction and projection, and the predicates exposed to
Skim code. Every primitive receives its arguments already evaluated.
"""
from __future__ import annotations

from skim import LispValue
from skim.errors import SkimArityError, SkimDivideByZero, SkimTypeError
from skim.types.closure import Closure
from skim.types.environment import Environment
from skim.types.nil import Nil, NilType, VoidType
from skim.types.pair import Pair, from_list
from skim.types.primitive import Primitive
from skim.types.symbol import Symbol
from skim.types.values import as_condition, check_integer, is_double, is_integer, is_number, type_name


def _expect_arity(name: str, expr: list[LispValue], n: int) -> None:
    if len(expr) != n:
        raise SkimArityError(f"{name} requires exactly {n} argument(s), got {len(expr)}")


def _expect_numbers(name: str, expr: list[LispValue]) -> None:
    for x in expr:
        if not is_number(x):
            raise SkimTypeError(f"All arguments to {name} must be numbers, got {type_name(x)}")


def _promote(a: LispValue, b: LispValue) -> tuple[LispValue, LispValue]:
    """Integer op Integer stays integral; any Double promotes both to Double."""
    if is_double(a) or is_double(b):
        return float(a), float(b)
    return a, b


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> LispValue:
    """(+ a b): sum of two numbers."""
    _expect_arity("+", expr, 2)
    _expect_numbers("+", expr)
    a, b = _promote(*expr)
    return check_integer(a + b, "+")


def sub(env: Environment, expr: list[LispValue]) -> LispValue:
    """(- a b): difference of two numbers."""
    _expect_arity("-", expr, 2)
    _expect_numbers("-", expr)
    a, b = _promote(*expr)
    return check_integer(a - b, "-")


def mul(env: Environment, expr: list[LispValue]) -> LispValue:
    """(* a ...): product of any number of numbers, folded left to right."""
    _expect_numbers("*", expr)
    result = 1
    for x in expr:
        result, x = _promote(result, x)
        result = check_integer(result * x, "*")
    return result


def div(env: Environment, expr: list[LispValue]) -> LispValue:
    """(/ a b): an Integer when b divides a evenly, otherwise a Double."""
    _expect_arity("/", expr, 2)
    _expect_numbers("/", expr)
    a, b = expr
    if b == 0:
        raise SkimDivideByZero("Division by zero")
    if is_integer(a) and is_integer(b) and a % b == 0:
        return check_integer(a // b, "/")
    return float(a) / float(b)


def modulo(env: Environment, expr: list[LispValue]) -> LispValue:
    """(modulo n d): result takes the sign of d. Exactly 2 integer arguments."""
    _expect_arity("modulo", expr, 2)
    n, d = expr
    if not is_integer(n) or not is_integer(d):
        raise SkimTypeError("All arguments to modulo must be integers")
    if d == 0:
        raise SkimDivideByZero("Modulo by zero")
    return n % d


# -------------------------------
# Comparison
# -------------------------------
def _comparison(name: str, op):
    def compare(env: Environment, expr: list[LispValue]) -> bool:
        _expect_arity(name, expr, 2)
        _expect_numbers(name, expr)
        a, b = _promote(*expr)
        return op(a, b)
    compare.__name__ = f"compare_{name}"
    compare.__doc__ = f"({name} a b) on two numbers."
    return compare


lt = _comparison("<", lambda a, b: a < b)
lte = _comparison("<=", lambda a, b: a <= b)
gt = _comparison(">", lambda a, b: a > b)
gte = _comparison(">=", lambda a, b: a >= b)
num_eq = _comparison("=", lambda a, b: a == b)


# -------------------------------
# Pairs and lists
# -------------------------------
def cons(env: Environment, expr: list[LispValue]) -> Pair:
    """(cons a b) builds exactly one pair."""
    _expect_arity("cons", expr, 2)
    head, tail = expr
    return Pair(head, tail)


def car(env: Environment, expr: list[LispValue]) -> LispValue:
    _expect_arity("car", expr, 1)
    if not isinstance(expr[0], Pair):
        raise SkimTypeError(f"car expects a pair, got {type_name(expr[0])}")
    return expr[0].car


def cdr(env: Environment, expr: list[LispValue]) -> LispValue:
    _expect_arity("cdr", expr, 1)
    if not isinstance(expr[0], Pair):
        raise SkimTypeError(f"cdr expects a pair, got {type_name(expr[0])}")
    return expr[0].cdr


def list_builtin(env: Environment, expr: list[LispValue]) -> LispValue:
    return from_list(expr)


def null(env: Environment, expr: list[LispValue]) -> bool:
    """Predicate: #t if the single argument is the empty list."""
    _expect_arity("null?", expr, 1)
    return expr[0] is Nil


def is_pair(env: Environment, expr: list[LispValue]) -> bool:
    _expect_arity("pair?", expr, 1)
    return isinstance(expr[0], Pair)


def logical_not(env: Environment, expr: list[LispValue]) -> bool:
    _expect_arity("not", expr, 1)
    return not as_condition(expr[0], "not")


# -------------------------------
# Identity
# -------------------------------
def is_eq(a: LispValue, b: LispValue) -> bool:
    """Value equality for atoms of the same variant; identity for everything else.

    Pairs, closures and primitives are eq? only to themselves. Atoms of
    different variants are never eq? (1, 1.0 and #t are all distinct).
    """
    if isinstance(a, (Pair, Closure, Primitive)) or isinstance(b, (Pair, Closure, Primitive)):
        return a is b
    if type(a) is not type(b):
        return False
    if isinstance(a, (NilType, VoidType)):
        return True
    return a == b


def eq(env: Environment, expr: list[LispValue]) -> bool:
    _expect_arity("eq?", expr, 2)
    return is_eq(*expr)


PRIMITIVES = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "modulo": modulo,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "=": num_eq,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "list": list_builtin,
    "null?": null,
    "pair?": is_pair,
    "not": logical_not,
    "eq?": eq,
}


def register(env: Environment) -> None:
    """Register all builtin procedures into the given environment."""
    env.update({Symbol(name): Primitive(name, fn) for name, fn in PRIMITIVES.items()})
