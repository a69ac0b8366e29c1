"""Variant predicates for the Skim value model.

Booleans are Python bools, Integers are Python ints, Doubles are floats and
strings are str. Because bool subclasses int, every integer test here has to
exclude bool explicitly.
"""

from __future__ import annotations

from skim import LispValue
from skim.errors import SkimBooleanError, SkimIntegerOverflow
from skim.types.nil import NilType, VoidType
from skim.types.symbol import Symbol

# Integers are signed 64-bit
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def is_integer(value: LispValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_double(value: LispValue) -> bool:
    return isinstance(value, float)


def is_number(value: LispValue) -> bool:
    return is_integer(value) or is_double(value)


def is_boolean_value(value: LispValue) -> bool:
    """True for #t/#f and for the integers 0 and 1."""
    return isinstance(value, int) and value in (0, 1)


def type_name(value: LispValue) -> str:
    from skim.types.pair import Pair
    from skim.types.closure import Closure
    from skim.types.primitive import Primitive

    if isinstance(value, bool):
        return "boolean"
    if is_integer(value):
        return "integer"
    if is_double(value):
        return "double"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Symbol):
        return "symbol"
    if isinstance(value, NilType):
        return "null"
    if isinstance(value, Pair):
        return "pair"
    if isinstance(value, Closure):
        return "closure"
    if isinstance(value, Primitive):
        return "primitive"
    if isinstance(value, VoidType):
        return "void"
    return type(value).__name__


def as_condition(value: LispValue, where: str) -> bool:
    """Interpret an integer-valued boolean (#t/#f or 1/0) as a Python bool."""
    if not is_boolean_value(value):
        raise SkimBooleanError(f"{where}: expected a boolean (0/1), got {type_name(value)}")
    return bool(value)


def in_int_range(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def check_integer(value: LispValue, where: str) -> LispValue:
    """Pass doubles through; raise if an integer result leaves the 64-bit range."""
    if is_integer(value) and not in_int_range(value):
        raise SkimIntegerOverflow(f"{where}: integer overflow")
    return value
