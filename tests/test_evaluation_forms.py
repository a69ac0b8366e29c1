import pytest

from skim.errors import (
    SkimArityError,
    SkimBooleanError,
    SkimInvalidSymbol,
    SkimTypeError,
    SkimUnboundVariable,
)
from skim.types.nil import Void
from skim.types.pair import from_list
from skim.types.symbol import Symbol


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if #t 1 2)", 1),
        ("(if #f 1 2)", 2),
        ("(if 1 'yes 'no)", Symbol("yes")),
        ("(if 0 'yes 'no)", Symbol("no")),
        ("(if (< 1 2) (+ 1 1) (undefined-name))", 2),
    ],
)
def test_if(interp, source, expected):
    assert interp.eval(source) == expected


@pytest.mark.parametrize("source", ["(if 2 1 0)", "(if 1.0 1 0)", '(if "t" 1 0)', "(if '() 1 0)"])
def test_if_requires_integer_valued_boolean(interp, source):
    with pytest.raises(SkimBooleanError):
        interp.eval(source)


@pytest.mark.parametrize("source", ["(if #t 1)", "(if #t 1 2 3)", "(if)"])
def test_if_arity(interp, source):
    with pytest.raises(SkimArityError):
        interp.eval(source)


# ------------------ let / let* / letrec ------------------

def test_let_binds_in_new_frame(interp):
    assert interp.eval("(let ((x 2) (y 3)) (* x y))") == 6
    with pytest.raises(SkimUnboundVariable):
        interp.eval("x")


def test_let_inits_see_outer_frame_only(interp):
    interp.eval("(define x 10)")
    assert interp.eval("(let ((x 1) (y x)) y)") == 10


def test_let_with_no_bindings(interp):
    assert interp.eval("(let () 5)") == 5


def test_let_duplicate_names_last_wins(interp):
    assert interp.eval("(let ((x 1) (x 2)) x)") == 2


def test_let_star_inits_see_earlier_bindings(interp):
    assert interp.eval("(let* ((x 1) (y (+ x 1)) (z (* y 10))) z)") == 20


def test_let_star_shadowing_inside_chain(interp):
    assert interp.eval("(let* ((x 1) (x (+ x 1))) x)") == 2


def test_letrec_self_recursion(interp):
    src = "(letrec ((fact (lambda (n) (if (= n 0) 1 (* n (fact (- n 1))))))) (fact 5))"
    assert interp.eval(src) == 120


def test_letrec_mutual_recursion(interp):
    src = """
    (letrec ((even? (lambda (n) (if (= n 0) #t (odd? (- n 1)))))
             (odd?  (lambda (n) (if (= n 0) #f (even? (- n 1))))))
      (and (even? 10) (odd? 7)))
    """
    assert interp.eval(src) is True


def test_letrec_early_reference_yields_placeholder(interp):
    assert interp.eval("(letrec ((a b) (b 1)) a)") is Void


@pytest.mark.parametrize("form", ["let", "let*", "letrec"])
def test_binding_name_must_be_symbol(interp, form):
    with pytest.raises(SkimInvalidSymbol):
        interp.eval(f"({form} ((1 2)) 1)")


@pytest.mark.parametrize(
    "source",
    ["(let ((x)) x)", "(let ((x 1 2)) x)", "(let ((x 1)))", "(let ((x 1)) x x)"],
)
def test_malformed_let_is_fatal(interp, source):
    with pytest.raises(SkimArityError):
        interp.eval(source)


def test_let_bindings_must_be_a_list(interp):
    with pytest.raises(SkimTypeError):
        interp.eval("(let x 1)")


# ------------------ define / set! ------------------

def test_define_returns_void_and_binds(interp):
    assert interp.eval("(define a 5)") is Void
    assert interp.eval("a") == 5


def test_define_inside_let_escapes_to_global(interp):
    assert interp.eval("(let ((x 1)) (define y 2)) y") == [Void, 2]


def test_define_inside_closure_escapes_to_global(interp):
    interp.eval("(define make (lambda (v) (define made v)))")
    interp.eval("(make 9)")
    assert interp.eval("made") == 9


def test_define_evaluates_value_in_local_frame(interp):
    interp.eval("(let ((x 4)) (define z (* x x)))")
    assert interp.eval("z") == 16


@pytest.mark.parametrize("source", ["(define x)", "(define x 1 2)"])
def test_define_arity(interp, source):
    with pytest.raises(SkimArityError):
        interp.eval(source)


def test_define_requires_symbol(interp):
    with pytest.raises(SkimInvalidSymbol):
        interp.eval("(define 1 2)")


def test_set_updates_existing_binding(interp):
    interp.eval("(define counter 0)")
    assert interp.eval("(set! counter (+ counter 1))") is Void
    assert interp.eval("counter") == 1


def test_set_inside_let_mutates_local_not_global(interp):
    interp.eval("(define x 1)")
    assert interp.eval("(let ((x 2)) (begin (set! x 3) x))") == 3
    assert interp.eval("x") == 1


def test_set_unbound_fails(interp):
    with pytest.raises(SkimUnboundVariable):
        interp.eval("(set! nope 1)")


def test_set_requires_symbol(interp):
    with pytest.raises(SkimInvalidSymbol):
        interp.eval("(set! 1 2)")


# ------------------ begin ------------------

def test_begin_returns_last(interp):
    assert interp.eval("(begin 1 2 3)") == 3


def test_begin_empty_is_void(interp):
    assert interp.eval("(begin)") is Void


def test_begin_sequences_side_effects(interp):
    assert interp.eval("(begin (define a 10) (define b 20) (+ a b))") == 30


# ------------------ cond ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cond (#f 1) (#t 2))", 2),
        ("(cond ((> 1 2) 'a) ((< 1 2) 'b) (else 'c))", Symbol("b")),
        ("(cond (#f 1) (else 3))", 3),
        ("(cond (else 1) (undefined 2))", 1),
        ("(cond (#t 1) ((car '()) 2))", 1),
    ],
)
def test_cond(interp, source, expected):
    assert interp.eval(source) == expected


def test_cond_without_match_is_void(interp):
    assert interp.eval("(cond (#f 1) (0 2))") is Void
    assert interp.eval("(cond)") is Void


def test_cond_malformed_clause(interp):
    with pytest.raises(SkimArityError):
        interp.eval("(cond (#t))")


def test_cond_test_must_be_boolean(interp):
    with pytest.raises(SkimBooleanError):
        interp.eval("(cond (5 1))")


# ------------------ and / or ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(and)", True),
        ("(and #t #t)", True),
        ("(and #t #f)", False),
        ("(and 1 1)", 1),
        ("(and #f (car '()))", False),
        ("(and 1 0 (car '()))", 0),
        ("(or)", False),
        ("(or #f #t)", True),
        ("(or #f #f)", False),
        ("(or #t (car '()))", True),
        ("(or 0 1)", 1),
    ],
)
def test_and_or_short_circuit(interp, source, expected):
    result = interp.eval(source)
    assert result == expected
    assert type(result) is type(expected)


def test_and_requires_boolean_operands(interp):
    with pytest.raises(SkimBooleanError):
        interp.eval("(and #t 5)")


# ------------------ quote (arity) ------------------

@pytest.mark.parametrize("source", ["(quote)", "(quote 1 2)"])
def test_quote_arity(interp, source):
    with pytest.raises(SkimArityError):
        interp.eval(source)


def test_special_form_name_is_recognised_before_lookup(interp):
    assert interp.eval("(quote (if 1 2))") == from_list([Symbol("if"), 1, 2])
