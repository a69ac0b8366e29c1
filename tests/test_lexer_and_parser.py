import pytest
from hypothesis import given, strategies as st

from skim.errors import SkimSyntaxError
from skim.reader.lexer import lex
from skim.reader.parser import TokenStream, parse
from skim.types.nil import Nil
from skim.types.pair import from_list
from skim.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", Symbol("a"))]),
        ("42", [("integer", 42)]),
        ("-7", [("integer", -7)]),
        ("+3", [("integer", 3)]),
        ("3.25", [("double", 3.25)]),
        (".5", [("double", 0.5)]),
        ("-.5", [("double", -0.5)]),
        ("7.", [("double", 7.0)]),
        ("#t #f", [("boolean", True), ("boolean", False)]),
        ('"hello world"', [("string", "hello world")]),
        ('"say \\"hi\\"\\n"', [("string", 'say "hi"\n')]),
        ("(+ 1 2)", [("lparen", "("), ("symbol", Symbol("+")), ("integer", 1), ("integer", 2), ("rparen", ")")]),
        ("(f(g))", [("lparen", "("), ("symbol", Symbol("f")), ("lparen", "("), ("symbol", Symbol("g")), ("rparen", ")"), ("rparen", ")")]),
        ("- +", [("symbol", Symbol("-")), ("symbol", Symbol("+"))]),
        ("null? set! let*", [("symbol", Symbol("null?")), ("symbol", Symbol("set!")), ("symbol", Symbol("let*"))]),
        ("'x", [("quote", "'"), ("symbol", Symbol("x"))]),
        (" ; comment\n a ;; more\n b", [("symbol", Symbol("a")), ("symbol", Symbol("b"))]),
        ("", []),
    ],
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "source",
    [
        '"no end',
        '(display "oops)',
        "12abc",
        "1.2.3",
        "-4x",
        "#x",
        "#true",
        "#",
    ],
)
def test_lexer_errors(source):
    with pytest.raises(SkimSyntaxError):
        list(lex(source))


@pytest.mark.parametrize(
    "source,expected",
    [
        ("9223372036854775807", 2**63 - 1),
        ("-9223372036854775808", -(2**63)),
        ("+0009223372036854775807", 2**63 - 1),
        ("-0", 0),
    ],
)
def test_integer_literals_at_the_64_bit_bounds(source, expected):
    assert list(lex(source)) == [("integer", expected)]


@pytest.mark.parametrize(
    "source",
    [
        "9223372036854775808",
        "-9223372036854775809",
        "18446744073709551616",
        "1" * 400,
        "-" + "7" * 5000,
    ],
)
def test_out_of_range_integer_literals_are_malformed(source):
    with pytest.raises(SkimSyntaxError, match="Malformed numeric literal"):
        list(lex(source))


@given(st.integers(min_value=2**63, max_value=10**30))
def test_integer_literals_beyond_64_bits_are_rejected(n):
    with pytest.raises(SkimSyntaxError):
        list(lex(str(n)))
    with pytest.raises(SkimSyntaxError):
        list(lex(str(-n - 1)))


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("3.14", 3.14),
        ('"s"', "s"),
        ("#t", True),
        ("foo", Symbol("foo")),
        ("()", Nil),
        ("(1 2 3)", from_list([1, 2, 3])),
        ("(a (b c) ())", from_list([Symbol("a"), from_list([Symbol("b"), Symbol("c")]), Nil])),
        ("'a", from_list([Symbol("quote"), Symbol("a")])),
        ("'(1 2)", from_list([Symbol("quote"), from_list([1, 2])])),
    ],
)
def test_parser_single_form(source, expected):
    forms = parse(source)
    assert len(forms) == 1
    assert forms[0] == expected


def test_parser_multiple_top_level_forms():
    forms = parse("(define x 1) x (+ x 1)")
    assert len(forms) == 3
    assert forms[1] == Symbol("x")


def test_parse_expr_returns_none_at_end():
    stream = TokenStream(lex("1"))
    assert stream.parse_expr() == 1
    assert stream.parse_expr() is None


@pytest.mark.parametrize(
    "source, message",
    [
        ("(+ 1 2", "not enough"),
        ("((a)", "not enough"),
        ("(+ 1 2))", "too many"),
        ("(define x 1) (+ x 1) )", "too many"),
        (")", "too many"),
        ("'", "quote"),
        ("(')", "quote"),
    ],
)
def test_parser_unbalanced(source, message):
    with pytest.raises(SkimSyntaxError, match=message):
        parse(source)


# -------------------------------
# Hypothesis strategies
# -------------------------------
symbol_strat = st.from_regex(r"[a-z][a-z0-9?!*<>=-]{0,8}", fullmatch=True)
number_strat = st.one_of(
    st.integers(min_value=-10**9, max_value=10**9).map(str),
    st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False).map(lambda f: f"{f:f}"),
)
string_strat = st.text(alphabet=st.characters(blacklist_characters='"\\', blacklist_categories=("Cs",)), max_size=10).map(
    lambda s: f'"{s}"'
)
atom_strat = st.one_of(symbol_strat, number_strat, string_strat, st.sampled_from(["#t", "#f"]))
sexpr_strat = st.recursive(
    atom_strat,
    lambda children: st.lists(children, max_size=5).map(lambda items: "(" + " ".join(items) + ")"),
    max_leaves=20,
)


@given(st.lists(sexpr_strat, min_size=1, max_size=4))
def test_parser_reads_every_balanced_program(forms):
    source = "\n".join(forms)
    assert len(parse(source)) == len(forms)


@given(sexpr_strat.filter(lambda s: s.startswith("(")))
def test_parser_rejects_a_missing_close_paren(sexpr):
    with pytest.raises(SkimSyntaxError):
        parse(sexpr[:-1])


@given(sexpr_strat)
def test_parser_rejects_an_extra_close_paren(sexpr):
    with pytest.raises(SkimSyntaxError):
        parse(sexpr + ")")
