"""
  Skim reader

Consumes the lexer's token stream and produces top-level expression trees
built from Pair/Nil and atoms. A depth counter tracks unclosed parentheses so
that both too many and too few close parentheses are reported.

    - ( a b c ) -> Pair(a, Pair(b, Pair(c, Nil)))
    - ()        -> Nil
    - 'x        -> (quote x)
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from skim import SExpression
from skim.errors import SkimSyntaxError
from skim.reader.lexer import Token, lex
from skim.types.nil import Nil
from skim.types.pair import Pair
from skim.types.symbol import Symbol

logger = logging.getLogger(__name__)

QUOTE = Symbol("quote")
ATOM_KINDS = frozenset({"integer", "double", "string", "boolean", "symbol"})


class TokenStream:
    def __init__(self, token_iter: Iterable[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        self.depth = 0

    def peek(self) -> tuple[Optional[str], object]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], object]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        """Read one complete expression; None at end of input."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            if self.depth > 0:
                raise SkimSyntaxError("Syntax error: not enough close parentheses")
            return None

        if tok_type in ATOM_KINDS:
            return tok_val

        if tok_type == "quote":
            if self.peek()[0] in (None, "rparen"):
                raise SkimSyntaxError("Syntax error: quote must be followed by a datum")
            return Pair(QUOTE, Pair(self.parse_expr(), Nil))

        if tok_type == "rparen":
            raise SkimSyntaxError("Syntax error: too many close parentheses")

        if tok_type == "lparen":
            self.depth += 1
            items = []
            while True:
                nxt = self.peek()[0]
                if nxt is None:
                    raise SkimSyntaxError("Syntax error: not enough close parentheses")
                if nxt == "rparen":
                    self.advance()
                    self.depth -= 1
                    break
                items.append(self.parse_expr())
            result = Nil
            for item in reversed(items):
                result = Pair(item, result)
            return result

        raise SkimSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> list[SExpression]:
    """Read a whole program before anything is evaluated."""
    forms = list(TokenStream(lex(source)).parse_all())
    logger.debug("read %d top-level form(s)", len(forms))
    return forms
