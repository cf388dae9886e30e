#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Sequence, Tuple

from mx_ast import Span, Expr, Identifier, NumberLiteral, Negate, BinaryOp, Call
from mx_internal_error import ICELocation, InternalParserError
from mx_precedence import Precedence, precedence_of, binary_op_kind
from mx_tokens import END_OF_INPUT, Token, TokenKind


# ==========================
# Parser
# ==========================

class ParseErrorKind(Enum):
    UNEXPECTED_TOKEN = auto()  # no identifier, number or '(' where a primary must start
    MISSING_CLOSING_PAREN = auto()  # '(' of a group or call not matched by ')'
    TRAILING_INPUT = auto()  # tokens left after a complete expression


PRIMARY_START = (TokenKind.IDENT, TokenKind.NUMBER, TokenKind.LPAREN)


@dataclass
class ParseError(Exception):
    kind: ParseErrorKind
    message: str
    token: Optional[Token] = None
    index: Optional[int] = None
    expected: Tuple[TokenKind, ...] = ()


class Parser:
    """
    Precedence-climbing parser for MX expressions.

    Grammar:

        Expression := Term (BinaryOperator Term)*
        Term       := '-' Term | Primary Postfix*
        Primary    := Identifier | NumberLiteral | '(' Expression ')'
        Postfix    := '(' Expression ')'

    A parser owns its cursor; the token sequence is only read, so independent
    parsers may share one sequence.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = tokens
        self.index = 0

    # --- cursor ---

    def _current(self) -> Token:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return END_OF_INPUT

    def _advance(self) -> Token:
        if self.index >= len(self.tokens):
            raise InternalParserError(
                "[ICE-0010] advanced past the end of the token sequence",
                ICELocation(token_index=self.index),
            )
        tok = self.tokens[self.index]
        self.index += 1
        return tok

    def _check(self, kind: TokenKind) -> bool:
        return self._current().kind is kind

    def _extend_span(self, start: int) -> Span:
        return Span(start, self.index)

    def _expect_rparen(self, msg: str) -> Token:
        if not self._check(TokenKind.RPAREN):
            raise ParseError(
                ParseErrorKind.MISSING_CLOSING_PAREN,
                f"{msg}, got {self._current()} instead",
                self._current(),
                self.index,
                (TokenKind.RPAREN,),
            )
        return self._advance()

    # --- entry point ---

    def parse(self) -> Expr:
        expr = self.parse_expression()
        if not self._check(TokenKind.EOF):
            raise ParseError(
                ParseErrorKind.TRAILING_INPUT,
                f"[PAR-0030] expected end of input after expression, got {self._current()} instead",
                self._current(),
                self.index,
                (TokenKind.EOF,),
            )
        return expr

    # --- expressions with precedence ---

    def parse_expression(self) -> Expr:
        left = self.parse_term()
        return self.parse_binary_operators(left, Precedence.MIN)

    def parse_binary_operators(self, left: Expr, min_prec: Precedence) -> Expr:
        # Non-operators have Precedence.NONE, which is below every floor, so this
        # loop runs exactly while we are looking at a binary operator.
        while precedence_of(self._current()).is_at_least(min_prec):
            op_tok = self._advance()
            op_prec = precedence_of(op_tok)

            # Not necessarily our right operand yet: a tighter operator may claim it.
            right = self.parse_term()

            # A 'while', not an 'if': with more levels there can be a descending
            # chain of tighter operators, e.g. a < b ** c * d + e.
            while precedence_of(self._current()).is_higher_than(op_prec):
                right = self.parse_binary_operators(right, precedence_of(self._current()))

            left = BinaryOp(
                binary_op_kind(op_tok),
                left,
                right,
                span=self._extend_span(left.span.start),
            )
        return left

    def parse_term(self) -> Expr:
        start = self.index
        if self._check(TokenKind.MINUS):
            self._advance()
            # Negation recurses into Term, so it nests to the right and binds
            # tighter than any binary operator.
            operand = self.parse_term()
            return Negate(operand, span=self._extend_span(start))
        primary = self.parse_primary()
        return self.parse_postfix(primary)

    def parse_primary(self) -> Expr:
        start = self.index
        tok = self._current()

        if tok.kind is TokenKind.IDENT:
            self._advance()
            return Identifier(tok.text, span=self._extend_span(start))

        if tok.kind is TokenKind.NUMBER:
            self._advance()
            return NumberLiteral(tok.value, span=self._extend_span(start))

        if tok.kind is TokenKind.LPAREN:
            self._advance()
            inner = self.parse_expression()
            self._expect_rparen("[PAR-0020] expected ')' after expression")
            # Grouping is not a node; the inner expression just covers the parens.
            inner.span = self._extend_span(start)
            return inner

        raise ParseError(
            ParseErrorKind.UNEXPECTED_TOKEN,
            f"[PAR-0010] expected an identifier, number, or parenthesized expression, got {tok} instead",
            tok,
            self.index,
            PRIMARY_START,
        )

    def parse_postfix(self, expr: Expr) -> Expr:
        # Only single-argument calls; '(' right after a term is always a call.
        while self._check(TokenKind.LPAREN):
            self._advance()
            argument = self.parse_expression()
            self._expect_rparen("[PAR-0021] expected ')' after call argument")
            expr = Call(expr, argument, span=self._extend_span(expr.span.start))
        return expr


def parse_tokens(tokens: Sequence[Token]) -> Expr:
    """Parse one complete expression; raises ParseError on malformed input."""
    return Parser(tokens).parse()
