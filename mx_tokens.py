#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


# ==========================
# Tokens
# ==========================

class TokenKind(Enum):
    # Special
    EOF = auto()

    IDENT = auto()  # identifier, e.g. x, sqrt, etc.
    NUMBER = auto()  # numeric literal, e.g. 42, 3.5, etc.

    # Punctuation / operators
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    PLUS = auto()  # +
    MINUS = auto()  # - (subtraction and negation)
    STAR = auto()  # *
    SLASH = auto()  # /
    MODULO = auto()  # %


SYMBOL_TEXT = {
    TokenKind.EOF: "",
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.STAR: "*",
    TokenKind.SLASH: "/",
    TokenKind.MODULO: "%",
}


def format_number(value: float) -> str:
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    value: Optional[float] = None  # only for NUMBER
    loc: Optional[int] = field(default=None, compare=False)  # source offset, if the lexer knows it

    def __repr__(self) -> str:
        return f"{self.text!r}" if self.kind != TokenKind.EOF else "end-of-input"

    @classmethod
    def ident(cls, name: str, loc: Optional[int] = None) -> "Token":
        return cls(TokenKind.IDENT, name, loc=loc)

    @classmethod
    def number(cls, value: float, loc: Optional[int] = None) -> "Token":
        value = float(value)
        return cls(TokenKind.NUMBER, format_number(value), value, loc=loc)

    @classmethod
    def symbol(cls, kind: TokenKind, loc: Optional[int] = None) -> "Token":
        if kind not in SYMBOL_TEXT:
            raise ValueError(f"{kind} is not a symbol token kind")
        return cls(kind, SYMBOL_TEXT[kind], loc=loc)

    @classmethod
    def eof(cls, loc: Optional[int] = None) -> "Token":
        return cls(TokenKind.EOF, "", loc=loc)


END_OF_INPUT = Token.eof()
