#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from enum import IntEnum

from mx_ast import BinaryOpKind
from mx_internal_error import InternalParserError
from mx_tokens import Token, TokenKind


class Precedence(IntEnum):
    """Binary operator precedence, listed from lowest to highest."""
    NONE = 0  # every non-operator token; below any real precedence
    ADD = 1  # + and -
    MUL = 2  # *, / and %

    MIN = 1  # alias of ADD: the lowest real operator precedence

    def is_at_least(self, other: "Precedence") -> bool:
        return self >= other

    def is_higher_than(self, other: "Precedence") -> bool:
        return self > other


_PRECEDENCE = {
    TokenKind.PLUS: Precedence.ADD,
    TokenKind.MINUS: Precedence.ADD,
    TokenKind.STAR: Precedence.MUL,
    TokenKind.SLASH: Precedence.MUL,
    TokenKind.MODULO: Precedence.MUL,
}

_BINARY_OP_KIND = {
    TokenKind.PLUS: BinaryOpKind.ADD,
    TokenKind.MINUS: BinaryOpKind.SUBTRACT,
    TokenKind.STAR: BinaryOpKind.MULTIPLY,
    TokenKind.SLASH: BinaryOpKind.DIVIDE,
    TokenKind.MODULO: BinaryOpKind.MODULO,
}


def precedence_of(token: Token) -> Precedence:
    # MINUS always reports ADD here; the parser only asks after a complete term,
    # where '-' can only be subtraction.
    return _PRECEDENCE.get(token.kind, Precedence.NONE)


def binary_op_kind(token: Token) -> BinaryOpKind:
    kind = _BINARY_OP_KIND.get(token.kind)
    if kind is None:
        raise InternalParserError(f"[ICE-0020] binary_op_kind() called on a {token.kind.name} token")
    return kind
