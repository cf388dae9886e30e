#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


# ==========================
# AST definitions
# ==========================


@dataclass
class Span:
    start: int  # index of the first token covered
    end: int  # index one past the last token covered


@dataclass
class Node:
    span: Optional[Span] = field(default=None, repr=False, compare=False, kw_only=True)


class BinaryOpKind(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"

    @property
    def symbol(self) -> str:
        return self.value


# --- expressions ---

class Expr(Node):
    pass


@dataclass
class Identifier(Expr):
    name: str


@dataclass
class NumberLiteral(Expr):
    value: float


@dataclass
class Negate(Expr):
    operand: Expr


@dataclass
class BinaryOp(Expr):
    op: BinaryOpKind
    left: Expr
    right: Expr


@dataclass
class Call(Expr):
    callee: Expr
    argument: Expr  # exactly one argument
