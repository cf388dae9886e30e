#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import is_dataclass, fields
from enum import Enum
from typing import List, Any

from mx_ast import Span, Node, Expr, BinaryOpKind, Identifier, NumberLiteral, Negate, BinaryOp, Call
from mx_internal_error import InternalParserError
from mx_tokens import Token, TokenKind, format_number


def _format_span(span: Span | None) -> str:
    if span is None:
        return ""
    return f" @{span.start}-{span.end}"


def _format_scalar(value: Any) -> str:
    if isinstance(value, Enum):
        return value.name
    return repr(value)


def format_node(node: Any, indent: int = 0) -> List[str]:
    """
    Generic, reflection-based AST pretty-printer.

    - Shows the node class name.
    - Prints simple scalar fields inline (excluding `span`).
    - Recursively prints child Node fields on new indented lines.
    - Appends a token span annotation like `@0-5` when available.
    """
    ind = "  " * indent

    if isinstance(node, Node) and is_dataclass(node):
        data_fields = [f for f in fields(node) if f.name != "span"]
        simple_parts = []
        child_fields = []

        for f in data_fields:
            value = getattr(node, f.name)
            if isinstance(value, Node):
                child_fields.append((f.name, value))
            else:
                simple_parts.append((f.name, value))

        # Header: ClassName(field1=..., field2=...) @start-end
        header = node.__class__.__name__
        if simple_parts:
            inner = ", ".join(f"{name}={_format_scalar(value)}" for name, value in simple_parts if value is not None)
            header = f"{header}({inner})"
        header += _format_span(node.span)

        lines: List[str] = [ind + header]
        for name, value in child_fields:
            lines.append(ind + "  " + f"{name}:")
            lines.extend(format_node(value, indent + 2))
        return lines

    # Fallback for unexpected values
    return [ind + repr(node)]


def format_expr(expr: Expr) -> str:
    """
    Convenience: pretty-print an expression tree as a string.
    """
    return "\n".join(format_node(expr, indent=0))


# ==========================
# Canonical rendering
# ==========================

# Every binary operation and negation is parenthesized, so the output re-parses
# to the same tree regardless of precedence.

def _canonical_parts(expr: Expr, out: List[Token]) -> None:
    if isinstance(expr, Identifier):
        out.append(Token.ident(expr.name))
    elif isinstance(expr, NumberLiteral):
        out.append(Token.number(expr.value))
    elif isinstance(expr, Negate):
        out.append(Token.symbol(TokenKind.MINUS))
        out.append(Token.symbol(TokenKind.LPAREN))
        _canonical_parts(expr.operand, out)
        out.append(Token.symbol(TokenKind.RPAREN))
    elif isinstance(expr, BinaryOp):
        out.append(Token.symbol(TokenKind.LPAREN))
        _canonical_parts(expr.left, out)
        out.append(_OP_TOKENS[expr.op])
        _canonical_parts(expr.right, out)
        out.append(Token.symbol(TokenKind.RPAREN))
    elif isinstance(expr, Call):
        # "-(f)(x)" would re-parse as a negated call
        wrap = isinstance(expr.callee, Negate)
        if wrap:
            out.append(Token.symbol(TokenKind.LPAREN))
        _canonical_parts(expr.callee, out)
        if wrap:
            out.append(Token.symbol(TokenKind.RPAREN))
        out.append(Token.symbol(TokenKind.LPAREN))
        _canonical_parts(expr.argument, out)
        out.append(Token.symbol(TokenKind.RPAREN))
    else:
        raise InternalParserError(f"[ICE-0030] cannot render {type(expr).__name__} node")


_OP_TOKENS = {
    BinaryOpKind.ADD: Token.symbol(TokenKind.PLUS),
    BinaryOpKind.SUBTRACT: Token.symbol(TokenKind.MINUS),
    BinaryOpKind.MULTIPLY: Token.symbol(TokenKind.STAR),
    BinaryOpKind.DIVIDE: Token.symbol(TokenKind.SLASH),
    BinaryOpKind.MODULO: Token.symbol(TokenKind.MODULO),
}


def to_tokens(expr: Expr) -> List[Token]:
    """Canonical token sequence for `expr`, terminated by an end-of-input token."""
    out: List[Token] = []
    _canonical_parts(expr, out)
    out.append(Token.eof())
    return out


def render(expr: Expr) -> str:
    """
    Canonical text for `expr`, e.g. `(1 + (2 * 3))`, `-(x)` or `f(1)(2)`.
    """
    if isinstance(expr, Identifier):
        return expr.name
    if isinstance(expr, NumberLiteral):
        return format_number(expr.value)
    if isinstance(expr, Negate):
        return f"-({render(expr.operand)})"
    if isinstance(expr, BinaryOp):
        return f"({render(expr.left)} {expr.op.symbol} {render(expr.right)})"
    if isinstance(expr, Call):
        callee = render(expr.callee)
        if isinstance(expr.callee, Negate):
            callee = f"({callee})"
        return f"{callee}({render(expr.argument)})"
    raise InternalParserError(f"[ICE-0030] cannot render {type(expr).__name__} node")
