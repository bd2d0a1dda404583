"""Abstract syntax trees for model mathematics."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator

__all__ = ["NodeType", "ASTNode", "describe_tree"]


class NodeType(IntEnum):
    """Kinds of node in a mathematical expression tree."""

    PLUS = 43
    MINUS = 45
    TIMES = 42
    DIVIDE = 47
    POWER = 94
    INTEGER = 256
    REAL = 257
    REAL_E = 258
    RATIONAL = 259
    NAME = 260
    NAME_AVOGADRO = 261
    NAME_TIME = 262
    CONSTANT_E = 263
    CONSTANT_FALSE = 264
    CONSTANT_PI = 265
    CONSTANT_TRUE = 266
    LAMBDA = 267
    FUNCTION = 268
    FUNCTION_ABS = 269
    FUNCTION_ARCCOS = 270
    FUNCTION_ARCCOSH = 271
    FUNCTION_ARCCOT = 272
    FUNCTION_ARCCOTH = 273
    FUNCTION_ARCCSC = 274
    FUNCTION_ARCCSCH = 275
    FUNCTION_ARCSEC = 276
    FUNCTION_ARCSECH = 277
    FUNCTION_ARCSIN = 278
    FUNCTION_ARCSINH = 279
    FUNCTION_ARCTAN = 280
    FUNCTION_ARCTANH = 281
    FUNCTION_CEILING = 282
    FUNCTION_COS = 283
    FUNCTION_COSH = 284
    FUNCTION_COT = 285
    FUNCTION_COTH = 286
    FUNCTION_CSC = 287
    FUNCTION_CSCH = 288
    FUNCTION_DELAY = 289
    FUNCTION_EXP = 290
    FUNCTION_FACTORIAL = 291
    FUNCTION_FLOOR = 292
    FUNCTION_LN = 293
    FUNCTION_LOG = 294
    FUNCTION_PIECEWISE = 295
    FUNCTION_POWER = 296
    FUNCTION_ROOT = 297
    FUNCTION_SEC = 298
    FUNCTION_SECH = 299
    FUNCTION_SIN = 300
    FUNCTION_SINH = 301
    FUNCTION_TAN = 302
    FUNCTION_TANH = 303
    LOGICAL_AND = 304
    LOGICAL_NOT = 305
    LOGICAL_OR = 306
    LOGICAL_XOR = 307
    RELATIONAL_EQ = 308
    RELATIONAL_GEQ = 309
    RELATIONAL_GT = 310
    RELATIONAL_LEQ = 311
    RELATIONAL_LT = 312
    RELATIONAL_NEQ = 313
    UNKNOWN = 314

    @property
    def symbol(self) -> str:
        """Short textual tag used when describing a tree."""
        return _SYMBOLS[self]


_SYMBOLS: dict[NodeType, str] = {
    NodeType.PLUS: "+",
    NodeType.MINUS: "-",
    NodeType.TIMES: "*",
    NodeType.DIVIDE: "/",
    NodeType.POWER: "pow",
    NodeType.INTEGER: "integer",
    NodeType.REAL: "real",
    NodeType.REAL_E: "real_E",
    NodeType.RATIONAL: "rational",
    NodeType.NAME: "name",
    NodeType.NAME_AVOGADRO: "avogadro",
    NodeType.NAME_TIME: "time",
    NodeType.CONSTANT_E: "constant",
    NodeType.CONSTANT_FALSE: "constant_false",
    NodeType.CONSTANT_PI: "pi",
    NodeType.CONSTANT_TRUE: "constant_true",
    NodeType.LAMBDA: "lambda",
    NodeType.FUNCTION: "function",
    NodeType.FUNCTION_ABS: "abs",
    NodeType.FUNCTION_ARCCOS: "arccos",
    NodeType.FUNCTION_ARCCOSH: "arccosh",
    NodeType.FUNCTION_ARCCOT: "arccot",
    NodeType.FUNCTION_ARCCOTH: "arccoth",
    NodeType.FUNCTION_ARCCSC: "arccsc",
    NodeType.FUNCTION_ARCCSCH: "arccsch",
    NodeType.FUNCTION_ARCSEC: "arcsec",
    NodeType.FUNCTION_ARCSECH: "arcsech",
    NodeType.FUNCTION_ARCSIN: "arcsin",
    NodeType.FUNCTION_ARCSINH: "arcsinh",
    NodeType.FUNCTION_ARCTAN: "arctan",
    NodeType.FUNCTION_ARCTANH: "arctanh",
    NodeType.FUNCTION_CEILING: "ceil",
    NodeType.FUNCTION_COS: "cos",
    NodeType.FUNCTION_COSH: "cosh",
    NodeType.FUNCTION_COT: "cot",
    NodeType.FUNCTION_COTH: "coth",
    NodeType.FUNCTION_CSC: "csc",
    NodeType.FUNCTION_CSCH: "csch",
    NodeType.FUNCTION_DELAY: "delay",
    NodeType.FUNCTION_EXP: "exp",
    NodeType.FUNCTION_FACTORIAL: "!",
    NodeType.FUNCTION_FLOOR: "floor",
    NodeType.FUNCTION_LN: "ln",
    NodeType.FUNCTION_LOG: "log10",
    NodeType.FUNCTION_PIECEWISE: "piecewise",
    NodeType.FUNCTION_POWER: "f_pow",
    NodeType.FUNCTION_ROOT: "sqrt",
    NodeType.FUNCTION_SEC: "sec",
    NodeType.FUNCTION_SECH: "sech",
    NodeType.FUNCTION_SIN: "sin",
    NodeType.FUNCTION_SINH: "sinh",
    NodeType.FUNCTION_TAN: "tan",
    NodeType.FUNCTION_TANH: "tanh",
    NodeType.LOGICAL_AND: "and",
    NodeType.LOGICAL_NOT: "not",
    NodeType.LOGICAL_OR: "or",
    NodeType.LOGICAL_XOR: "xor",
    NodeType.RELATIONAL_EQ: "eq",
    NodeType.RELATIONAL_GEQ: "geq",
    NodeType.RELATIONAL_GT: "gt",
    NodeType.RELATIONAL_LEQ: "leq",
    NodeType.RELATIONAL_LT: "lt",
    NodeType.RELATIONAL_NEQ: "neq",
    NodeType.UNKNOWN: "unknown",
}

_OPERATORS = frozenset(
    {NodeType.PLUS, NodeType.MINUS, NodeType.TIMES, NodeType.DIVIDE, NodeType.POWER}
)
_BOOLEANS = frozenset(
    {
        NodeType.CONSTANT_TRUE,
        NodeType.CONSTANT_FALSE,
        NodeType.LOGICAL_AND,
        NodeType.LOGICAL_NOT,
        NodeType.LOGICAL_OR,
        NodeType.LOGICAL_XOR,
        NodeType.RELATIONAL_EQ,
        NodeType.RELATIONAL_GEQ,
        NodeType.RELATIONAL_GT,
        NodeType.RELATIONAL_LEQ,
        NodeType.RELATIONAL_LT,
        NodeType.RELATIONAL_NEQ,
    }
)


@dataclass(eq=False)
class ASTNode:
    """A node of an expression tree; nodes compare by identity."""

    type: NodeType
    name: str | None = None
    value: float = 0
    children: list[ASTNode] = field(default_factory=list)

    @property
    def left(self) -> ASTNode | None:
        """First child, or None if there are no children."""
        return self.children[0] if self.children else None

    @property
    def right(self) -> ASTNode | None:
        """Last child when there are at least two children, else None."""
        return self.children[-1] if len(self.children) > 1 else None

    @property
    def is_operator(self) -> bool:
        """True for the arithmetic operators + - * / and power."""
        return self.type in _OPERATORS

    @property
    def is_function(self) -> bool:
        """True for built-in and user-defined function nodes."""
        return NodeType.FUNCTION <= self.type <= NodeType.FUNCTION_TANH

    @property
    def is_boolean(self) -> bool:
        """True for logical, relational and boolean-constant nodes."""
        return self.type in _BOOLEANS

    def add_child(self, child: ASTNode) -> None:
        """Append a child node."""
        self.children.append(child)

    def replace_child(self, index: int, child: ASTNode) -> ASTNode:
        """Put child at index and return the node it replaced."""
        if not 0 <= index < len(self.children):
            raise IndexError(f"child index {index} out of range")
        old = self.children[index]
        self.children[index] = child
        return old

    def remove_child(self, index: int) -> ASTNode:
        """Remove and return the child at index."""
        if not 0 <= index < len(self.children):
            raise IndexError(f"child index {index} out of range")
        return self.children.pop(index)

    def deep_copy(self) -> ASTNode:
        """Return an independent copy of the whole subtree."""
        return copy.deepcopy(self)

    def reduce_to_binary(self) -> None:
        """Rewrite an n-ary node as a left-nested chain of binary nodes."""
        while len(self.children) > 2:
            first, second, *rest = self.children
            self.children = [ASTNode(self.type, children=[first, second]), *rest]

    def replace_argument(self, name: str, value: ASTNode) -> None:
        """Replace every name node called name with a copy of value."""
        if not self.children and self.type is NodeType.NAME and self.name == name:
            replacement = value.deep_copy()
            self.type = replacement.type
            self.name = replacement.name
            self.value = replacement.value
            self.children = replacement.children
            return
        for index, child in enumerate(self.children):
            if child.type is NodeType.NAME:
                if child.name == name:
                    self.children[index] = value.deep_copy()
            else:
                child.replace_argument(name, value)

    def label(self) -> str:
        """Short text describing this node alone."""
        match self.type:
            case NodeType.INTEGER:
                return f"integer({int(self.value)})"
            case NodeType.REAL:
                return f"real({float(self.value):f})"
            case NodeType.NAME:
                return f"name({self.name})"
            case NodeType.FUNCTION:
                return f"function({self.name})"
            case _:
                return self.type.symbol


def _post_order(node: ASTNode) -> Iterator[ASTNode]:
    for child in node.children:
        yield from _post_order(child)
    yield node


def describe_tree(node: ASTNode | None) -> str:
    """Describe a tree in post-order, one label per node, ending in a blank line."""
    if node is None:
        return ""
    return "".join(f"{n.label()} " for n in _post_order(node)) + "\n\n"