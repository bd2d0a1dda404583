"""Small rewrites of expression trees used when building equations."""

from __future__ import annotations

from enum import IntEnum

from kineticsim.ast import ASTNode, NodeType

__all__ = [
    "CompartmentScaling",
    "alg_alter_tree_structure",
    "assignment_alter_tree_structure",
]


class CompartmentScaling(IntEnum):
    """How an assignment's value is scaled by its compartment size."""

    TIMES = 0
    DIVIDE = 1


def _wrap_name(node: ASTNode) -> ASTNode:
    return ASTNode(
        NodeType.TIMES,
        children=[ASTNode(NodeType.INTEGER, value=1), node],
    )


def alg_alter_tree_structure(node: ASTNode) -> ASTNode:
    """Wrap every name reachable through left and right children as ``1 * name``.

    The tree is changed in place; the (possibly new) root is returned.
    """
    left = node.left
    if left is not None:
        node.children[0] = alg_alter_tree_structure(left)
    right = node.right
    if right is not None:
        node.children[-1] = alg_alter_tree_structure(right)
    if node.type == NodeType.NAME:
        return _wrap_name(node)
    return node


def assignment_alter_tree_structure(
    node: ASTNode, comp_name: str, mode: int
) -> ASTNode:
    """Multiply or divide an expression by the named compartment.

    Any mode other than TIMES or DIVIDE leaves the expression unchanged.
    """
    if mode == CompartmentScaling.TIMES:
        op = NodeType.TIMES
    elif mode == CompartmentScaling.DIVIDE:
        op = NodeType.DIVIDE
    else:
        return node
    return ASTNode(op, children=[node, ASTNode(NodeType.NAME, name=comp_name)])