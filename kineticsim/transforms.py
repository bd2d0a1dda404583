"""Rewrites applied to model mathematics before it is turned into equations.

They expand calls to user-defined functions, turn piecewise expressions
into sums of products, make unary minus binary, and convert species
references between amounts and concentrations.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from kineticsim.ast import ASTNode, NodeType

__all__ = [
    "SpeciesInfo",
    "CompartmentInfo",
    "FunctionDefinition",
    "ModelInfo",
    "minus_func",
    "alter_tree_structure",
    "pre_ev_alter_tree_structure",
    "ev_alter_tree_structure",
    "post_ev_alter_tree_structure",
]


@dataclass
class SpeciesInfo:
    """What the rewrites need to know about a species."""

    id: str
    compartment: str
    has_only_substance_units: bool = False
    initial_amount: float | None = None
    initial_concentration: float | None = None

    @property
    def is_set_initial_amount(self) -> bool:
        return self.initial_amount is not None

    @property
    def is_set_initial_concentration(self) -> bool:
        return self.initial_concentration is not None


@dataclass
class CompartmentInfo:
    """What the rewrites need to know about a compartment."""

    id: str
    spatial_dimensions: float = 3


@dataclass
class FunctionDefinition:
    """A user-defined function: parameter names and a body."""

    id: str
    arguments: list[str]
    body: ASTNode


@dataclass
class ModelInfo:
    """The parts of a model the rewrites look up by identifier."""

    species: list[SpeciesInfo] = field(default_factory=list)
    compartments: list[CompartmentInfo] = field(default_factory=list)
    function_definitions: list[FunctionDefinition] = field(default_factory=list)

    def species_by_id(self, sid: str | None) -> SpeciesInfo | None:
        """Return the species with this id, or None."""
        return next((s for s in self.species if s.id == sid), None)

    def compartment_by_id(self, cid: str | None) -> CompartmentInfo | None:
        """Return the compartment with this id, or None."""
        return next((c for c in self.compartments if c.id == cid), None)

    def function_by_id(self, fid: str | None) -> FunctionDefinition | None:
        """Return the function definition with this id, or None."""
        return next((f for f in self.function_definitions if f.id == fid), None)


def _zero() -> ASTNode:
    return ASTNode(NodeType.REAL, value=0.0)


def _is_unary_minus(node: ASTNode) -> bool:
    return node.type == NodeType.MINUS and len(node.children) == 1


def _binary_minus(node: ASTNode) -> None:
    node.children.insert(0, _zero())


def minus_func(node: ASTNode) -> None:
    """Turn every unary minus in the tree into ``0 - x``, in place."""
    if _is_unary_minus(node):
        _binary_minus(node)
    for child in node.children:
        minus_func(child)


def _inline_function(model: ModelInfo, node: ASTNode) -> ASTNode | None:
    definition = model.function_by_id(node.name)
    if definition is None:
        return None
    if len(node.children) < len(definition.arguments):
        raise ValueError(
            f"function {definition.id!r} takes {len(definition.arguments)} "
            f"arguments, {len(node.children)} given"
        )
    body = definition.body.deep_copy()
    for argument, value in zip(definition.arguments, node.children):
        body.replace_argument(argument, value)
    return body


def _expand_piecewise(node: ASTNode, pad_otherwise: bool) -> None:
    """Rewrite piecewise(v0, c0, v1, c1, ..., otherwise) as a sum of products."""
    if pad_otherwise and len(node.children) % 2 == 0:
        node.add_child(_zero())
    if len(node.children) < 2:
        raise ValueError("piecewise needs at least one value and one condition")
    node.type = NodeType.PLUS
    node.name = None
    children = node.children
    count = len(children)

    otherwise = ASTNode(NodeType.TIMES, children=[children[-1]])
    if count > 3:
        conditions = [children[p] for p in range(count - 2, 0, -2)]
        and_node = ASTNode(
            NodeType.LOGICAL_AND,
            children=[ASTNode(NodeType.LOGICAL_NOT, children=[c]) for c in conditions],
        )
        and_node.reduce_to_binary()
        otherwise.add_child(and_node)
    else:
        otherwise.add_child(ASTNode(NodeType.LOGICAL_NOT, children=[children[1]]))
    node.replace_child(count - 1, otherwise)

    for p in range(count - 2, 0, -2):
        piece = ASTNode(
            NodeType.TIMES, children=[children[p - 1], children[p].deep_copy()]
        )
        node.remove_child(p)
        node.replace_child(p - 1, piece)
    node.reduce_to_binary()


def _scale_species(model: ModelInfo, node: ASTNode, require_amount: bool) -> ASTNode:
    species = model.species_by_id(node.name)
    if species is None:
        return node
    compartment = model.compartment_by_id(species.compartment)
    if compartment is None:
        raise KeyError(
            f"compartment {species.compartment!r} of species {species.id!r} not found"
        )
    if compartment.spatial_dimensions == 0:
        return node
    if not species.has_only_substance_units and (
        species.is_set_initial_amount or not require_amount
    ):
        op = NodeType.DIVIDE
    elif species.has_only_substance_units and species.is_set_initial_concentration:
        op = NodeType.TIMES
    else:
        return node
    return ASTNode(op, children=[node, ASTNode(NodeType.NAME, name=compartment.id)])


def alter_tree_structure(model: ModelInfo, node: ASTNode) -> ASTNode:
    """Normalise an expression for evaluation; returns the (possibly new) root.

    Unary minus becomes binary, empty and single-operand operators are
    given their neutral values, species are converted between amount and
    concentration, function calls are expanded and piecewise expressions
    become sums of products.
    """
    if _is_unary_minus(node):
        _binary_minus(node)

    if not node.children:
        if node.type == NodeType.PLUS:
            node.type, node.value = NodeType.REAL, 0.0
        elif node.type == NodeType.TIMES:
            node.type, node.value = NodeType.REAL, 1.0
        elif node.type == NodeType.LOGICAL_AND:
            node.type, node.value = NodeType.INTEGER, 1
        elif node.type in (NodeType.LOGICAL_OR, NodeType.LOGICAL_XOR):
            node.type, node.value = NodeType.INTEGER, 0

    if len(node.children) == 1 and node.type in (
        NodeType.PLUS,
        NodeType.TIMES,
        NodeType.LOGICAL_AND,
        NodeType.LOGICAL_OR,
        NodeType.LOGICAL_XOR,
    ):
        node.type = NodeType.PLUS
        node.add_child(_zero())

    node.children = [alter_tree_structure(model, child) for child in node.children]

    if node.type == NodeType.NAME:
        node = _scale_species(model, node, require_amount=True)

    if node.type == NodeType.FUNCTION:
        body = _inline_function(model, node)
        if body is not None:
            minus_func(body)
            node = body

    if node.type == NodeType.FUNCTION_PIECEWISE:
        _expand_piecewise(node, pad_otherwise=True)
    return node


def pre_ev_alter_tree_structure(node: ASTNode, delay_math: ASTNode) -> ASTNode:
    """Wrap every name as ``delay(name, delay_math)``; returns the new root."""
    node.children = [
        pre_ev_alter_tree_structure(child, delay_math) for child in node.children
    ]
    if node.type == NodeType.NAME:
        return ASTNode(
            NodeType.FUNCTION_DELAY, children=[node, delay_math.deep_copy()]
        )
    return node


def ev_alter_tree_structure(model: ModelInfo, node: ASTNode) -> ASTNode:
    """Normalise event mathematics; returns the (possibly new) root.

    Unary minus becomes binary, function calls are expanded and piecewise
    expressions become sums of products (no default otherwise is added).
    """
    if _is_unary_minus(node):
        _binary_minus(node)
    node.children = [ev_alter_tree_structure(model, child) for child in node.children]

    if node.type == NodeType.FUNCTION:
        body = _inline_function(model, node)
        if body is not None:
            node = body

    if node.type == NodeType.FUNCTION_PIECEWISE:
        _expand_piecewise(node, pad_otherwise=False)
    return node


def post_ev_alter_tree_structure(model: ModelInfo, node: ASTNode) -> ASTNode:
    """Convert species references in event mathematics; returns the new root."""
    node.children = [
        post_ev_alter_tree_structure(model, child) for child in node.children
    ]
    if node.type == NodeType.NAME:
        return _scale_species(model, node, require_amount=False)
    return node