# kineticsim

Building blocks for working with biochemical reaction models: the codes
and properties of numerical integration methods, math helpers for kinetic
laws, mathematical expression trees, rewrites that prepare those trees for
evaluation, and the simulation state of parameters and compartments.

## Modules

- `kineticsim.methods`: the `Method` enum of integration method codes. The
  tens digit of a code is its order and the units digit is 1 for explicit
  methods and 0 for implicit ones. `method_name`, `order`, `is_explicit` and
  `is_variable_step` read these properties. Unknown codes are treated as
  Runge-Kutta. `method_from_key` maps the menu keys 1 to 14 to methods, and
  any other key to Runge-Kutta.
- `kineticsim.mathfuncs`: `asinh`, `acosh`, `atanh`, `log1p`, `factorial`,
  `fmax`, `fmin` and `isnan`. Inputs outside a function's domain give NaN or
  an infinity and do not raise.
- `kineticsim.ast`: `ASTNode` and `NodeType`. A node supports `add_child`,
  `replace_child`, `remove_child`, `deep_copy`, `reduce_to_binary` (n-ary to
  left-nested binary) and `replace_argument` (substitute a named argument),
  and has `label`. `describe_tree` gives a post-order dump of a tree.
- `kineticsim.simple_rewrites`: `alg_alter_tree_structure` wraps names as
  `1 * name`. `assignment_alter_tree_structure` multiplies or divides an
  expression by a compartment, as chosen by `CompartmentScaling`.
- `kineticsim.transforms`: `ModelInfo`, `SpeciesInfo`, `CompartmentInfo` and
  `FunctionDefinition` describe the parts of a model that the rewrites look
  up. The rewrites are:
  - `alter_tree_structure`: makes unary minus binary, gives empty and
    single-operand operators their neutral values, scales species by their
    compartment, expands calls to user functions and turns piecewise
    expressions into sums of products.
  - `ev_alter_tree_structure`, `pre_ev_alter_tree_structure` and
    `post_ev_alter_tree_structure`: the same kinds of rewrite for event
    mathematics.
  - `minus_func`: makes every unary minus binary.

  Each rewrite returns the root of the tree, which may be a new node.
- `kineticsim.quantities`: `Parameter` (value 0 when unset) and `Compartment`
  (size 1 when unset). Both have a delay history that `init_delay_val`
  creates and `realloc_delay_val` resizes. Compartments also keep a list of
  the species they contain, added with `add_including_species`.
  `count_including_species` counts species by compartment id.

## Installing

```
pip install .
```

## Examples

```python
from kineticsim.methods import method_from_key, method_name, order, is_explicit

method = method_from_key(1)
print(method_name(method), order(method), is_explicit(method))
# 4th order Runge-Kutta 4 True
```

```python
from kineticsim.ast import ASTNode, NodeType, describe_tree

tree = ASTNode(NodeType.PLUS)
tree.add_child(ASTNode(NodeType.NAME, name="S1"))
tree.add_child(ASTNode(NodeType.INTEGER, value=1))
print(describe_tree(tree))
# name(S1) integer(1) +
```

```python
from kineticsim.ast import ASTNode, NodeType
from kineticsim.transforms import (
    CompartmentInfo, ModelInfo, SpeciesInfo, alter_tree_structure,
)

model = ModelInfo(
    species=[SpeciesInfo("S1", "cell", initial_amount=1.0)],
    compartments=[CompartmentInfo("cell")],
)
root = alter_tree_structure(model, ASTNode(NodeType.NAME, name="S1"))
print(root.type.name, [c.name for c in root.children])
# DIVIDE ['S1', 'cell']
```

## What this package does not do

It does not read model files, and it does not turn expression trees into
evaluable equations. It has no integrator that runs a simulation, no result
tables or CSV output, and no command-line program. Its modules are the
pieces named above, and you call them from your own code.

## Running the tests

```
pip install .[test]
pytest
```