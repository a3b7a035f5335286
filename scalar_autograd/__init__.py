# scalar_autograd/__init__.py
"""
scalar_autograd: reverse-mode automatic differentiation over scalars,
with a small multilayer perceptron built on top.

Usage:
    from scalar_autograd import Node, MLP

    model = MLP(2, [4, 4, 3], seed=0)
    scores = model.eval([Node(0.5), Node(-1.0)])
    loss = sum(((1 + (-1.0 * s)).relu() for s in scores), Node(0.0))
    model.zero_grad()
    loss.backward()
    # p.grad is now populated for every p in model.parameters()
"""

from .autograd import (
    Node,
    Op,
    AutogradError,
    UnsupportedOperation,
    ShapeMismatch,
    forward,
    backward,
    zero_grad,
    tree_lines,
    print_tree,
    get_graph_stats,
    print_graph_summary,
)
from .config import TrainingConfig
from .nn import Module, Neuron, Layer, MLP, argmax_label, SGD

__version__ = "0.1.0"

__all__ = [
    "Node", "Op",
    "AutogradError", "UnsupportedOperation", "ShapeMismatch",
    "forward", "backward", "zero_grad",
    "tree_lines", "print_tree", "get_graph_stats", "print_graph_summary",
    "TrainingConfig",
    "Module", "Neuron", "Layer", "MLP", "argmax_label", "SGD",
    "__version__",
]
