# scalar_autograd/autograd/core/__init__.py

"""
Core public API of the autograd engine.

Exports:
    Node                 : Differentiable scalar value and graph edge.
    Op                   : Operation tag selecting a node's backward rule.
    forward              : Topological order of the graph ending at a node.
    backward             : Single reverse pass accumulating gradients.
    zero_grad            : Reset gradients of every node in a graph.
    AutogradError        : Base class of the package's errors.
    UnsupportedOperation : Operation without a gradient rule (x ** 0).
    ShapeMismatch        : Feature vector of the wrong length.
"""

from .node import Node, Op
from .errors import AutogradError, UnsupportedOperation, ShapeMismatch
from .engine import forward, backward, zero_grad

__all__ = [
    "Node", "Op",
    "forward", "backward", "zero_grad",
    "AutogradError", "UnsupportedOperation", "ShapeMismatch",
]
