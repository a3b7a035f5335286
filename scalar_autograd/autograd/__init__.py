# scalar_autograd/autograd/__init__.py
# Scalar reverse-mode automatic differentiation

from .core.node import Node, Op
from .core.errors import AutogradError, UnsupportedOperation, ShapeMismatch
from .core.engine import forward, backward, zero_grad
from .core.graph_utils import tree_lines, print_tree, get_graph_stats, print_graph_summary

# Operators
from . import ops
from .ops import add, sub, mul, div, neg, pow, relu, sigmoid

__all__ = [
    # Core
    'Node',
    'Op',
    'AutogradError',
    'UnsupportedOperation',
    'ShapeMismatch',
    # Engine
    'forward',
    'backward',
    'zero_grad',
    # Debug
    'tree_lines',
    'print_tree',
    'get_graph_stats',
    'print_graph_summary',
    # Ops
    'ops',
    'add', 'sub', 'mul', 'div', 'neg', 'pow',
    'relu', 'sigmoid',
]
