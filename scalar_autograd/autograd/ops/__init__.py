# scalar_autograd/autograd/ops/__init__.py

# Convenience re-exports so users can do: from scalar_autograd.autograd.ops import mul, relu, ...
from .arithmetic import add, sub, mul, div, neg, pow
from .activations import relu, sigmoid

__all__ = [
    "add", "sub", "mul", "div", "neg", "pow",
    "relu", "sigmoid",
]
