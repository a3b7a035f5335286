# scalar_autograd/autograd/core/node.py
from __future__ import annotations
import enum
import numbers
import numpy as np
from typing import List, Optional, Tuple


class Op(enum.Enum):
    """Operation tag selecting the backward rule of a node."""
    NONE = ""
    ADD = "+"
    MUL = "*"
    POW = "**"
    RELU = "ReLU"
    SIGMOID = "sigmoid"


class Node:
    """
    A scalar value tracked in the computation graph.

    Attributes
    ----------
    value : np.float64
        Forward value, computed eagerly when the node is built. Leaves may be
        overwritten by an optimizer between steps.
    grad : np.float64
        Accumulated d(root)/d(this node). Starts at 0 and is only ever added to
        during backward.
    op : Op
        Which rule produced this node; Op.NONE for leaves.
    operands : Tuple[Node, ...]
        Immediate inputs (0 for leaves, 1 for unary ops, 2 for binary ops).
    exponent : Optional[int]
        Integer exponent of an Op.POW node; None otherwise.
    name : Optional[str]
        Optional debug/pretty-print name.
    """

    def __init__(self, value, _operands: Tuple["Node", ...] = (), _op: Op = Op.NONE,
                 *, exponent: Optional[int] = None, name: Optional[str] = None):
        # Only plain numeric scalars are accepted (bool is an int subclass and passes)
        if not isinstance(value, (numbers.Real, np.floating, np.integer)):
            raise TypeError(
                f"Node only accepts real numeric scalars (int, float), but got {type(value)}"
            )
        self.value = np.float64(value)
        self.grad = np.float64(0.0)
        self.op = _op
        self.operands = tuple(_operands)
        self.exponent = exponent
        self.name = name

        # cached topological order, filled by forward()
        self._topo: Optional[List[Node]] = None

    def __repr__(self):
        return f"Node(value={self.value}, grad={self.grad}, op={self.op.value!r})"

    @property
    def is_leaf(self) -> bool:
        return not self.operands

    # ------------------------------------------------------------------ #
    # graph traversal
    # ------------------------------------------------------------------ #
    def forward(self) -> List["Node"]:
        """Build (and cache) the topological order of the graph ending here."""
        from .engine import forward
        self._topo = forward(self)
        return self._topo

    def backward(self, force_rebuild: bool = False) -> None:
        """Seed this node with grad 1 and accumulate gradients into every ancestor."""
        from .engine import backward
        backward(self, force_rebuild=force_rebuild)

    def zero_grad(self) -> None:
        """Reset the gradient of every node reachable from this one."""
        from .engine import zero_grad
        zero_grad(self)

    # ------------------------------------------------------------------ #
    # operator overloading
    # ------------------------------------------------------------------ #
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, exponent):
        if isinstance(exponent, Node):
            return NotImplemented
        from ..ops.arithmetic import pow
        return pow(self, exponent)

    def relu(self):
        from ..ops.activations import relu
        return relu(self)

    def sigmoid(self):
        from ..ops.activations import sigmoid
        return sigmoid(self)
