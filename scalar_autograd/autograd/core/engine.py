# scalar_autograd/autograd/core/engine.py
from __future__ import annotations
import logging
import numpy as np
from typing import Callable, Dict, List
from .node import Node, Op
from ..ops.arithmetic import add_backward, mul_backward, pow_backward
from ..ops.activations import relu_backward, sigmoid_backward

logger = logging.getLogger(__name__)


def _leaf_backward(out: Node):
    pass


# One rule per operation tag; the engine never looks at anything else.
_BACKWARD_RULES: Dict[Op, Callable[[Node], None]] = {
    Op.NONE: _leaf_backward,
    Op.ADD: add_backward,
    Op.MUL: mul_backward,
    Op.POW: pow_backward,
    Op.RELU: relu_backward,
    Op.SIGMOID: sigmoid_backward,
}


def forward(root: Node) -> List[Node]:
    """
    Linearize the graph ending at `root` into a topological order.

    Depth-first post-order: first operand, then second operand, then the node
    itself, so every node appears after all of its operands. Nodes are
    deduplicated by identity (two distinct nodes may hold equal values).

    The walk uses an explicit stack; wide neurons produce addition chains far
    deeper than the interpreter's recursion limit.

    Precondition: the graph is acyclic. Operands are fixed at construction to
    already-existing nodes, so this holds for any graph built through the ops.
    """
    order: List[Node] = []
    visited = set()
    stack = [(root, False)]
    while stack:
        v, expanded = stack.pop()
        if expanded:
            order.append(v)
            continue
        if id(v) in visited:
            continue
        visited.add(id(v))
        stack.append((v, True))
        # reversed, so the first operand is popped (and fully walked) first
        for child in reversed(v.operands):
            if id(child) not in visited:
                stack.append((child, False))
    return order


def backward(root: Node, force_rebuild: bool = False) -> None:
    """
    Run a single reverse pass from `root`.

    Args:
        root: scalar output to differentiate.
        force_rebuild: recompute the topological order even if one is cached
                       on `root`.

    Notes:
        - root.grad is set to 1 (d root / d root) before propagation.
        - Rules accumulate (+=) into operand gradients; call zero_grad between
          passes that should not add up.
        - Node values are read, never written, so they must not be changed
          until this function returns.
    """
    if root._topo is None or force_rebuild:
        root.forward()
        logger.debug(f"[Engine] Built topological order ({len(root._topo)} nodes)")
    else:
        logger.debug(f"[Engine] Reusing cached topological order ({len(root._topo)} nodes)")

    root.grad = np.float64(1.0)
    for v in reversed(root._topo):
        _BACKWARD_RULES[v.op](v)


def zero_grad(root: Node) -> None:
    """Set .grad to zero on every node reachable from `root`."""
    for v in forward(root):
        v.grad = np.float64(0.0)
