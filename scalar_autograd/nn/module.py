# scalar_autograd/nn/module.py
from __future__ import annotations
import logging
import numpy as np
from typing import List, Optional, Sequence

from ..autograd.core.node import Node
from ..autograd.core.errors import ShapeMismatch

logger = logging.getLogger(__name__)


class Module:
    """
    Base class for all network modules.

    Subclasses return their trainable leaves from parameters(), in a stable
    order an optimizer can rely on across steps.
    """

    def parameters(self) -> List[Node]:
        return []

    def zero_grad(self):
        """Sets gradients of all model parameters to zero."""
        for p in self.parameters():
            p.grad = np.float64(0.0)

    def __call__(self, inputs):
        return self.eval(inputs)

    def eval(self, inputs):
        raise NotImplementedError("Subclasses of Module must implement an eval method.")


class Neuron(Module):
    """
    A single unit: sum(w_i * x_i) + b, optionally followed by ReLU.

    Weights are drawn uniformly from [-1, 1] with `rng`; the bias starts at 0.
    """

    def __init__(self, n_inputs: int, nonlinear: bool = True, rng: Optional[np.random.Generator] = None):
        if rng is None:
            rng = np.random.default_rng()
        self.weights = [Node(rng.uniform(-1.0, 1.0)) for _ in range(n_inputs)]
        self.bias = Node(0.0)
        self.nonlinear = nonlinear

    @property
    def n_inputs(self) -> int:
        return len(self.weights)

    def eval(self, inputs: Sequence) -> Node:
        # checked up front: zip() would silently drop the extra inputs or weights
        if len(inputs) != self.n_inputs:
            raise ShapeMismatch(self.n_inputs, len(inputs))

        act = None
        for wi, xi in zip(self.weights, inputs):
            term = wi * xi
            act = term if act is None else act + term
        act = self.bias if act is None else act + self.bias

        return act.relu() if self.nonlinear else act

    def parameters(self) -> List[Node]:
        return self.weights + [self.bias]

    def __repr__(self):
        kind = "ReLU" if self.nonlinear else "Linear"
        return f"{kind}Neuron({self.n_inputs})"


class Layer(Module):
    """n_out independent neurons reading the same n_in inputs."""

    def __init__(self, n_in: int, n_out: int, nonlinear: bool = True, rng: Optional[np.random.Generator] = None):
        if rng is None:
            rng = np.random.default_rng()
        self.neurons = [Neuron(n_in, nonlinear=nonlinear, rng=rng) for _ in range(n_out)]

    def eval(self, inputs: Sequence) -> List[Node]:
        return [n.eval(inputs) for n in self.neurons]

    def parameters(self) -> List[Node]:
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self):
        return f"Layer of [{', '.join(str(n) for n in self.neurons)}]"


class MLP(Module):
    """
    Feed-forward network n_in -> layer_sizes[0] -> ... -> layer_sizes[-1].

    Every layer applies ReLU except the last one, which is linear and
    returns raw scores.
    """

    def __init__(self, n_in: int, layer_sizes: Sequence[int],
                 rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        if not layer_sizes:
            raise ValueError("MLP needs at least one layer size")
        if rng is None:
            rng = np.random.default_rng(seed)

        sizes = [n_in] + list(layer_sizes)
        self.layers = [
            Layer(sizes[i], sizes[i + 1], nonlinear=i != len(layer_sizes) - 1, rng=rng)
            for i in range(len(layer_sizes))
        ]
        logger.debug(f"[MLP] Built {sizes} with {len(self.parameters())} parameters")

    def eval(self, inputs: Sequence) -> List[Node]:
        out = list(inputs)
        for layer in self.layers:
            out = layer.eval(out)
        return out

    def parameters(self) -> List[Node]:
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        return f"MLP of [{', '.join(str(layer) for layer in self.layers)}]"


def argmax_label(scores: Sequence) -> int:
    """
    1-based index of the highest score (ties go to the first).

    Class labels in the training data are numbered from 1, so the result can
    be compared with them directly.
    """
    if not scores:
        raise ValueError("argmax_label() of an empty score list")
    values = [s.value if isinstance(s, Node) else float(s) for s in scores]
    return int(np.argmax(values)) + 1
