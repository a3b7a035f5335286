# scalar_autograd/nn/optim.py
import logging
import numpy as np
from typing import List, Optional, Sequence

from ..autograd.core.node import Node
from ..config import TrainingConfig

logger = logging.getLogger(__name__)


class SGD:
    """
    Plain gradient descent over a fixed parameter list.

    The update p.value -= lr_k * p.grad reads gradients left by the last
    backward pass, so step() must only be called once that pass is done.
    Graphs built before the step hold outdated values afterwards; build a
    fresh one for the next pass.
    """

    def __init__(self, parameters: Sequence[Node], config: Optional[TrainingConfig] = None):
        self.parameters: List[Node] = list(parameters)
        self.config = config or TrainingConfig()

    def zero_grad(self):
        for p in self.parameters:
            p.grad = np.float64(0.0)

    def step(self, k: int) -> float:
        """Apply update number `k` and return the learning rate used."""
        lr = self.config.learning_rate_at(k)
        for p in self.parameters:
            p.value -= lr * p.grad
        logger.debug(f"[SGD] step {k} lr={lr:.6f}")
        return lr
