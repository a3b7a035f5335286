# scalar_autograd/nn/losses.py
"""
Loss functions assembled from the autograd primitives.

None of these adds a new operation: each loss is an ordinary expression of
ADD / MUL / POW / RELU nodes, so backward() on the result reaches every
parameter that took part in the scores.
"""

from typing import List, Sequence, Tuple

from ..autograd.core.node import Node
from ..autograd.core.errors import ShapeMismatch
from ..config import TrainingConfig
from .module import Module, argmax_label


def one_hot(label: int, num_classes: int, negative: float = -1.0) -> List[float]:
    """
    ±1 target vector for a 1-based class label.

    one_hot(2, 3) -> [-1.0, 1.0, -1.0]
    """
    if not 1 <= label <= num_classes:
        raise ValueError(f"label {label} outside 1..{num_classes}")
    return [1.0 if k == label else negative for k in range(1, num_classes + 1)]


def hinge_loss(scores_batch: Sequence[Sequence[Node]], targets_batch: Sequence[Sequence[float]]) -> Node:
    """
    SVM "max-margin" loss: mean over all scores of relu(1 - y * s).

    Args:
        scores_batch : per example, the network's output nodes
        targets_batch: per example, ±1 targets aligned with the scores
    """
    if len(scores_batch) != len(targets_batch):
        raise ShapeMismatch(len(scores_batch), len(targets_batch), what="target vectors")

    losses = []
    for scores, targets in zip(scores_batch, targets_batch):
        if len(scores) != len(targets):
            raise ShapeMismatch(len(scores), len(targets), what="targets")
        losses.extend((1 + (-yi * si)).relu() for yi, si in zip(targets, scores))
    if not losses:
        raise ValueError("hinge_loss() needs at least one score")

    total = losses[0]
    for loss in losses[1:]:
        total = total + loss
    return total * (1.0 / len(losses))


def l2_penalty(parameters: Sequence[Node], alpha: float) -> Node:
    """alpha * sum(p * p)."""
    total = Node(0.0)
    for p in parameters:
        total = total + p * p
    return alpha * total


def accuracy(scores_batch: Sequence[Sequence[Node]], labels: Sequence[int]) -> float:
    """Percentage of examples whose highest score is at the (1-based) label."""
    if len(scores_batch) != len(labels):
        raise ShapeMismatch(len(scores_batch), len(labels), what="labels")
    if not labels:
        return 0.0
    hits = sum(1 for scores, y in zip(scores_batch, labels) if argmax_label(scores) == y)
    return 100.0 * hits / len(labels)


def svm_loss(model: Module, inputs: Sequence[Sequence], labels: Sequence[int],
             alpha: float = TrainingConfig.l2_alpha) -> Tuple[Node, float]:
    """
    Regularized max-margin loss of `model` over a batch.

    Args:
        model : network whose eval() returns one score per class
        inputs: feature vectors (numbers or leaf nodes)
        labels: 1-based class labels
        alpha : L2 regularization strength

    Returns:
        (total_loss, accuracy_percent)
    """
    if len(inputs) != len(labels):
        raise ShapeMismatch(len(inputs), len(labels), what="labels")

    xs = [[x if isinstance(x, Node) else Node(x) for x in row] for row in inputs]
    scores = [model.eval(x) for x in xs]
    targets = [one_hot(y, len(s)) for y, s in zip(labels, scores)]

    data_loss = hinge_loss(scores, targets)
    total_loss = data_loss + l2_penalty(model.parameters(), alpha)
    return total_loss, accuracy(scores, labels)
