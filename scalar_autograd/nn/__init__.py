# scalar_autograd/nn/__init__.py

from .module import Module, Neuron, Layer, MLP, argmax_label
from .losses import one_hot, hinge_loss, l2_penalty, accuracy, svm_loss
from .optim import SGD

__all__ = [
    "Module", "Neuron", "Layer", "MLP", "argmax_label",
    "one_hot", "hinge_loss", "l2_penalty", "accuracy", "svm_loss",
    "SGD",
]
