"""
Training configuration.

Hyperparameters of the optimizer helpers live here; the autograd engine
itself has nothing to configure.
"""

from dataclasses import dataclass


@dataclass
class TrainingConfig:
    """Hyperparameters for SGD and the regularized SVM loss."""

    # SGD: lr_k = learning_rate * (1 - lr_decay * k / num_steps)
    learning_rate: float = 1.0
    lr_decay: float = 0.9
    num_steps: int = 100

    # L2 regularization strength
    l2_alpha: float = 1e-4

    def __post_init__(self):
        if self.learning_rate <= 0:
            raise ValueError(f"learning_rate must be positive, got {self.learning_rate}")
        if not 0.0 <= self.lr_decay <= 1.0:
            raise ValueError(f"lr_decay must be in [0, 1], got {self.lr_decay}")
        if self.num_steps < 1:
            raise ValueError(f"num_steps must be at least 1, got {self.num_steps}")
        if self.l2_alpha < 0:
            raise ValueError(f"l2_alpha must be non-negative, got {self.l2_alpha}")

    def learning_rate_at(self, step: int) -> float:
        """Linearly decayed learning rate for optimizer step `step` (0-based)."""
        return self.learning_rate * (1.0 - self.lr_decay * step / self.num_steps)
