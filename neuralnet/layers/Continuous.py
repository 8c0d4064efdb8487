import numbers

import numpy as np
from .Output import Output
from ..cost import LeastSquares
from ..exceptions import LabelMismatchError


class Continuous(Output):
    # single linear unit for regression targets
    def __init__(self, cost=None):
        super().__init__(cost if cost is not None else LeastSquares())

    @property
    def width(self):
        return 1

    def activate(self, z):
        return z

    def infer(self, z):
        return np.ravel(z).copy()

    def encode(self, labels):
        bad = [label for label in labels if not isinstance(label, numbers.Real)]
        if bad:
            raise LabelMismatchError(
                f"Continuous output needs numeric targets, got {bad[:5]}.", labels=bad
            )
        y = np.asarray(labels, dtype=np.float64).reshape(-1, 1)
        if not np.all(np.isfinite(y)):
            raise LabelMismatchError("Continuous targets must be finite.")
        return y

    def decode(self, activations):
        return np.ravel(activations).tolist()

    def gradient(self, a, expected):
        return self.cost.differentiate(a, expected)

    def __repr__(self):
        return f"Continuous(cost={self.cost!r})"
