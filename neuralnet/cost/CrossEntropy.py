import numpy as np
from .CostFunction import CostFunction
from ..exceptions import ConfigurationError


class CrossEntropy(CostFunction):
    def __init__(self, eps=1e-12):
        if not 0.0 < eps < 0.5:
            raise ConfigurationError(f"Epsilon must be in (0, 0.5), {eps} given.")
        self.eps = eps

    def compute(self, output, expected):
        """
        output: (batch, k) probabilities
        expected: (batch, k) one-hot (or soft) targets
        returns: -sum(Y * log(P)) / batch
        """
        m = expected.shape[0]
        P = np.clip(output, self.eps, 1.0 - self.eps)
        return float(-np.sum(expected * np.log(P)) / m)

    def differentiate(self, output, expected):
        m = expected.shape[0]
        P = np.clip(output, self.eps, 1.0 - self.eps)
        return -(expected / P) / m

    def __repr__(self):
        return f"CrossEntropy(eps={self.eps})"
