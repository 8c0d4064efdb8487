import numpy as np
from .CostFunction import CostFunction
from ..exceptions import ConfigurationError


class HuberLoss(CostFunction):
    """
    Pseudo-Huber loss, quadratic near zero and linear for large errors.

        L(r) = alpha^2 * (sqrt(1 + (r / alpha)^2) - 1)
        dL/dr = r / sqrt(1 + (r / alpha)^2)
    """

    def __init__(self, alpha=0.9):
        if alpha <= 0.0:
            raise ConfigurationError(f"Alpha must be greater than 0, {alpha} given.")
        self.alpha = float(alpha)

    def compute(self, output, expected):
        m = expected.shape[0]
        r = output - expected
        a2 = self.alpha ** 2
        return float(np.sum(a2 * (np.sqrt(1.0 + r ** 2 / a2) - 1.0)) / m)

    def differentiate(self, output, expected):
        m = expected.shape[0]
        r = output - expected
        return r / np.sqrt(1.0 + r ** 2 / self.alpha ** 2) / m

    def __repr__(self):
        return f"HuberLoss(alpha={self.alpha})"
