import numpy as np
from .CostFunction import CostFunction


class LeastSquares(CostFunction):
    # 0.5 * sum((o - y)^2) per sample, averaged over the batch
    def compute(self, output, expected):
        m = expected.shape[0]
        return float(0.5 * np.sum((output - expected) ** 2) / m)

    def differentiate(self, output, expected):
        m = expected.shape[0]
        return (output - expected) / m
