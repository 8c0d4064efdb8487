import numpy as np
from .ActivationFunction import ActivationFunction


class ReLU(ActivationFunction):
    """Rectified linear unit. The derivative is taken from the input, 0 at z = 0."""

    def compute(self, z):
        return np.maximum(0.0, z)

    def differentiate(self, z, a):
        return (z > 0).astype(np.float64)
