import numpy as np
from .ActivationFunction import ActivationFunction


class HyperbolicTangent(ActivationFunction):
    """tanh. The derivative is computed from the output: 1 - a^2."""

    def compute(self, z):
        return np.tanh(z)

    def differentiate(self, z, a):
        return 1.0 - a ** 2
