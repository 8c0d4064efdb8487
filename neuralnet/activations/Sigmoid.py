import numpy as np
from .ActivationFunction import ActivationFunction


def sigmoid(z):
    # split by sign to keep exp() from overflowing
    out = np.empty_like(z, dtype=np.float64)
    pos = z >= 0
    out[pos] = 1.0 / (1.0 + np.exp(-z[pos]))
    ez = np.exp(z[~pos])
    out[~pos] = ez / (1.0 + ez)
    return out


class Sigmoid(ActivationFunction):
    """Logistic sigmoid. The derivative is computed from the output: a * (1 - a)."""

    def compute(self, z):
        return sigmoid(np.asarray(z, dtype=np.float64))

    def differentiate(self, z, a):
        return a * (1.0 - a)
