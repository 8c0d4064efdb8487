import numpy as np
from .ActivationFunction import ActivationFunction
from .Sigmoid import sigmoid


class SiLU(ActivationFunction):
    """
    Sigmoid-weighted linear unit (a.k.a. Swish with beta = 1).

        f(z)  = z * s(z)
        f'(z) = s(z) + z * s(z) * (1 - s(z))

    The derivative needs both the input and the sigmoid of the input.
    """

    def compute(self, z):
        z = np.asarray(z, dtype=np.float64)
        return z * sigmoid(z)

    def differentiate(self, z, a):
        s = sigmoid(np.asarray(z, dtype=np.float64))
        return s + z * s * (1.0 - s)
