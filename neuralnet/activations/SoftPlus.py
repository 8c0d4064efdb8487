import numpy as np
from .ActivationFunction import ActivationFunction
from .Sigmoid import sigmoid


class SoftPlus(ActivationFunction):
    # log(1 + e^z), derivative is the sigmoid of the input
    def compute(self, z):
        return np.logaddexp(0.0, z)

    def differentiate(self, z, a):
        return sigmoid(np.asarray(z, dtype=np.float64))
