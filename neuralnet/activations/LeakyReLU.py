import numpy as np
from .ActivationFunction import ActivationFunction
from ..exceptions import ConfigurationError


class LeakyReLU(ActivationFunction):
    """ReLU with a small slope for negative inputs. The derivative is taken from the input, leakage at z = 0."""

    def __init__(self, leakage=0.1):
        if not 0.0 < leakage < 1.0:
            raise ConfigurationError(
                f"Leakage must be between 0 and 1, {leakage} given."
            )
        self.leakage = float(leakage)

    def compute(self, z):
        return np.where(z > 0, z, self.leakage * z)

    def differentiate(self, z, a):
        return np.where(z > 0, 1.0, self.leakage)

    def __repr__(self):
        return f"LeakyReLU(leakage={self.leakage})"
