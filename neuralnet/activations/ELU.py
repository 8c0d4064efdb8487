import numpy as np
from .ActivationFunction import ActivationFunction
from ..exceptions import ConfigurationError


class ELU(ActivationFunction):
    """
    Exponential linear unit.

        f(z) = z                    if z > 0
        f(z) = alpha * (e^z - 1)    otherwise

    The negative branch derivative is recovered from the output: f(z) + alpha.
    """

    def __init__(self, alpha=1.0):
        if alpha < 0.0:
            raise ConfigurationError(
                f"Alpha must be greater than or equal to 0, {alpha} given."
            )
        self.alpha = float(alpha)

    def compute(self, z):
        # clip the exponent so large positive inputs don't overflow in the unused branch
        return np.where(z > 0, z, self.alpha * (np.exp(np.minimum(z, 0.0)) - 1.0))

    def differentiate(self, z, a):
        return np.where(z > 0, 1.0, a + self.alpha)

    def __repr__(self):
        return f"ELU(alpha={self.alpha})"
