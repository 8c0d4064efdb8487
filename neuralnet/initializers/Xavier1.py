import numpy as np
from .Initializer import Initializer


class Xavier1(Initializer):
    """Glorot uniform: U(-limit, +limit) with limit = sqrt(6 / (fan_in + fan_out))."""

    def initialize(self, fan_in, fan_out, rng):
        limit = np.sqrt(6.0 / (fan_in + fan_out))
        return rng.uniform(-limit, limit, size=(fan_out, fan_in))
