import numpy as np
from .Optimizer import Optimizer
from ..exceptions import ConfigurationError


class RMSProp(Optimizer):
    slots = ("norm",)

    def __init__(self, rate=0.001, decay=0.1, epsilon=1e-8):
        super().__init__(rate)
        if not 0.0 < decay < 1.0:
            raise ConfigurationError(f"Decay must be between 0 and 1, {decay} given.")
        if epsilon <= 0.0:
            raise ConfigurationError(f"Epsilon must be greater than 0, {epsilon} given.")
        self.decay = float(decay)
        self.epsilon = float(epsilon)

    def update(self, param_id, gradient):
        rec = self._record(param_id, gradient)
        n = rec["norm"]
        n[...] = (1.0 - self.decay) * n + self.decay * gradient ** 2
        return self.rate * gradient / (np.sqrt(n) + self.epsilon)

    def __repr__(self):
        return f"RMSProp(rate={self.rate}, decay={self.decay}, epsilon={self.epsilon})"
