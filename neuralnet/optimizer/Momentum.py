from .Optimizer import Optimizer
from ..exceptions import ConfigurationError


class Momentum(Optimizer):
    """
    Gradient descent with a velocity accumulator.

        v = (1 - decay) * v + rate * g
        delta = v                               (classic)
        delta = (1 - decay) * v + rate * g      (Nesterov lookahead)
    """

    slots = ("velocity",)

    def __init__(self, rate=0.001, decay=0.1, lookahead=False):
        super().__init__(rate)
        if not 0.0 < decay < 1.0:
            raise ConfigurationError(f"Decay must be between 0 and 1, {decay} given.")
        self.decay = float(decay)
        self.lookahead = bool(lookahead)

    def update(self, param_id, gradient):
        rec = self._record(param_id, gradient)
        step = self.rate * gradient
        v = rec["velocity"]
        v[...] = (1.0 - self.decay) * v + step
        if self.lookahead:
            return (1.0 - self.decay) * v + step
        return v.copy()

    def __repr__(self):
        return f"Momentum(rate={self.rate}, decay={self.decay}, lookahead={self.lookahead})"
