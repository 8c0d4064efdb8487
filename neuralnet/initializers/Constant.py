import numpy as np
from .Initializer import Initializer


class Constant(Initializer):
    def __init__(self, value=0.0):
        self.value = float(value)

    def initialize(self, fan_in, fan_out, rng):
        return np.full((fan_out, fan_in), self.value)

    def __repr__(self):
        return f"Constant(value={self.value})"
