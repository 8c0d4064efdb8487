import numpy as np
from .Initializer import Initializer


class He(Initializer):
    # He initialization, suited to ReLU hidden layers
    def initialize(self, fan_in, fan_out, rng):
        return rng.standard_normal((fan_out, fan_in)) * np.sqrt(2.0 / fan_in)
