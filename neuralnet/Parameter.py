import itertools

import numpy as np


_ids = itertools.count()


class Parameter:
    """
    A learnable tensor owned by exactly one layer.

    The integer id is drawn from a process-wide counter when the parameter is
    created, so two parameters never share optimizer accumulators even across
    networks.
    """

    def __init__(self, value):
        self.id = next(_ids)
        self.value = np.asarray(value, dtype=np.float64)

    @property
    def shape(self):
        return self.value.shape

    @property
    def size(self):
        return int(self.value.size)

    def update(self, delta):
        # delta comes pre-signed from the optimizer
        self.value -= delta

    def __repr__(self):
        return f"Parameter(id={self.id}, shape={self.value.shape})"
