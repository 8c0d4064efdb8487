import numbers

import numpy as np
from .Layer import Parametric
from ..Parameter import Parameter
from ..initializers import Xavier1
from ..exceptions import ConfigurationError, NotInitializedError


class Dense(Parametric):
    """
    Fully connected layer: y = x @ W^T + b

    Shapes (rows = samples):
        x: (batch, fan_in)
        W: (neurons, fan_in)
        b: (neurons,)
        y: (batch, neurons)
    """

    def __init__(self, neurons, bias=True, weight_initializer=None):
        if not isinstance(neurons, numbers.Integral) or neurons < 1:
            raise ConfigurationError(
                f"Number of neurons must be an integer greater than 0, {neurons} given."
            )
        self.neurons = int(neurons)
        self.bias = bool(bias)
        self.weight_initializer = weight_initializer or Xavier1()

        self.weights = None
        self.biases = None
        self.x = None

    @property
    def width(self):
        return self.neurons

    def fan_out(self, fan_in):
        return self.neurons

    def initialize(self, fan_in, rng):
        w = self.weight_initializer.initialize(fan_in, self.neurons, rng)
        self.weights = Parameter(w)
        self.biases = Parameter(np.zeros(self.neurons)) if self.bias else None
        self.x = None
        return self.neurons

    def _check(self):
        if self.weights is None:
            raise NotInitializedError("Dense layer has not been initialized.")

    def forward(self, x):
        self._check()
        self.x = x  # cache for backward
        return self.infer(x)

    def infer(self, x):
        self._check()
        out = x @ self.weights.value.T
        if self.biases is not None:
            out = out + self.biases.value
        return out

    def backward(self, gradient, optimizer):
        if self.x is None:
            raise NotInitializedError("Dense layer backward called before forward.")

        dW = gradient.T @ self.x                  # (out, in)
        dx = gradient @ self.weights.value        # (B, in), with the pre-update weights

        self.weights.update(optimizer.update(self.weights.id, dW))
        if self.biases is not None:
            db = np.sum(gradient, axis=0)         # (out,)
            self.biases.update(optimizer.update(self.biases.id, db))

        self.x = None
        return dx

    def parameters(self):
        if self.weights is None:
            return {}
        params = {"weights": self.weights}
        if self.biases is not None:
            params["biases"] = self.biases
        return params

    def __repr__(self):
        return f"Dense(neurons={self.neurons}, bias={self.bias}, weight_initializer={self.weight_initializer!r})"
