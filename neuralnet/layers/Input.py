import numbers

import numpy as np
from .Layer import Layer
from ..exceptions import ConfigurationError, ShapeMismatchError


class Input(Layer):
    """Placeholder for a fixed-width batch of samples (rows = samples)."""

    def __init__(self, width):
        if not isinstance(width, numbers.Integral) or width < 1:
            raise ConfigurationError(f"Input width must be an integer greater than 0, {width} given.")
        self._width = int(width)

    @property
    def width(self):
        return self._width

    def fan_out(self, fan_in):
        return self._width

    def initialize(self, fan_in, rng):
        return self._width

    def validate(self, x):
        try:
            x = np.asarray(x, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ShapeMismatchError(f"Batch must be a rectangular numeric matrix: {e}") from e
        if x.ndim != 2 or x.shape[1] != self._width:
            actual = x.shape[1] if x.ndim == 2 else x.shape
            raise ShapeMismatchError(
                f"Input layer expects {self._width} features per sample, got {actual}.",
                expected=self._width,
                actual=actual,
            )
        return x

    def forward(self, x):
        return self.validate(x)

    def backward(self, gradient, optimizer):
        # end of the chain, gradient is discarded
        return None

    def __repr__(self):
        return f"Input(width={self._width})"
