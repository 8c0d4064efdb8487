from .Layer import Hidden
from ..exceptions import ConfigurationError, NotInitializedError


class Dropout(Hidden):
    """Inverted dropout: active during training passes, identity at inference."""

    def __init__(self, ratio=0.5):
        if not 0.0 <= ratio < 1.0:
            raise ConfigurationError(f"Ratio must be in [0, 1), {ratio} given.")
        self.ratio = float(ratio)
        self.mask = None
        self._width = None
        self._rng = None

    @property
    def width(self):
        return self._width

    def initialize(self, fan_in, rng):
        self._width = fan_in
        self._rng = rng
        return fan_in

    def forward(self, x):
        if self._rng is None:
            raise NotInitializedError("Dropout layer has not been initialized.")
        keep = 1.0 - self.ratio
        self.mask = (self._rng.random(x.shape) < keep).astype(x.dtype) / keep
        return x * self.mask

    def infer(self, x):
        return x

    def backward(self, gradient, optimizer):
        if self.mask is None:
            raise NotInitializedError("Dropout layer backward called before forward.")
        dx = gradient * self.mask
        self.mask = None
        return dx

    def __repr__(self):
        return f"Dropout(ratio={self.ratio})"
