from .Layer import Hidden
from ..activations import ActivationFunction
from ..exceptions import ConfigurationError, NotInitializedError


class Activation(Hidden):
    """Applies an elementwise activation function, no parameters."""

    def __init__(self, function):
        if not isinstance(function, ActivationFunction):
            raise ConfigurationError(
                f"Activation layer needs an ActivationFunction, {type(function).__name__} given."
            )
        self.function = function
        self._width = None
        self.z = None
        self.a = None

    @property
    def width(self):
        return self._width

    def initialize(self, fan_in, rng):
        self._width = fan_in
        return fan_in

    def forward(self, x):
        self.z = x
        self.a = self.function.compute(x)
        return self.a

    def infer(self, x):
        return self.function.compute(x)

    def backward(self, gradient, optimizer):
        if self.z is None:
            raise NotInitializedError("Activation layer backward called before forward.")
        dx = gradient * self.function.differentiate(self.z, self.a)
        self.z = self.a = None
        return dx

    def __repr__(self):
        return f"Activation({self.function!r})"
