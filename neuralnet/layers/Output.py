from .Layer import Layer
from ..cost import CostFunction
from ..exceptions import ConfigurationError, NotInitializedError


class Output(Layer):
    """
    Last layer of the chain.

    Output layers own no parameters. Their width is fixed by the task (number
    of classes, or 1) and must match the width of the layer before them.
    They turn raw activations into a task specific distribution and, given
    encoded targets, produce the batch-mean loss and the gradient w.r.t.
    their own input.

    The network drives them through back(expected, optimizer) with the
    encoded targets, not through backward().
    """

    def __init__(self, cost):
        if not isinstance(cost, CostFunction):
            raise ConfigurationError(
                f"Output layer needs a CostFunction, {type(cost).__name__} given."
            )
        self.cost = cost
        self.a = None

    def fan_out(self, fan_in):
        if fan_in != self.width:
            raise ConfigurationError(
                f"{self.__class__.__name__} output expects {self.width} inputs,"
                f" the previous layer emits {fan_in}."
            )
        return self.width

    def initialize(self, fan_in, rng):
        return self.fan_out(fan_in)

    def activate(self, z):
        raise NotImplementedError

    def encode(self, labels):
        # Validate labels and turn them into a (batch, width) target matrix
        raise NotImplementedError

    def decode(self, activations):
        # Turn inferred activations back into predictions in label space
        raise NotImplementedError

    def forward(self, z):
        self.a = self.activate(z)
        return self.a

    def infer(self, z):
        return self.activate(z)

    def gradient(self, a, expected):
        raise NotImplementedError

    def back(self, expected, optimizer):
        """Return (dL/dz, loss) for the cached forward activations."""
        if self.a is None:
            raise NotInitializedError(f"{self.__class__.__name__} back called before forward.")
        a = self.a
        self.a = None
        return self.gradient(a, expected), self.loss(a, expected)

    def loss(self, a, expected):
        return self.cost.compute(a, expected)
