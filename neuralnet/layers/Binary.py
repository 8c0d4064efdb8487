import numpy as np
from .Output import Output
from ..activations.Sigmoid import sigmoid
from ..cost import CrossEntropy
from ..exceptions import ConfigurationError, LabelMismatchError


class Binary(Output):
    """
    Sigmoid output for two classes. The second class is the positive one,
    activations are its probability.
    """

    def __init__(self, classes, cost=None):
        super().__init__(cost if cost is not None else CrossEntropy())
        classes = list(dict.fromkeys(classes))
        if len(classes) != 2:
            raise ConfigurationError(
                f"Binary output needs exactly 2 distinct classes, {len(classes)} given."
            )
        self.classes = classes

    @property
    def width(self):
        return 1

    def activate(self, z):
        return sigmoid(z)

    def infer(self, z):
        return self.activate(z).ravel()

    def encode(self, labels):
        unknown = [label for label in dict.fromkeys(labels) if label not in self.classes]
        if unknown:
            raise LabelMismatchError(
                f"Labels {unknown} are not in the class vocabulary {self.classes}.",
                labels=unknown,
            )
        positive = self.classes[1]
        return np.array([[1.0 if label == positive else 0.0] for label in labels]).reshape(-1, 1)

    def decode(self, activations):
        return [self.classes[1] if p >= 0.5 else self.classes[0] for p in np.ravel(activations)]

    def loss(self, a, expected):
        if isinstance(self.cost, CrossEntropy):
            # score both outcomes so negatives contribute to the loss
            return self.cost.compute(np.hstack([1.0 - a, a]), np.hstack([1.0 - expected, expected]))
        return self.cost.compute(a, expected)

    def gradient(self, a, expected):
        if isinstance(self.cost, CrossEntropy):
            return (a - expected) / expected.shape[0]
        return self.cost.differentiate(a, expected) * a * (1.0 - a)

    def __repr__(self):
        return f"Binary(classes={self.classes}, cost={self.cost!r})"
