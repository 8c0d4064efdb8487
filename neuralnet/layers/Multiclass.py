import numpy as np
from .Output import Output
from ..cost import CrossEntropy
from ..exceptions import ConfigurationError, LabelMismatchError


def softmax(z):
    # max-shifted for stability
    z = z - np.max(z, axis=1, keepdims=True)
    exp_z = np.exp(z)
    return exp_z / np.sum(exp_z, axis=1, keepdims=True)


class Multiclass(Output):
    """Softmax output over a fixed vocabulary of class labels."""

    def __init__(self, classes, cost=None):
        super().__init__(cost if cost is not None else CrossEntropy())
        classes = list(dict.fromkeys(classes))
        if len(classes) < 2:
            raise ConfigurationError(
                f"Multiclass output needs at least 2 distinct classes, {len(classes)} given."
            )
        self.classes = classes
        self._index = {label: i for i, label in enumerate(classes)}

    @property
    def width(self):
        return len(self.classes)

    def activate(self, z):
        return softmax(z)

    def encode(self, labels):
        unknown = [label for label in dict.fromkeys(labels) if label not in self._index]
        if unknown:
            raise LabelMismatchError(
                f"Labels {unknown} are not in the class vocabulary {self.classes}.",
                labels=unknown,
            )
        Y = np.zeros((len(labels), len(self.classes)))
        Y[np.arange(len(labels)), [self._index[label] for label in labels]] = 1.0
        return Y

    def decode(self, activations):
        return [self.classes[i] for i in np.argmax(activations, axis=1)]

    def gradient(self, a, expected):
        if isinstance(self.cost, CrossEntropy):
            # fused softmax + CE gradient
            return (a - expected) / expected.shape[0]
        g = self.cost.differentiate(a, expected)
        # softmax Jacobian-vector product per sample
        return a * (g - np.sum(g * a, axis=1, keepdims=True))

    def __repr__(self):
        return f"Multiclass(classes={self.classes}, cost={self.cost!r})"
