class NeuralNetError(Exception):
    """Base class for every error raised by the network engine."""


class ConfigurationError(NeuralNetError, ValueError):
    """Invalid hyper-parameters or incompatible layer shapes."""


class NotInitializedError(NeuralNetError, RuntimeError):
    """A mutating or inference call was made before initialize()."""


class ShapeMismatchError(NeuralNetError, ValueError):
    """Batch dimensionality disagrees with what the network expects."""

    def __init__(self, message, expected=None, actual=None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class LabelMismatchError(NeuralNetError, ValueError):
    """A label was not part of the output layer's vocabulary."""

    def __init__(self, message, labels=None):
        super().__init__(message)
        self.labels = list(labels) if labels is not None else []
