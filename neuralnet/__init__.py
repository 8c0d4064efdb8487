from .Network import Network
from .Parameter import Parameter
from .exceptions import (
    NeuralNetError,
    ConfigurationError,
    NotInitializedError,
    ShapeMismatchError,
    LabelMismatchError,
)
from .datasets import Labeled, Unlabeled
from .estimators import MLPClassifier, MLPRegressor

__all__ = [
    "Network",
    "Parameter",
    "NeuralNetError",
    "ConfigurationError",
    "NotInitializedError",
    "ShapeMismatchError",
    "LabelMismatchError",
    "Labeled",
    "Unlabeled",
    "MLPClassifier",
    "MLPRegressor",
]
