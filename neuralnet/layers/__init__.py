from .Layer import Layer, Hidden, Parametric
from .Input import Input
from .Dense import Dense
from .Activation import Activation
from .Dropout import Dropout
from .Output import Output
from .Multiclass import Multiclass
from .Binary import Binary
from .Continuous import Continuous
from ..exceptions import ConfigurationError

__all__ = [
    "Layer",
    "Hidden",
    "Parametric",
    "Input",
    "Dense",
    "Activation",
    "Dropout",
    "Output",
    "Multiclass",
    "Binary",
    "Continuous",
    "get_layer",
]


def get_layer(name, **kwargs):
    """Factory function to create layers by name."""
    layers = {
        "input": Input,
        "dense": Dense,
        "activation": Activation,
        "dropout": Dropout,
        "multiclass": Multiclass,
        "binary": Binary,
        "continuous": Continuous,
    }

    if name not in layers:
        raise ConfigurationError(
            f"Unknown layer: {name}. Available: {list(layers.keys())}"
        )

    return layers[name](**kwargs)
