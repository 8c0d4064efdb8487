from .ActivationFunction import ActivationFunction
from .Identity import Identity
from .ReLU import ReLU
from .LeakyReLU import LeakyReLU
from .ELU import ELU
from .Sigmoid import Sigmoid
from .HyperbolicTangent import HyperbolicTangent
from .SoftPlus import SoftPlus
from .SiLU import SiLU
from ..exceptions import ConfigurationError

__all__ = [
    "ActivationFunction",
    "Identity",
    "ReLU",
    "LeakyReLU",
    "ELU",
    "Sigmoid",
    "HyperbolicTangent",
    "SoftPlus",
    "SiLU",
    "get_activation",
]


def get_activation(name, **kwargs):
    """Factory function to create activation functions by name."""
    activations = {
        "identity": Identity,
        "relu": ReLU,
        "leaky_relu": LeakyReLU,
        "elu": ELU,
        "sigmoid": Sigmoid,
        "tanh": HyperbolicTangent,
        "softplus": SoftPlus,
        "silu": SiLU,
    }

    if name not in activations:
        raise ConfigurationError(
            f"Unknown activation: {name}. Available: {list(activations.keys())}"
        )

    return activations[name](**kwargs)
