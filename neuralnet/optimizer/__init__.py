from .Optimizer import Optimizer
from .Stochastic import Stochastic
from .Momentum import Momentum
from .RMSProp import RMSProp
from .Adam import Adam
from ..exceptions import ConfigurationError

__all__ = [
    "Optimizer",
    "Stochastic",
    "Momentum",
    "RMSProp",
    "Adam",
    "get_optimizer",
]


def get_optimizer(name, **kwargs):
    """Factory function to create optimizers by name."""
    optimizers = {
        "sgd": Stochastic,
        "momentum": Momentum,
        "rmsprop": RMSProp,
        "adam": Adam,
    }

    if name not in optimizers:
        raise ConfigurationError(
            f"Unknown optimizer: {name}. Available: {list(optimizers.keys())}"
        )

    return optimizers[name](**kwargs)
