from .CostFunction import CostFunction
from .CrossEntropy import CrossEntropy
from .LeastSquares import LeastSquares
from .HuberLoss import HuberLoss
from ..exceptions import ConfigurationError

__all__ = [
    "CostFunction",
    "CrossEntropy",
    "LeastSquares",
    "HuberLoss",
    "get_cost",
]


def get_cost(name, **kwargs):
    """Factory function to create cost functions by name."""
    costs = {
        "cross_entropy": CrossEntropy,
        "least_squares": LeastSquares,
        "huber": HuberLoss,
    }

    if name not in costs:
        raise ConfigurationError(
            f"Unknown cost function: {name}. Available: {list(costs.keys())}"
        )

    return costs[name](**kwargs)
