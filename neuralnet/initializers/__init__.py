from .Initializer import Initializer
from .Xavier1 import Xavier1
from .He import He
from .Constant import Constant
from ..exceptions import ConfigurationError

__all__ = ["Initializer", "Xavier1", "He", "Constant", "get_initializer"]


def get_initializer(name, **kwargs):
    """Factory function to create weight initializers by name."""
    initializers = {
        "xavier": Xavier1,
        "he": He,
        "constant": Constant,
    }

    if name not in initializers:
        raise ConfigurationError(
            f"Unknown initializer: {name}. Available: {list(initializers.keys())}"
        )

    return initializers[name](**kwargs)
