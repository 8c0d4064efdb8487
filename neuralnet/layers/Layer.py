class Layer:
    # Subclasses override as needed
    @property
    def width(self):
        # number of units this layer emits, known once initialized (Input: at construction)
        raise NotImplementedError

    def fan_out(self, fan_in):
        # Output width for a given input width, without allocating anything
        return fan_in

    def initialize(self, fan_in, rng):
        # Allocate parameters for the given input width, return the output width
        raise NotImplementedError

    def forward(self, x):
        # Training pass, may cache what backward() needs
        raise NotImplementedError

    def infer(self, x):
        # Inference pass, must not touch any state
        return self.forward(x)

    def backward(self, gradient, optimizer):
        # Update own parameters, return grad wrt input
        raise NotImplementedError

    def parameters(self):
        # Return {name: Parameter} for every learnable tensor
        return {}

    def num_params(self):
        return sum(p.size for p in self.parameters().values())

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class Hidden(Layer):
    """Marker base for layers that may sit between Input and Output."""


class Parametric(Hidden):
    """Marker base for hidden layers that own Parameters."""
