class ActivationFunction:
    # Subclasses override as needed
    def compute(self, z):
        raise NotImplementedError

    def differentiate(self, z, a):
        # z is the layer input, a is compute(z) from the same forward pass
        raise NotImplementedError

    def __repr__(self):
        return f"{self.__class__.__name__}()"
