from .Optimizer import Optimizer


class Stochastic(Optimizer):
    # plain gradient descent, no accumulators
    def __init__(self, rate=0.01):
        super().__init__(rate)

    def update(self, param_id, gradient):
        self._record(param_id, gradient)
        return self.rate * gradient
