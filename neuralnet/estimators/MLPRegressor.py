import numpy as np

from .MultilayerPerceptron import MultilayerPerceptron
from ..layers import Continuous
from ..cost import LeastSquares


class MLPRegressor(MultilayerPerceptron):
    def __init__(self, hidden=(), cost=None, **kwargs):
        super().__init__(hidden, **kwargs)
        self.cost = cost if cost is not None else LeastSquares()

    def _output_layer(self, dataset):
        return Continuous(cost=self.cost)

    def predict(self, dataset):
        return self._activations(dataset)

    def score(self, dataset):
        """Coefficient of determination (R^2) on a labeled dataset."""
        y = np.asarray(dataset.labels, dtype=np.float64)
        pred = self.predict(dataset)
        ss_res = np.sum((y - pred) ** 2)
        ss_tot = np.sum((y - np.mean(y)) ** 2)
        if ss_tot == 0.0:
            return 1.0 if ss_res == 0.0 else 0.0
        return float(1.0 - ss_res / ss_tot)
