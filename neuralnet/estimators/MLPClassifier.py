import numpy as np

from .MultilayerPerceptron import MultilayerPerceptron
from ..layers import Multiclass, Binary
from ..cost import CrossEntropy


class MLPClassifier(MultilayerPerceptron):
    """
    Classifier over the labels seen during training. Two classes train a
    sigmoid Binary output, more than two a softmax Multiclass output.
    """

    def __init__(self, hidden=(), cost=None, **kwargs):
        super().__init__(hidden, **kwargs)
        self.cost = cost if cost is not None else CrossEntropy()
        self.classes = None

    def _output_layer(self, dataset):
        self.classes = dataset.possible_outcomes()
        if len(self.classes) == 2:
            return Binary(self.classes, cost=self.cost)
        return Multiclass(self.classes, cost=self.cost)

    def proba(self, dataset):
        """Class probabilities, one column per class in self.classes order."""
        a = self._activations(dataset)
        if a.ndim == 1:
            return np.column_stack([1.0 - a, a])
        return a

    def predict(self, dataset):
        probs = self.proba(dataset)
        return [self.classes[i] for i in np.argmax(probs, axis=1)]

    def score(self, dataset):
        # accuracy
        predictions = self.predict(dataset)
        if len(predictions) == 0:
            return 0.0
        return float(np.mean([p == t for p, t in zip(predictions, dataset.labels)]))
