from .MultilayerPerceptron import MultilayerPerceptron
from .MLPClassifier import MLPClassifier
from .MLPRegressor import MLPRegressor

__all__ = ["MultilayerPerceptron", "MLPClassifier", "MLPRegressor"]
