import unittest

import numpy as np

from neuralnet.layers import (
    Input, Dense, Activation, Dropout, Multiclass, Binary, Continuous, get_layer,
)
from neuralnet.activations import ReLU, Sigmoid, HyperbolicTangent, ELU
from neuralnet.cost import CrossEntropy, LeastSquares, HuberLoss
from neuralnet.initializers import Constant
from neuralnet.optimizer import Stochastic
from neuralnet.exceptions import (
    ConfigurationError,
    NotInitializedError,
    ShapeMismatchError,
    LabelMismatchError,
)


def numerical_gradient(f, x, h=1e-6):
    grad = np.zeros_like(x)
    for idx in np.ndindex(x.shape):
        old = x[idx]
        x[idx] = old + h
        plus = f(x)
        x[idx] = old - h
        minus = f(x)
        x[idx] = old
        grad[idx] = (plus - minus) / (2 * h)
    return grad


class RegisteringOptimizer(Stochastic):
    """Stochastic with rate 1 so the applied delta equals the raw gradient."""

    def __init__(self, layer):
        super().__init__(rate=1.0)
        for param in layer.parameters().values():
            self.register(param.id, param.shape)


class TestInput(unittest.TestCase):

    def test_identity_and_validation(self):
        layer = Input(3)
        x = np.arange(6, dtype=float).reshape(2, 3)
        np.testing.assert_array_equal(layer.forward(x), x)
        self.assertIsNone(layer.backward(np.ones((2, 3)), None))
        self.assertEqual(layer.num_params(), 0)
        with self.assertRaises(ShapeMismatchError):
            layer.forward(np.ones((2, 4)))
        with self.assertRaises(ShapeMismatchError):
            layer.forward(np.ones(3))

    def test_bad_width(self):
        with self.assertRaises(ConfigurationError):
            Input(0)
        with self.assertRaises(ConfigurationError):
            Input(2.7)
        with self.assertRaises(ConfigurationError):
            Dense(2.5)
        with self.assertRaises(ConfigurationError):
            Dense("3")
        self.assertEqual(Input(np.int64(3)).width, 3)


class TestDense(unittest.TestCase):

    def setUp(self):
        self.rng = np.random.default_rng(0)
        self.layer = Dense(3)
        self.assertEqual(self.layer.initialize(4, self.rng), 3)
        self.layer.biases.value[...] = self.rng.normal(size=3)
        self.x = self.rng.normal(size=(5, 4))
        self.R = self.rng.normal(size=(5, 3))

    def test_shapes(self):
        self.assertEqual(self.layer.weights.shape, (3, 4))
        self.assertEqual(self.layer.biases.shape, (3,))
        self.assertEqual(self.layer.num_params(), 15)
        self.assertEqual(self.layer.forward(self.x).shape, (5, 3))

    def test_xavier_bounds(self):
        limit = np.sqrt(6.0 / (4 + 3))
        self.assertTrue(np.all(np.abs(self.layer.weights.value) <= limit))

    def test_forward(self):
        W, b = self.layer.weights.value, self.layer.biases.value
        np.testing.assert_allclose(self.layer.forward(self.x), self.x @ W.T + b)

    def test_backward_gradients(self):
        W = self.layer.weights.value.copy()
        b = self.layer.biases.value.copy()

        def loss_x(x):
            return np.sum((x @ W.T + b) * self.R)

        def loss_w(w):
            return np.sum((self.x @ w.T + b) * self.R)

        def loss_b(bias):
            return np.sum((self.x @ W.T + bias) * self.R)

        optimizer = RegisteringOptimizer(self.layer)
        self.layer.forward(self.x)
        dx = self.layer.backward(self.R, optimizer)

        np.testing.assert_allclose(dx, numerical_gradient(loss_x, self.x.copy()), atol=1e-5)
        # with rate 1 the parameter moved by exactly its gradient
        np.testing.assert_allclose(W - self.layer.weights.value, numerical_gradient(loss_w, W.copy()), atol=1e-5)
        np.testing.assert_allclose(b - self.layer.biases.value, numerical_gradient(loss_b, b.copy()), atol=1e-5)

    def test_no_bias(self):
        layer = Dense(2, bias=False, weight_initializer=Constant(0.5))
        layer.initialize(3, self.rng)
        self.assertEqual(list(layer.parameters()), ["weights"])
        np.testing.assert_allclose(layer.forward(np.ones((1, 3))), [[1.5, 1.5]])

    def test_uninitialized(self):
        layer = Dense(2)
        self.assertEqual(layer.parameters(), {})
        with self.assertRaises(NotInitializedError):
            layer.forward(np.ones((1, 2)))

    def test_bad_neurons(self):
        with self.assertRaises(ConfigurationError):
            Dense(0)


class TestActivation(unittest.TestCase):

    def test_backward_matches_numerical(self):
        rng = np.random.default_rng(1)
        # keep away from the ReLU kink at 0
        x = rng.uniform(0.1, 2.0, size=(4, 3)) * rng.choice([-1.0, 1.0], size=(4, 3))
        R = rng.normal(size=(4, 3))
        for function in (ReLU(), Sigmoid(), HyperbolicTangent(), ELU(1.0)):
            layer = Activation(function)
            layer.initialize(3, rng)
            layer.forward(x)
            dx = layer.backward(R, None)
            expected = numerical_gradient(lambda v: np.sum(function.compute(v) * R), x.copy())
            np.testing.assert_allclose(dx, expected, atol=1e-5, err_msg=repr(function))

    def test_requires_function(self):
        with self.assertRaises(ConfigurationError):
            Activation("relu")

    def test_backward_before_forward(self):
        with self.assertRaises(NotInitializedError):
            Activation(ReLU()).backward(np.ones((1, 1)), None)


class TestDropout(unittest.TestCase):

    def test_mask_applied_in_both_passes(self):
        layer = Dropout(0.5)
        layer.initialize(100, np.random.default_rng(0))
        x = np.ones((10, 100))
        out = layer.forward(x)
        self.assertTrue(set(np.unique(out)).issubset({0.0, 2.0}))
        dx = layer.backward(np.ones_like(x), None)
        np.testing.assert_array_equal(dx, out)
        np.testing.assert_array_equal(layer.infer(x), x)

    def test_bad_ratio(self):
        with self.assertRaises(ConfigurationError):
            Dropout(1.0)


class TestMulticlass(unittest.TestCase):

    def setUp(self):
        rng = np.random.default_rng(2)
        self.z = rng.normal(size=(4, 3))
        self.labels = ["a", "c", "b", "a"]

    def check_gradient(self, cost):
        layer = Multiclass(["a", "b", "c"], cost)
        layer.initialize(3, None)
        Y = layer.encode(self.labels)
        layer.forward(self.z)
        gradient, loss = layer.back(Y, None)
        self.assertAlmostEqual(loss, cost.compute(layer.activate(self.z), Y))
        expected = numerical_gradient(lambda v: cost.compute(layer.activate(v), Y), self.z.copy())
        np.testing.assert_allclose(gradient, expected, atol=1e-6)

    def test_cross_entropy_gradient(self):
        self.check_gradient(CrossEntropy())

    def test_least_squares_gradient(self):
        self.check_gradient(LeastSquares())

    def test_softmax_rows_sum_to_one(self):
        layer = Multiclass(["a", "b", "c"])
        probs = layer.infer(np.array([[1000.0, 0.0, -1000.0], [0.0, 0.0, 0.0]]))
        np.testing.assert_allclose(probs.sum(axis=1), [1.0, 1.0])
        np.testing.assert_allclose(probs[1], [1 / 3] * 3)

    def test_encode_decode(self):
        layer = Multiclass(["a", "b", "c"])
        Y = layer.encode(self.labels)
        np.testing.assert_array_equal(Y.argmax(axis=1), [0, 2, 1, 0])
        self.assertEqual(layer.decode(Y), self.labels)

    def test_unknown_label(self):
        with self.assertRaises(LabelMismatchError):
            Multiclass(["a", "b"]).encode(["a", "z"])

    def test_back_consumes_forward_cache(self):
        layer = Multiclass(["a", "b", "c"])
        layer.initialize(3, None)
        Y = layer.encode(self.labels)
        with self.assertRaises(NotInitializedError):
            layer.back(Y, None)
        layer.forward(self.z)
        layer.back(Y, None)
        with self.assertRaises(NotInitializedError):
            layer.back(Y, None)
        # driven by the network through back(), never through backward()
        with self.assertRaises(NotImplementedError):
            layer.backward(Y, None)

    def test_needs_two_classes(self):
        with self.assertRaises(ConfigurationError):
            Multiclass(["a", "a"])

    def test_width_mismatch(self):
        with self.assertRaises(ConfigurationError):
            Multiclass(["a", "b", "c"]).initialize(2, None)


class TestBinary(unittest.TestCase):

    def test_gradients(self):
        rng = np.random.default_rng(3)
        z = rng.normal(size=(5, 1))
        for cost in (CrossEntropy(), LeastSquares()):
            layer = Binary(["neg", "pos"], cost)
            y = layer.encode(["pos", "neg", "neg", "pos", "pos"])
            layer.forward(z)
            gradient, loss = layer.back(y, None)
            expected = numerical_gradient(lambda v: layer.loss(layer.activate(v), y), z.copy())
            np.testing.assert_allclose(gradient, expected, atol=1e-6, err_msg=repr(cost))
            self.assertGreaterEqual(loss, 0.0)

    def test_decode(self):
        layer = Binary(["neg", "pos"])
        self.assertEqual(layer.decode(np.array([0.2, 0.7])), ["neg", "pos"])

    def test_exactly_two_classes(self):
        with self.assertRaises(ConfigurationError):
            Binary(["a", "b", "c"])
        with self.assertRaises(LabelMismatchError):
            Binary(["a", "b"]).encode(["c"])


class TestContinuous(unittest.TestCase):

    def test_gradient(self):
        z = np.array([[0.5], [-1.0], [2.0]])
        for cost in (LeastSquares(), HuberLoss(1.0)):
            layer = Continuous(cost)
            y = layer.encode([1.0, -1.0, 0.0])
            layer.forward(z)
            gradient, _ = layer.back(y, None)
            expected = numerical_gradient(lambda v: cost.compute(v, y), z.copy())
            np.testing.assert_allclose(gradient, expected, atol=1e-6)

    def test_bad_targets(self):
        layer = Continuous()
        with self.assertRaises(LabelMismatchError):
            layer.encode(["high"])
        with self.assertRaises(LabelMismatchError):
            layer.encode([float("nan")])


class TestLayerFactory(unittest.TestCase):

    def test_get_layer(self):
        self.assertIsInstance(get_layer("dense", neurons=4), Dense)
        with self.assertRaises(ConfigurationError):
            get_layer("conv2d")


if __name__ == "__main__":
    unittest.main()
