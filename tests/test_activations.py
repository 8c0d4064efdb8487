import unittest

import numpy as np

from neuralnet.activations import (
    Identity, ReLU, LeakyReLU, ELU, Sigmoid, HyperbolicTangent, SoftPlus, SiLU, get_activation,
)
from neuralnet.exceptions import ConfigurationError


class TestActivationFunctions(unittest.TestCase):

    def setUp(self):
        self.z = np.array([[-3.0, -0.5, 0.25], [0.75, 2.0, -1.5]])

    def test_derivatives_match_finite_differences(self):
        h = 1e-6
        for function in (Identity(), ReLU(), LeakyReLU(0.2), ELU(0.5), Sigmoid(),
                         HyperbolicTangent(), SoftPlus(), SiLU()):
            a = function.compute(self.z)
            analytic = function.differentiate(self.z, a)
            numeric = (function.compute(self.z + h) - function.compute(self.z - h)) / (2 * h)
            np.testing.assert_allclose(analytic, numeric, atol=1e-6, err_msg=repr(function))

    def test_known_values(self):
        np.testing.assert_array_equal(ReLU().compute(np.array([-1.0, 0.0, 2.0])), [0.0, 0.0, 2.0])
        np.testing.assert_allclose(Sigmoid().compute(np.array([0.0])), [0.5])
        np.testing.assert_allclose(LeakyReLU(0.1).compute(np.array([-2.0])), [-0.2])
        np.testing.assert_allclose(SoftPlus().compute(np.array([0.0])), [np.log(2.0)])

    def test_derivatives_from_the_input(self):
        z = np.array([-2.0, 0.0, 3.0])
        np.testing.assert_array_equal(Identity().differentiate(z, Identity().compute(z)), [1.0, 1.0, 1.0])
        leaky = LeakyReLU(0.2)
        np.testing.assert_allclose(leaky.differentiate(z, leaky.compute(z)), [0.2, 0.2, 1.0])

    def test_sigmoid_is_stable(self):
        out = Sigmoid().compute(np.array([-1000.0, 1000.0]))
        self.assertTrue(np.all(np.isfinite(out)))
        np.testing.assert_allclose(out, [0.0, 1.0])

    def test_bad_parameters(self):
        with self.assertRaises(ConfigurationError):
            LeakyReLU(1.5)
        with self.assertRaises(ConfigurationError):
            ELU(-1.0)

    def test_factory(self):
        self.assertIsInstance(get_activation("tanh"), HyperbolicTangent)
        self.assertEqual(get_activation("leaky_relu", leakage=0.3).leakage, 0.3)
        with self.assertRaises(ConfigurationError):
            get_activation("gelu")


if __name__ == "__main__":
    unittest.main()
