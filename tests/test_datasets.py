import unittest

import numpy as np

from neuralnet.datasets import Labeled, Unlabeled
from neuralnet.exceptions import ConfigurationError, ShapeMismatchError


class TestDatasets(unittest.TestCase):

    def setUp(self):
        self.dataset = Labeled(np.arange(10, dtype=float).reshape(5, 2), ["a", "b", "a", "c", "b"])

    def test_shape(self):
        self.assertEqual(self.dataset.num_samples(), 5)
        self.assertEqual(self.dataset.num_features(), 2)
        self.assertEqual(self.dataset.possible_outcomes(), ["a", "b", "c"])

    def test_batch(self):
        batches = list(self.dataset.batch(2))
        self.assertEqual([b.num_samples() for b in batches], [2, 2, 1])
        self.assertEqual(batches[2].labels, ["b"])

    def test_randomize_is_pure(self):
        samples = self.dataset.samples.copy()
        shuffled = self.dataset.randomize(np.random.default_rng(0))
        np.testing.assert_array_equal(self.dataset.samples, samples)
        # rows keep their labels
        for row, label in zip(shuffled.samples, shuffled.labels):
            i = int(row[0] // 2)
            self.assertEqual(self.dataset.labels[i], label)

    def test_validation(self):
        with self.assertRaises(ShapeMismatchError):
            Labeled([[1.0, 2.0]], ["a", "b"])
        with self.assertRaises(ShapeMismatchError):
            Unlabeled([1.0, 2.0])
        with self.assertRaises(ShapeMismatchError):
            Unlabeled([[1.0, float("inf")]])

    def test_unlabeled_batch(self):
        data = Unlabeled(np.ones((3, 4)))
        self.assertEqual([b.num_samples() for b in data.batch(5)], [3])

    def test_batch_size_must_be_positive(self):
        for size in (0, -2):
            with self.assertRaises(ConfigurationError):
                self.dataset.batch(size)

    def test_ragged_and_non_numeric_samples(self):
        with self.assertRaises(ShapeMismatchError):
            Labeled([[1.0, 2.0], [3.0]], ["a", "b"])
        with self.assertRaises(ShapeMismatchError):
            Unlabeled([[1.0, "two"]])


if __name__ == "__main__":
    unittest.main()
