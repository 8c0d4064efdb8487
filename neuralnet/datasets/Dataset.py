import numpy as np

from ..exceptions import ConfigurationError, ShapeMismatchError


class Dataset:
    """
    Rectangular matrix of samples, rows = samples.

    Datasets are never mutated in place: randomize() and friends return new
    datasets so the same data can be reused for training and evaluation.
    """

    def __init__(self, samples):
        try:
            samples = np.asarray(samples, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ShapeMismatchError(f"Samples must be a rectangular numeric matrix: {e}") from e
        if samples.ndim == 1 and samples.size == 0:
            samples = samples.reshape(0, 0)
        if samples.ndim != 2:
            raise ShapeMismatchError(
                f"Samples must form a 2-D matrix, got {samples.ndim} dimension(s).",
                expected=2,
                actual=samples.ndim,
            )
        if not np.all(np.isfinite(samples)):
            raise ShapeMismatchError("Samples must only contain finite values.")
        self.samples = samples

    def num_samples(self):
        return self.samples.shape[0]

    def num_features(self):
        return self.samples.shape[1]

    def empty(self):
        return self.num_samples() == 0

    def __len__(self):
        return self.num_samples()

    def _take(self, idx):
        raise NotImplementedError

    def randomize(self, rng=None):
        rng = rng if rng is not None else np.random.default_rng()
        return self._take(rng.permutation(self.num_samples()))

    def batch(self, batch_size):
        """Consecutive batches of at most batch_size samples, the last may be smaller."""
        if batch_size < 1:
            raise ConfigurationError(f"Batch size must be at least 1, {batch_size} given.")
        return self._batches(batch_size)

    def _batches(self, batch_size):
        N = self.num_samples()
        start = 0
        while start < N:
            end = min(start + batch_size, N)
            yield self._take(np.arange(start, end))
            start = end
