from .Dataset import Dataset
from ..exceptions import ShapeMismatchError


class Labeled(Dataset):
    """Samples plus a parallel list of labels (class labels or continuous targets)."""

    def __init__(self, samples, labels):
        super().__init__(samples)
        labels = list(labels)
        if len(labels) != self.num_samples():
            raise ShapeMismatchError(
                f"Number of labels ({len(labels)}) must equal the number"
                f" of samples ({self.num_samples()}).",
                expected=self.num_samples(),
                actual=len(labels),
            )
        self.labels = labels

    def possible_outcomes(self):
        # unique labels in order of first appearance
        return list(dict.fromkeys(self.labels))

    def _take(self, idx):
        return Labeled(self.samples[idx], [self.labels[i] for i in idx])

    def __repr__(self):
        return f"Labeled(samples={self.num_samples()}, features={self.num_features()})"
