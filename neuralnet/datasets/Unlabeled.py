from .Dataset import Dataset


class Unlabeled(Dataset):
    def _take(self, idx):
        return Unlabeled(self.samples[idx])

    def __repr__(self):
        return f"Unlabeled(samples={self.num_samples()}, features={self.num_features()})"
