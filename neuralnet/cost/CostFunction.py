class CostFunction:
    """
    A scalar loss over a batch of (output, expected) rows.

    compute() returns the batch mean of the per-sample loss, differentiate()
    returns the gradient of that mean w.r.t. the output, so it already carries
    the 1/m factor.
    """

    def compute(self, output, expected):
        raise NotImplementedError

    def differentiate(self, output, expected):
        raise NotImplementedError

    def __repr__(self):
        return f"{self.__class__.__name__}()"
