from ..exceptions import ConfigurationError


class EarlyStopping:
    """
    Stop training once the monitored metric has not improved for `patience`
    epochs.

    The best epoch is kept as a Network.snapshot(), which holds the parameter
    values and the optimizer accumulators. With restore_best_weights the
    network is rolled back through Network.restore(), so training resumed
    afterwards continues from the optimizer state of the best epoch.
    reset() is called by the estimators at the start of every train().
    """

    def __init__(
        self,
        patience=5,
        min_delta=0.0,
        monitor="val_loss",
        mode="min",
        restore_best_weights=True,
    ):
        if mode not in ("min", "max"):
            raise ConfigurationError(f"Mode must be 'min' or 'max', {mode!r} given.")
        if patience < 1:
            raise ConfigurationError(f"Patience must be at least 1, {patience} given.")
        self.monitor = monitor
        self.mode = mode
        self.patience = patience
        self.min_delta = float(min_delta)
        self.restore_best_weights = restore_best_weights
        self.reset()

    def reset(self):
        self.best = None
        self.best_epoch = -1
        self.wait = 0
        self.stopped = False
        self._best_snapshot = None

    def _is_better(self, current, best):
        if self.mode == "min":
            return current < (best - self.min_delta)
        return current > (best + self.min_delta)

    def update(self, epoch, metrics, network):
        """Record this epoch's metrics, return True when training should stop."""
        value = metrics[self.monitor]
        if self.best is None or self._is_better(value, self.best):
            self.best = value
            self.best_epoch = epoch
            self.wait = 0
            self._best_snapshot = network.snapshot()
        else:
            self.wait += 1
            if self.wait >= self.patience:
                self.stopped = True
                if self.restore_best_weights and self._best_snapshot is not None:
                    network.restore(self._best_snapshot)
                return True
        return False
