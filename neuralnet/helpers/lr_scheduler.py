"""
Learning rate schedulers acting on an optimizer's `rate`.

Stepped once per epoch by the estimators, after the epoch's roundtrips.
Every Optimizer reads `rate` at each update() call, so a new rate takes
effect on the next batch while the accumulated moments are kept.
ReduceOnPlateau reads its monitored value from the epoch metrics
(`loss` or `val_loss`).
"""
import math

from ..exceptions import ConfigurationError


class LRScheduler:
    """Base class for learning rate schedulers."""

    def __init__(self, optimizer, verbose=False):
        self.optimizer = optimizer
        self.verbose = verbose
        self.initial_rate = optimizer.rate
        self.current_rate = optimizer.rate

    def step(self, epoch, metrics=None):
        """Update the learning rate based on epoch and optionally metrics."""
        new_rate = self.get_rate(epoch, metrics)
        if new_rate != self.current_rate:
            self.current_rate = new_rate
            self.optimizer.rate = new_rate
            if self.verbose:
                print(f"   Learning rate updated: {new_rate:.6f}")
        return new_rate

    def get_rate(self, epoch, metrics=None):
        return self.current_rate


class StepDecay(LRScheduler):
    """Multiply the rate by gamma every step_size epochs."""

    def __init__(self, optimizer, step_size, gamma=0.1, verbose=False):
        super().__init__(optimizer, verbose)
        if step_size < 1:
            raise ConfigurationError(f"Step size must be at least 1, {step_size} given.")
        self.step_size = step_size
        self.gamma = gamma

    def get_rate(self, epoch, metrics=None):
        return self.initial_rate * (self.gamma ** (epoch // self.step_size))


class ExponentialDecay(LRScheduler):
    def __init__(self, optimizer, gamma=0.95, verbose=False):
        super().__init__(optimizer, verbose)
        self.gamma = gamma

    def get_rate(self, epoch, metrics=None):
        return self.initial_rate * (self.gamma ** epoch)


class CosineAnnealing(LRScheduler):
    """Cosine decay from the initial rate to min_rate over T_max epochs."""

    def __init__(self, optimizer, T_max, min_rate=0.0, verbose=False):
        super().__init__(optimizer, verbose)
        if T_max < 1:
            raise ConfigurationError(f"T_max must be at least 1, {T_max} given.")
        self.T_max = T_max
        self.min_rate = min_rate

    def get_rate(self, epoch, metrics=None):
        progress = min(epoch, self.T_max) / self.T_max
        return self.min_rate + (self.initial_rate - self.min_rate) * \
               (1 + math.cos(math.pi * progress)) / 2


class ReduceOnPlateau(LRScheduler):
    """Scale the rate by factor when the monitored metric stops improving."""

    def __init__(self, optimizer, monitor="loss", factor=0.5,
                 patience=10, threshold=1e-4, min_rate=1e-8, verbose=False):
        super().__init__(optimizer, verbose)
        if not 0.0 < factor < 1.0:
            raise ConfigurationError(f"Factor must be between 0 and 1, {factor} given.")
        self.monitor = monitor
        self.factor = factor
        self.patience = patience
        self.threshold = threshold
        self.min_rate = min_rate

        self.best = None
        self.num_bad_epochs = 0

    def get_rate(self, epoch, metrics=None):
        if metrics is None or self.monitor not in metrics:
            return self.current_rate

        current = metrics[self.monitor]

        if self.best is None or current < self.best - self.threshold:
            self.best = current
            self.num_bad_epochs = 0
        else:
            self.num_bad_epochs += 1

        if self.num_bad_epochs >= self.patience:
            new_rate = max(self.current_rate * self.factor, self.min_rate)
            if new_rate < self.current_rate:
                self.num_bad_epochs = 0
                return new_rate

        return self.current_rate


def get_scheduler(name, optimizer, **kwargs):
    """Factory function to create schedulers by name."""
    schedulers = {
        "step": StepDecay,
        "exponential": ExponentialDecay,
        "cosine": CosineAnnealing,
        "plateau": ReduceOnPlateau,
    }

    if name not in schedulers:
        raise ConfigurationError(f"Unknown scheduler: {name}. Available: {list(schedulers.keys())}")

    return schedulers[name](optimizer, **kwargs)
