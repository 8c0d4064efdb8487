import time

import numpy as np

from ..Network import Network
from ..layers import Input, Dense, Hidden
from ..optimizer import Adam, Optimizer
from ..datasets import Labeled, Dataset
from ..early_stopping import EarlyStopping
from ..helpers.logger import RunLogger
from ..helpers.lr_scheduler import get_scheduler
from ..exceptions import ConfigurationError, NotInitializedError


class MultilayerPerceptron:
    """
    Mini-batch training loop around a Network.

    The network is rebuilt from the training set on every call to train():
    Input width comes from the features, then the user's hidden layers, then
    a Dense layer sized for the output layer supplied by the subclass.
    """

    def __init__(
        self,
        hidden=(),
        batch_size=128,
        optimizer=None,
        epochs=100,
        min_change=1e-4,
        early_stopping=None,
        scheduler=None,
        seed=None,
        verbose=0,
        runs_root=None,
        tag="run",
    ):
        hidden = list(hidden)
        for layer in hidden:
            if not isinstance(layer, Hidden):
                raise ConfigurationError(f"{type(layer).__name__} cannot be used as a hidden layer.")
        if batch_size < 1:
            raise ConfigurationError(f"Batch size must be at least 1, {batch_size} given.")
        if epochs < 1:
            raise ConfigurationError(f"Number of epochs must be at least 1, {epochs} given.")
        if min_change < 0.0:
            raise ConfigurationError(f"Minimum change must be non-negative, {min_change} given.")
        if optimizer is not None and not isinstance(optimizer, Optimizer):
            raise ConfigurationError(f"Expected an Optimizer, {type(optimizer).__name__} given.")

        self.hidden = hidden
        self.batch_size = batch_size
        self.optimizer = optimizer if optimizer is not None else Adam()
        self._base_rate = self.optimizer.rate
        self.epochs = epochs
        self.min_change = min_change
        self.early_stopping = early_stopping
        self.scheduler = scheduler
        self.seed = seed
        self.verbose = verbose
        self.runs_root = runs_root
        self.tag = tag

        self.network = None
        self.history = None

    # subclasses provide the task specific output layer
    def _output_layer(self, dataset):
        raise NotImplementedError

    def trained(self):
        return self.network is not None and self.network.initialized

    def steps(self):
        return [] if self.history is None else list(self.history["loss"])

    def _check_trained(self):
        if not self.trained():
            raise NotInitializedError(f"{self.__class__.__name__} must be trained first.")

    def _build(self, dataset):
        output = self._output_layer(dataset)
        layers = [*self.hidden, Dense(output.width)]
        return Network(Input(dataset.num_features()), layers, output,
                       optimizer=self.optimizer, seed=self.seed)

    def _stopper(self):
        if isinstance(self.early_stopping, dict):
            return EarlyStopping(**self.early_stopping)
        if self.early_stopping is not None:
            self.early_stopping.reset()
        return self.early_stopping

    def _scheduler(self):
        if self.scheduler is None:
            return None
        conf = dict(self.scheduler)
        return get_scheduler(conf.pop("type"), self.optimizer, **conf)

    def train(self, dataset, validation=None):
        if not isinstance(dataset, Labeled):
            raise ConfigurationError(f"Training needs a Labeled dataset, {type(dataset).__name__} given.")
        if dataset.empty():
            raise ConfigurationError("Training set must contain at least one sample.")

        # schedulers mutate the rate, start every run from the configured one
        self.optimizer.rate = self._base_rate
        self.network = self._build(dataset)
        self.network.initialize()

        rng = np.random.default_rng(self.seed)
        stopper = self._stopper() if validation is not None else None
        scheduler = self._scheduler()
        logger = RunLogger(root=self.runs_root, tag=self.tag) if self.runs_root is not None else None

        history = {"loss": []}
        if validation is not None:
            history["val_loss"] = []
        self.history = history

        if self.verbose > 0:
            print(f"Starting training for {self.epochs} epochs...")

        log_interval = max(1, self.epochs // 10)
        prev_loss = np.inf

        for ep in range(1, self.epochs + 1):
            t0 = time.time()

            total, n = 0.0, 0
            for batch in dataset.randomize(rng).batch(self.batch_size):
                total += self.network.roundtrip(batch) * batch.num_samples()
                n += batch.num_samples()
            loss = total / n

            if not np.isfinite(loss):
                raise RuntimeError(f"Numerical instability detected at epoch {ep}, loss is {loss}.")

            history["loss"].append(loss)
            metrics = {"loss": loss}

            if validation is not None:
                val_loss = self.network.loss(validation)
                history["val_loss"].append(val_loss)
                metrics["val_loss"] = val_loss

            if self.verbose > 0 and (ep % log_interval == 0 or ep == 1 or ep == self.epochs):
                line = f"Epoch {ep}/{self.epochs} - loss: {loss:.4f}"
                if validation is not None:
                    line += f" - val_loss: {metrics['val_loss']:.4f}"
                print(line)

            if logger is not None:
                logger.log_epoch(ep, time_s=time.time() - t0, **metrics)
                logger.save_checkpoint(self.network, best=False)
                monitored = history.get("val_loss", history["loss"])
                if monitored[-1] <= min(monitored):
                    logger.save_checkpoint(self.network, best=True)

            if scheduler is not None:
                scheduler.step(ep, metrics)

            if stopper is not None and stopper.update(ep, metrics, self.network):
                if self.verbose > 0:
                    print(
                        f"Early stopping at epoch {ep:02d}. "
                        f"Best {stopper.monitor}={stopper.best:.4f} at epoch {stopper.best_epoch:02d}."
                    )
                break

            if abs(prev_loss - loss) < self.min_change:
                if self.verbose > 0:
                    print(f"Loss converged at epoch {ep}.")
                break

            prev_loss = loss

        if logger is not None:
            logger.save_json()
            logger.plot_loss(history)

        return history

    def _activations(self, dataset):
        self._check_trained()
        return self.network.infer(dataset.samples if isinstance(dataset, Dataset) else dataset)
