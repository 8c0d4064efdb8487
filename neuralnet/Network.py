import os

import numpy as np

from .layers import Input, Hidden, Output, get_layer
from .activations import ActivationFunction, get_activation
from .cost import CostFunction, get_cost
from .initializers import get_initializer
from .optimizer import Optimizer, Adam, get_optimizer
from .datasets import Dataset, Labeled
from .exceptions import (
    ConfigurationError,
    NotInitializedError,
    ShapeMismatchError,
)


class Network:
    """
    A feed-forward chain [Input, Hidden..., Output] trained by backpropagation.

    Batches are oriented rows = samples. The network owns its layers and its
    optimizer; nothing is shared with other Network instances.

    Lifecycle: constructed uninitialized, initialize() allocates parameters
    (and may be called again for a destructive reset), then roundtrip() and
    infer() can be called any number of times.
    """

    def __init__(self, input, hidden, output, optimizer=None, seed=None):
        if not isinstance(input, Input):
            raise ConfigurationError(f"First layer must be an Input layer, {type(input).__name__} given.")
        hidden = list(hidden)
        for layer in hidden:
            if not isinstance(layer, Hidden):
                raise ConfigurationError(f"{type(layer).__name__} cannot be used as a hidden layer.")
        if not isinstance(output, Output):
            raise ConfigurationError(f"Last layer must be an Output layer, {type(output).__name__} given.")
        optimizer = optimizer if optimizer is not None else Adam()
        if not isinstance(optimizer, Optimizer):
            raise ConfigurationError(f"Expected an Optimizer, {type(optimizer).__name__} given.")

        self._input = input
        self._hidden = hidden
        self._output = output
        self.optimizer = optimizer
        self.seed = seed
        self.initialized = False

    # ---------- introspection ----------
    def layers(self):
        return [self._input, *self._hidden, self._output]

    def input(self):
        return self._input

    def hidden(self):
        return list(self._hidden)

    def output(self):
        return self._output

    def num_params(self):
        self._check_initialized()
        return sum(layer.num_params() for layer in self.layers())

    # ---------- lifecycle ----------
    def initialize(self):
        # dry run first so a bad chain leaves the previous state untouched
        fan_in = self._input.width
        for layer in self.layers()[1:]:
            fan_in = layer.fan_out(fan_in)

        rng = np.random.default_rng(self.seed)
        self.optimizer.reset()

        fan_in = self._input.width
        for layer in self.layers():
            fan_in = layer.initialize(fan_in, rng)
            for param in layer.parameters().values():
                self.optimizer.register(param.id, param.shape)

        self.initialized = True

    def _check_initialized(self):
        if not self.initialized:
            raise NotInitializedError("Network must be initialized first, call initialize().")

    def _samples(self, batch):
        samples = batch.samples if isinstance(batch, Dataset) else batch
        return self._input.validate(samples)

    # ---------- passes ----------
    def infer(self, batch):
        """Forward-only pass, returns the output layer's activations."""
        self._check_initialized()
        x = self._samples(batch)
        for layer in self.layers():
            x = layer.infer(x)
        return x

    def loss(self, batch):
        """Batch-mean loss on a labeled batch without touching any parameter."""
        self._check_initialized()
        if not isinstance(batch, Labeled):
            raise ShapeMismatchError(f"Loss needs a Labeled batch, {type(batch).__name__} given.")
        x = self._samples(batch)
        if x.shape[0] == 0:
            raise ShapeMismatchError("Cannot compute the loss of an empty batch.", expected=">0", actual=0)
        expected = self._output.encode(batch.labels)
        for layer in self.layers()[:-1]:
            x = layer.infer(x)
        return float(self._output.loss(self._output.activate(x), expected))

    def roundtrip(self, batch):
        """
        One training step on a labeled batch, returns the batch-mean loss.

        Everything that can be rejected (width, label count, unknown labels)
        is checked before the first layer runs, so a failed call never leaves
        partially updated parameters behind.
        """
        self._check_initialized()
        if not isinstance(batch, Labeled):
            raise ShapeMismatchError(f"Training needs a Labeled batch, {type(batch).__name__} given.")
        x = self._samples(batch)
        if x.shape[0] == 0:
            raise ShapeMismatchError("Cannot train on an empty batch.", expected=">0", actual=0)
        expected = self._output.encode(batch.labels)

        for layer in self.layers():
            x = layer.forward(x)

        gradient, loss = self._output.back(expected, self.optimizer)

        for layer in reversed(self._hidden):
            gradient = layer.backward(gradient, self.optimizer)

        self._input.backward(gradient, self.optimizer)

        return float(loss)

    # ---------- persistence ----------
    def _named_parameters(self):
        named = {}
        for i, layer in enumerate(self.layers()):
            for name, param in layer.parameters().items():
                named[f"{i}.{name}"] = param
        return named

    def snapshot(self):
        """Copy every parameter and its optimizer accumulators, keyed by "<layer>.<name>"."""
        self._check_initialized()
        named = self._named_parameters()
        state = self.optimizer.state_dict()
        return {
            "params": {key: p.value.copy() for key, p in named.items()},
            "optimizer": {key: state[p.id] for key, p in named.items() if p.id in state},
        }

    def restore(self, snapshot):
        self._check_initialized()
        named = self._named_parameters()
        params = snapshot.get("params", {})
        if set(params) != set(named):
            raise ConfigurationError(
                f"Snapshot parameters {sorted(params)} do not match network parameters {sorted(named)}."
            )
        for key, value in params.items():
            if np.shape(value) != named[key].shape:
                raise ConfigurationError(
                    f"Parameter {key} has shape {np.shape(value)}, expected {named[key].shape}."
                )

        optimizer_state = snapshot.get("optimizer", {})
        unknown = set(optimizer_state) - set(named)
        if unknown:
            raise ConfigurationError(f"Optimizer state for unknown parameters {sorted(unknown)}.")
        # raises before anything is written if an accumulator is malformed
        self.optimizer.load_state_dict(
            {named[key].id: record for key, record in optimizer_state.items()}
        )

        for key, value in params.items():
            named[key].value[...] = value

    def save(self, path):
        snap = self.snapshot()
        arrays = {f"params:{key}": value for key, value in snap["params"].items()}
        for key, record in snap["optimizer"].items():
            for slot, value in record.items():
                arrays[f"optimizer:{key}:{slot}"] = np.asarray(value)
        path = _archive(path)
        np.savez(path, **arrays)
        return path

    def load(self, path):
        snap = {"params": {}, "optimizer": {}}
        with np.load(_archive(path)) as data:
            for name in data.files:
                kind, _, rest = name.partition(":")
                if kind == "params":
                    snap["params"][rest] = data[name]
                elif kind == "optimizer":
                    key, _, slot = rest.rpartition(":")
                    value = data[name]
                    snap["optimizer"].setdefault(key, {})[slot] = int(value) if slot == "t" else value
        self.restore(snap)

    # ---------- configuration ----------
    @classmethod
    def from_config(cls, config):
        """
        Build a network from a plain mapping, e.g.

            {
                "input": {"width": 4},
                "hidden": [
                    {"type": "dense", "neurons": 16, "weight_initializer": "he"},
                    {"type": "activation", "function": "relu"},
                    {"type": "dense", "neurons": 3},
                ],
                "output": {"type": "multiclass", "classes": ["a", "b", "c"]},
                "optimizer": {"type": "adam", "rate": 0.01},
                "seed": 0,
            }
        """
        try:
            input_layer = Input(**config["input"])
            output_conf = dict(config["output"])
        except (KeyError, TypeError) as e:
            raise ConfigurationError(f"Invalid network config: {e}") from e

        hidden = [_build(layer) for layer in config.get("hidden", [])]
        output = _build(output_conf)

        optimizer = None
        if "optimizer" in config:
            opt_conf = dict(config["optimizer"])
            optimizer = get_optimizer(opt_conf.pop("type", "adam"), **opt_conf)

        return cls(input_layer, hidden, output, optimizer=optimizer, seed=config.get("seed"))

    def __repr__(self):
        inner = ", ".join(repr(layer) for layer in self.layers())
        return f"Network([{inner}], optimizer={self.optimizer!r})"


def _archive(path):
    # np.savez appends .npz when missing, load has to look for the same file
    path = os.fspath(path)
    return path if path.endswith(".npz") else path + ".npz"


def _build(conf):
    conf = dict(conf)
    if "type" not in conf:
        raise ConfigurationError(f"Layer config {conf} is missing a type.")
    name = conf.pop("type")

    function = conf.get("function")
    if function is not None and not isinstance(function, ActivationFunction):
        conf["function"] = _named(function, get_activation)
    cost = conf.get("cost")
    if cost is not None and not isinstance(cost, CostFunction):
        conf["cost"] = _named(cost, get_cost)
    init = conf.get("weight_initializer")
    if isinstance(init, (str, dict)):
        conf["weight_initializer"] = _named(init, get_initializer)

    try:
        return get_layer(name, **conf)
    except TypeError as e:
        raise ConfigurationError(f"Invalid arguments for {name} layer: {e}") from e


def _named(spec, factory):
    # "relu" or {"type": "leaky_relu", "leakage": 0.2}
    if isinstance(spec, str):
        return factory(spec)
    spec = dict(spec)
    if "type" not in spec:
        raise ConfigurationError(f"Config {spec} is missing a type.")
    return factory(spec.pop("type"), **spec)
