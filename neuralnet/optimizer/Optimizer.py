import numpy as np

from ..exceptions import ConfigurationError, NotInitializedError, ShapeMismatchError


class Optimizer:
    """
    Stateful per-parameter update rule.

    Accumulators live in a single table keyed by the integer id of each
    registered Parameter. update() returns the already-signed step, the
    caller subtracts it from the parameter.
    """

    # names of the per-parameter accumulator arrays, overridden by subclasses
    slots = ()

    def __init__(self, rate):
        if rate <= 0.0:
            raise ConfigurationError(f"Learning rate must be greater than 0, {rate} given.")
        self.rate = float(rate)
        self._state = {}
        self._shapes = {}

    def register(self, param_id, shape):
        shape = tuple(shape)
        record = {name: np.zeros(shape, dtype=np.float64) for name in self.slots}
        record["t"] = 0
        self._state[param_id] = record
        self._shapes[param_id] = shape

    def reset(self):
        self._state = {}
        self._shapes = {}

    def registered(self):
        return list(self._state.keys())

    def _record(self, param_id, gradient):
        if param_id not in self._state:
            raise NotInitializedError(f"Parameter {param_id} was never registered.")
        shape = self._shapes[param_id]
        if gradient.shape != shape:
            raise ShapeMismatchError(
                f"Gradient shape {gradient.shape} does not match parameter"
                f" {param_id} shape {shape}.",
                expected=shape,
                actual=gradient.shape,
            )
        record = self._state[param_id]
        record["t"] += 1
        return record

    def update(self, param_id, gradient):
        raise NotImplementedError

    # ---------- persistence ----------
    def state_dict(self):
        return {
            pid: {k: (v.copy() if isinstance(v, np.ndarray) else v) for k, v in rec.items()}
            for pid, rec in self._state.items()
        }

    def load_state_dict(self, state):
        for pid, rec in state.items():
            if pid not in self._state:
                raise ConfigurationError(f"Parameter {pid} is not registered with this optimizer.")
            missing = [name for name in (*self.slots, "t") if name not in rec]
            if missing:
                raise ConfigurationError(f"State of parameter {pid} is missing {missing}.")
            for name in self.slots:
                value = np.asarray(rec[name], dtype=np.float64)
                if value.shape != self._shapes[pid]:
                    raise ConfigurationError(
                        f"Accumulator {name} of parameter {pid} has shape {value.shape},"
                        f" expected {self._shapes[pid]}."
                    )
        # validated in full above so a bad record never leaves a partial load
        for pid, rec in state.items():
            self._state[pid] = {
                **{name: np.array(rec[name], dtype=np.float64) for name in self.slots},
                "t": int(rec["t"]),
            }

    def __repr__(self):
        return f"{self.__class__.__name__}(rate={self.rate})"
