import numpy as np
from .Optimizer import Optimizer
from ..exceptions import ConfigurationError


class Adam(Optimizer):
    """
    Adam with per-parameter bias correction.

    Decay rates are given as the fraction of the new gradient mixed in, so the
    usual betas are beta1 = 1 - momentum_decay and beta2 = 1 - norm_decay:

        m_t = beta1 * m_{t-1} + (1 - beta1) * g_t
        v_t = beta2 * v_{t-1} + (1 - beta2) * (g_t ** 2)

        m_hat = m_t / (1 - beta1 ** t)
        v_hat = v_t / (1 - beta2 ** t)

        delta = rate * m_hat / (sqrt(v_hat) + eps)

    t is counted per parameter, once per update() call.
    """

    slots = ("m", "v")

    def __init__(self, rate=0.001, momentum_decay=0.1, norm_decay=0.001, epsilon=1e-8):
        super().__init__(rate)
        if not 0.0 < momentum_decay < 1.0:
            raise ConfigurationError(
                f"Momentum decay must be between 0 and 1, {momentum_decay} given."
            )
        if not 0.0 < norm_decay < 1.0:
            raise ConfigurationError(
                f"Norm decay must be between 0 and 1, {norm_decay} given."
            )
        if epsilon <= 0.0:
            raise ConfigurationError(f"Epsilon must be greater than 0, {epsilon} given.")
        self.momentum_decay = float(momentum_decay)
        self.norm_decay = float(norm_decay)
        self.epsilon = float(epsilon)
        self.beta1 = 1.0 - self.momentum_decay
        self.beta2 = 1.0 - self.norm_decay

    def update(self, param_id, gradient):
        rec = self._record(param_id, gradient)
        t = rec["t"]
        m = rec["m"]
        v = rec["v"]
        # Adam moments (in-place)
        m[...] = self.beta1 * m + (1.0 - self.beta1) * gradient
        v[...] = self.beta2 * v + (1.0 - self.beta2) * (gradient * gradient)
        m_hat = m / (1.0 - self.beta1 ** t)
        v_hat = v / (1.0 - self.beta2 ** t)
        return self.rate * m_hat / (np.sqrt(v_hat) + self.epsilon)

    def __repr__(self):
        return (
            f"Adam(rate={self.rate}, momentum_decay={self.momentum_decay},"
            f" norm_decay={self.norm_decay}, epsilon={self.epsilon})"
        )
