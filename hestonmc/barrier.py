"""European barrier options with knock-in and knock-out features."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from .options import OptionPricer, OptionType


class BarrierKind(str, Enum):
    """Direction of the barrier and whether touching it activates or kills the option."""

    DOWN_IN = "down_in"
    DOWN_OUT = "down_out"
    UP_IN = "up_in"
    UP_OUT = "up_out"

    @property
    def is_down(self) -> bool:
        return self in (BarrierKind.DOWN_IN, BarrierKind.DOWN_OUT)

    @property
    def is_knock_in(self) -> bool:
        return self in (BarrierKind.DOWN_IN, BarrierKind.UP_IN)


@dataclass(kw_only=True)
class BarrierOption(OptionPricer):
    """European call or put that is switched on or off by a barrier.

    The barrier is monitored on every simulated point except the terminal one.
    A down barrier is hit when the asset is at or below it, an up barrier when
    the asset is at or above it.
    """

    barrier: float
    kind: BarrierKind

    def __post_init__(self) -> None:
        super().__post_init__()
        self.kind = BarrierKind(self.kind)

    def _hit(self, path) -> bool:
        monitored = np.asarray(path, dtype=float)[:-1]
        if self.kind.is_down:
            return bool(np.any(monitored <= self.barrier))
        return bool(np.any(monitored >= self.barrier))

    def is_active(self, path) -> bool:
        """Return whether the option pays at maturity along ``path``."""
        hit = self._hit(path)
        return hit if self.kind.is_knock_in else not hit

    def _terminal_payoff(self, terminal: float) -> float:
        if self.option_type is OptionType.CALL:
            return max(terminal - self.strike, 0.0)
        return max(self.strike - terminal, 0.0)

    def price(self) -> float:
        total = 0.0
        for _ in range(self.n_paths):
            path = self.simulate_path()
            if self.is_active(path):
                total += self._terminal_payoff(float(path[-1]))
        return total * self.discount() / self.n_paths