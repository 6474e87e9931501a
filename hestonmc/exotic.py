"""Path-dependent European options: Asian and lookback."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .options import OptionPricer, OptionType, StrikeType


@dataclass(kw_only=True)
class _PathDependentOption(OptionPricer):
    """European option whose payoff depends on the whole simulated path."""

    strike_type: StrikeType

    def __post_init__(self) -> None:
        super().__post_init__()
        self.strike_type = StrikeType(self.strike_type)

    def payoff(self, path) -> float:  # pragma: no cover - overridden
        raise NotImplementedError

    def price(self) -> float:
        total = sum(self.payoff(self.simulate_path()) for _ in range(self.n_paths))
        return total * self.discount() / self.n_paths


@dataclass(kw_only=True)
class AsianOption(_PathDependentOption):
    """Arithmetic-average Asian option with a fixed or floating strike.

    The path average is the sum of all simulated points divided by ``n_steps``.
    """

    def payoff(self, path) -> float:
        """Return the undiscounted payoff along ``path``."""
        values = np.asarray(path, dtype=float)
        terminal = float(values[-1])
        average = float(values.sum()) / self.n_steps
        if self.option_type is OptionType.CALL:
            if self.strike_type is StrikeType.FIXED:
                return max(average - self.strike, 0.0)
            return max(terminal - average, 0.0)
        if self.strike_type is StrikeType.FIXED:
            return max(self.strike - average, 0.0)
        return max(average - terminal, 0.0)

    def price(self) -> float:
        """Return the Monte Carlo price of the Asian option."""
        return super().price()


@dataclass(kw_only=True)
class LookbackOption(_PathDependentOption):
    """Lookback option on the path maximum or minimum."""

    def payoff(self, path) -> float:
        """Return the undiscounted payoff along ``path``."""
        values = np.asarray(path, dtype=float)
        terminal = float(values[-1])
        highest = float(values.max())
        lowest = float(values.min())
        if self.option_type is OptionType.CALL:
            if self.strike_type is StrikeType.FIXED:
                return max(highest - self.strike, 0.0)
            return max(terminal - lowest, 0.0)
        if self.strike_type is StrikeType.FIXED:
            return max(self.strike - lowest, 0.0)
        return max(highest - terminal, 0.0)

    def price(self) -> float:
        """Return the Monte Carlo price of the lookback option."""
        return super().price()