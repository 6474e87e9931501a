"""Counterparty risk measures built on repeated option repricing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import count
from typing import Any

_CVA_STEP = 0.25


@dataclass
class Exposure:
    """Simulated exposures of an option at horizon ``t``.

    Each exposure reprices the option with its remaining life and grows the
    price forward to ``t`` at the option's rate.
    """

    option: Any
    n_sims: int
    t: float

    def __post_init__(self) -> None:
        if self.n_sims < 0:
            raise ValueError("n_sims must be non-negative")

    def values(self) -> list[float]:
        """Return ``n_sims`` exposures at the current horizon ``t``."""
        return self.at(self.t)

    def at(self, t) -> list[float]:
        """Return ``n_sims`` exposures at horizon ``t``, leaving ``self.t`` unchanged."""
        original = self.option.maturity
        remaining = original - t
        growth = math.exp(self.option.r * remaining)
        self.option.maturity = remaining
        try:
            return [self.option() * growth for _ in range(self.n_sims)]
        finally:
            self.option.maturity = original

    def __call__(self) -> list[float]:
        return self.values()


def _mean(values: list[float]) -> float:
    if not values:
        raise ValueError("exposure has no simulations")
    return sum(values) / len(values)


def expected_exposure(exposure) -> float:
    """Mean of the simulated exposures."""
    return _mean(exposure.values())


def potential_future_exposure(exposure, quantile) -> float:
    """Exposure at the given quantile, rounding the rank upwards."""
    if not 0.0 <= quantile <= 1.0:
        raise ValueError("quantile must lie in [0, 1]")
    ordered = sorted(exposure.values())
    if not ordered:
        raise ValueError("exposure has no simulations")
    return ordered[math.ceil((len(ordered) - 1) * quantile)]


def cva(exposure, option, hazard_rate, recovery_rate) -> float:
    """Credit valuation adjustment on a quarterly grid up to the option's maturity."""
    maturity = option.maturity
    rate = option.r
    total = 0.0
    for k in count():
        t = k * _CVA_STEP
        if t >= maturity:
            break
        ee = _mean(exposure.at(t))
        default_prob = math.exp(-hazard_rate * t) - math.exp(
            -hazard_rate * (t + _CVA_STEP)
        )
        total += (1 - recovery_rate) * ee * default_prob * math.exp(-rate * t)
    return total