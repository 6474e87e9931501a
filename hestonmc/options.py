"""Common parameters and simulation for Monte Carlo option pricers."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from .paths import AssetPaths, VarianceProcess


class OptionType(str, Enum):
    """Call or put."""

    CALL = "call"
    PUT = "put"


class StrikeType(str, Enum):
    """Fixed or floating strike for path-dependent options."""

    FIXED = "fixed"
    FLOATING = "floating"


@dataclass(kw_only=True)
class OptionPricer(ABC):
    """Base for options priced by Monte Carlo under the Heston model.

    The attributes ``s0``, ``maturity``, ``r`` and ``v0`` may be changed
    between calls; each price uses fresh paths from the current values.
    """

    n_paths: int
    strike: float
    maturity: float
    r: float
    option_type: OptionType
    s0: float
    rho: float
    n_steps: int
    kappa: float
    gamma: float
    vbar: float
    v0: float
    rng: np.random.Generator = field(
        default_factory=np.random.default_rng, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self.option_type = OptionType(self.option_type)
        if self.n_paths < 1:
            raise ValueError("n_paths must be at least 1")
        if self.n_steps < 1:
            raise ValueError("n_steps must be at least 1")
        if not isinstance(self.rng, np.random.Generator):
            self.rng = np.random.default_rng(self.rng)

    @abstractmethod
    def price(self) -> float:
        """Return the Monte Carlo price of the option."""

    def simulate_path(self) -> np.ndarray:
        """Simulate one asset path of ``n_steps + 1`` points."""
        variance = VarianceProcess(
            self.n_steps, self.maturity, self.kappa, self.gamma, self.vbar, self.v0
        ).generate(self.rng)
        assets = AssetPaths(
            self.s0, self.rho, self.r, self.n_steps, self.maturity,
            self.kappa, self.gamma, self.vbar,
        )
        return assets.generate(variance, self.rng)

    def discount(self) -> float:
        """Discount factor from maturity back to today."""
        return math.exp(-self.r * self.maturity)

    def __call__(self) -> float:
        return self.price()