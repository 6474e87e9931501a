"""European plain vanilla options."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .options import OptionPricer, OptionType


@dataclass(kw_only=True)
class EuropeanVanilla(OptionPricer):
    """European call or put paying on the terminal asset price."""

    def price(self) -> float:
        terminals = np.array([self.simulate_path()[-1] for _ in range(self.n_paths)])
        if self.option_type is OptionType.CALL:
            payoffs = np.maximum(terminals - self.strike, 0.0)
        else:
            payoffs = np.maximum(self.strike - terminals, 0.0)
        return float(payoffs.mean() * self.discount())