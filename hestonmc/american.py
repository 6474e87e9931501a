"""American options priced with the Longstaff-Schwartz least-squares method."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .options import OptionPricer, OptionType


@dataclass(kw_only=True)
class LongstaffSchwartz(OptionPricer):
    """American call or put priced by least-squares Monte Carlo.

    Continuation values are regressed on ``1, S, S**2`` over the in-the-money
    paths at each exercise date, working backwards from the last step before
    maturity.
    """

    def simulate_matrix(self) -> np.ndarray:
        """Return ``n_paths`` simulated paths as rows of ``n_steps + 1`` points."""
        return np.vstack([self.simulate_path() for _ in range(self.n_paths)])

    def _immediate(self, spots: np.ndarray) -> np.ndarray:
        if self.option_type is OptionType.CALL:
            return np.maximum(spots - self.strike, 0.0)
        return np.maximum(self.strike - spots, 0.0)

    def itm_paths(self, paths, t) -> list[int]:
        """Return the indices of paths that are in the money at step ``t``."""
        spots = np.asarray(paths, dtype=float)[:, t]
        if self.option_type is OptionType.CALL:
            mask = spots > self.strike
        else:
            mask = spots < self.strike
        return np.flatnonzero(mask).tolist()

    def payoff(self, paths) -> np.ndarray:
        """Return the per-path values after backward early-exercise decisions."""
        matrix = np.asarray(paths, dtype=float)
        if matrix.ndim != 2 or matrix.shape[1] != self.n_steps + 1:
            raise ValueError(
                f"paths must have {self.n_steps + 1} columns, got shape {matrix.shape}"
            )
        step_discount = math.exp(-self.r * self.maturity / self.n_steps)
        values = np.zeros(matrix.shape[0])
        for t in range(self.n_steps - 1, -1, -1):
            idx = np.array(self.itm_paths(matrix, t), dtype=int)
            if idx.size == 0:
                continue
            spots = matrix[idx, t]
            design = np.column_stack([np.ones_like(spots), spots, spots * spots])
            target = values[idx] * step_discount
            coeffs, *_ = np.linalg.lstsq(design, target, rcond=None)
            continuation = design @ coeffs
            immediate = self._immediate(spots)
            values[idx] = np.where(
                immediate > continuation, immediate, values[idx] * step_discount
            )
        return values

    def price(self) -> float:
        """Return the Monte Carlo price of the American option."""
        return float(self.payoff(self.simulate_matrix()).sum() / self.n_paths)