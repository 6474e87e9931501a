"""Simulation of Heston variance paths and the matching asset paths."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


def _generator(rng) -> np.random.Generator:
    """Return ``rng`` if it is a Generator, otherwise seed a new one from it."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


@dataclass(frozen=True)
class VarianceProcess:
    """Exact CIR simulation of the Heston variance process on a uniform grid."""

    n_steps: int
    maturity: float
    kappa: float
    gamma: float
    vbar: float
    v0: float

    def __post_init__(self) -> None:
        if self.n_steps < 1:
            raise ValueError("n_steps must be at least 1")
        if self.maturity <= 0:
            raise ValueError("maturity must be positive")
        if self.kappa <= 0:
            raise ValueError("kappa must be positive")
        if self.gamma == 0:
            raise ValueError("gamma must be non-zero")
        if self.vbar <= 0:
            raise ValueError("vbar must be positive")
        if self.v0 < 0:
            raise ValueError("v0 must be non-negative")

    def generate(self, rng=None) -> np.ndarray:
        """Return a variance path of ``n_steps + 1`` points starting at ``v0``."""
        gen = _generator(rng)
        dt = self.maturity / self.n_steps
        decay = math.exp(-self.kappa * dt)
        gamma2 = self.gamma * self.gamma
        degrees = 4.0 * self.kappa * self.vbar / gamma2
        scale = gamma2 * (1.0 - decay) / (4.0 * self.kappa)
        ratio = 4.0 * self.kappa * decay / (gamma2 * (1.0 - decay))

        current = self.v0
        samples = [current]
        for _ in range(self.n_steps):
            draw = gen.noncentral_chisquare(degrees, ratio * current)
            current = max(scale * draw, 0.0)
            samples.append(current)
        return np.array(samples)


@dataclass(frozen=True)
class AssetPaths:
    """Log-Euler asset paths driven by a given Heston variance path."""

    s0: float
    rho: float
    r: float
    n_steps: int
    maturity: float
    kappa: float
    gamma: float
    vbar: float

    def __post_init__(self) -> None:
        if self.n_steps < 1:
            raise ValueError("n_steps must be at least 1")
        if self.maturity <= 0:
            raise ValueError("maturity must be positive")
        if self.s0 <= 0:
            raise ValueError("s0 must be positive")
        if self.gamma == 0:
            raise ValueError("gamma must be non-zero")

    def generate(self, variance, rng=None) -> np.ndarray:
        """Return an asset path of ``n_steps + 1`` points starting at ``s0``."""
        v = np.asarray(variance, dtype=float)
        if v.shape != (self.n_steps + 1,):
            raise ValueError(
                f"variance path must have {self.n_steps + 1} points, got {v.shape}"
            )
        gen = _generator(rng)
        dt = self.maturity / self.n_steps
        sqrt_dt = math.sqrt(dt)
        ratio = self.rho / self.gamma
        k0 = (self.r - ratio * self.kappa * self.vbar) * dt
        k1 = (self.rho * self.kappa / self.gamma - 0.5) * dt - ratio
        k2 = ratio

        z = gen.standard_normal(self.n_steps)
        increments = (
            k0
            + k1 * v[:-1]
            + k2 * v[1:]
            + np.sqrt((1.0 - self.rho * self.rho) * v[:-1]) * sqrt_dt * z
        )
        log_path = math.log(self.s0) + np.cumsum(increments)
        path = np.empty(self.n_steps + 1)
        path[0] = self.s0
        path[1:] = np.exp(log_path)
        return path