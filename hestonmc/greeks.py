"""Finite-difference sensitivities of Monte Carlo option prices.

Each function bumps one attribute of the option (``s0``, ``r``, ``maturity``
or ``v0``), reprices, and restores the attribute afterwards, even if pricing
fails. Results are scaled per percentage point of the bumped quantity.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator

_FIRST_ORDER_SCALE = 100.0
_SECOND_ORDER_SCALE = 10_000.0


@contextmanager
def _perturbed(option, attr: str) -> Iterator[Callable[[float], float]]:
    """Yield a function pricing ``option`` with ``attr`` shifted by a given amount."""
    original = getattr(option, attr)

    def price_at(shift: float) -> float:
        setattr(option, attr, original + shift)
        return option()

    try:
        yield price_at
    finally:
        setattr(option, attr, original)


def _check_step(h: float) -> None:
    if h == 0:
        raise ValueError("perturbation size h must be non-zero")


def _central_difference(option, attr: str, h: float) -> float:
    _check_step(h)
    with _perturbed(option, attr) as price_at:
        up = price_at(h)
        down = price_at(-h)
    return (up - down) / (2 * h * _FIRST_ORDER_SCALE)


def delta(option, h) -> float:
    """Sensitivity of the price to the spot ``s0``."""
    return _central_difference(option, "s0", h)


def gamma(option, h) -> float:
    """Second-order sensitivity of the price to the spot ``s0``."""
    _check_step(h)
    with _perturbed(option, "s0") as price_at:
        up = price_at(h)
        down = price_at(-h)
        # the centre term is evaluated at the down-shifted spot
        centre = option()
    return (up - 2 * centre + down) / (h * h * _SECOND_ORDER_SCALE)


def rho(option, h) -> float:
    """Sensitivity of the price to the interest rate ``r``."""
    return _central_difference(option, "r", h)


def theta(option, h) -> float:
    """Sensitivity of the price to the maturity."""
    return _central_difference(option, "maturity", h)


def vega(option, h) -> float:
    """Sensitivity of the price to the initial variance ``v0``."""
    return _central_difference(option, "v0", h)