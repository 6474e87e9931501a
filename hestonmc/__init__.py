"""Monte Carlo option pricing, Greeks and risk metrics under the Heston model."""

__version__ = "0.1.0"

__all__ = [
    "paths",
    "options",
    "vanilla",
    "barrier",
    "exotic",
    "american",
    "greeks",
    "risk",
    "cli",
]