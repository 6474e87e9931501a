"""Command line pricing of an American option with its counterparty risk."""

from __future__ import annotations

import argparse
import time

from .american import LongstaffSchwartz
from .options import OptionType
from .risk import Exposure, cva, expected_exposure, potential_future_exposure


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hestonmc",
        description="Price an American option under Heston and report EE, PFE and CVA.",
    )
    parser.add_argument("--paths", type=int, default=100, help="Monte Carlo paths")
    parser.add_argument("--steps", type=int, default=100, help="time steps per path")
    parser.add_argument("--kappa", type=float, default=0.05)
    parser.add_argument("--gamma", type=float, default=0.05)
    parser.add_argument("--vbar", type=float, default=0.04)
    parser.add_argument("--v0", type=float, default=0.05)
    parser.add_argument("--maturity", type=float, default=2.0)
    parser.add_argument("--s0", type=float, default=100.0)
    parser.add_argument("--rho", type=float, default=0.7)
    parser.add_argument("--r", type=float, default=0.05)
    parser.add_argument("--strike", type=float, default=100.0)
    parser.add_argument("--put", action="store_true", help="price a put instead of a call")
    parser.add_argument("--sims", type=int, default=10, help="exposure simulations")
    parser.add_argument("--horizon", type=float, default=0.25, help="exposure horizon")
    parser.add_argument("--quantile", type=float, default=0.95, help="PFE quantile")
    parser.add_argument("--hazard-rate", type=float, default=0.03)
    parser.add_argument("--recovery-rate", type=float, default=0.6)
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser


def main(argv=None) -> int:
    """Run the pricing and print the price and risk figures."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not 0.0 <= args.quantile <= 1.0:
        parser.error("--quantile must lie in [0, 1]")

    start = time.perf_counter()
    option_type = OptionType.PUT if args.put else OptionType.CALL
    label = option_type.value.capitalize()
    try:
        option = LongstaffSchwartz(
            n_paths=args.paths, strike=args.strike, maturity=args.maturity,
            r=args.r, option_type=option_type, s0=args.s0, rho=args.rho,
            n_steps=args.steps, kappa=args.kappa, gamma=args.gamma,
            vbar=args.vbar, v0=args.v0, rng=args.seed,
        )
        exposure = Exposure(option, args.sims, args.horizon)
        price = option()
        ee = expected_exposure(exposure)
        pfe = potential_future_exposure(exposure, args.quantile)
        adjustment = cva(exposure, option, args.hazard_rate, args.recovery_rate)
    except ValueError as exc:
        parser.error(str(exc))
    elapsed = time.perf_counter() - start

    percent = f"{args.quantile * 100:g}%"
    print(f"The option price ({label}_A) is: {price}")
    print(f"The option EE ({label}) is: {ee}")
    print(f"The option PFE ({percent}) ({label}) is: {pfe}")
    print(f"The option CVA ({label}) is: {adjustment}")
    print(f"The option price CVA - option value ({label}) is: {price - adjustment}")
    print(f"Simulation took {elapsed} seconds.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())