# hestonmc

Monte Carlo pricing of European, barrier, Asian, lookback and American
options under the Heston stochastic-volatility model. The package also
computes finite-difference Greeks and counterparty exposure metrics:
expected exposure, potential future exposure and CVA.

The variance process is sampled exactly from its non-central chi-squared
transition law. Asset paths are then built on top of it with a log-Euler
scheme that is correlated with the variance. The only runtime dependency
is NumPy.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
hestonmc
```

With no options, this prices an at-the-money American call (S0 = 100,
K = 100, T = 2) with the Longstaff–Schwartz method on 100 Heston paths
of 100 steps. It then prints:

- the option price
- the expected exposure
- the 95% potential future exposure
- the CVA
- the price minus the CVA
- how long the run took

Every input can be changed on the command line:

- model and contract: `--paths`, `--steps`, `--kappa`, `--gamma`,
  `--vbar`, `--v0`, `--maturity`, `--s0`, `--rho`, `--r`, `--strike`,
  and `--put` to price a put instead of a call
- exposure: `--sims` (number of exposure simulations), `--horizon`
  (exposure time) and `--quantile` (PFE quantile in [0, 1])
- credit: `--hazard-rate`, `--recovery-rate`
- reproducibility: `--seed`

Invalid parameters are reported as a usage error.

## Library overview

| Module | Contents |
| --- | --- |
| `hestonmc.paths` | `VarianceProcess`, `AssetPaths`: path generators |
| `hestonmc.options` | `OptionType`, `StrikeType`, `OptionPricer` base class |
| `hestonmc.vanilla` | `EuropeanVanilla` |
| `hestonmc.barrier` | `BarrierKind`, `BarrierOption` (up/down, in/out) |
| `hestonmc.exotic` | `AsianOption`, `LookbackOption` (fixed or floating strike) |
| `hestonmc.american` | `LongstaffSchwartz` least-squares Monte Carlo |
| `hestonmc.greeks` | `delta`, `gamma`, `rho`, `theta`, `vega` |
| `hestonmc.risk` | `Exposure`, `expected_exposure`, `potential_future_exposure`, `cva` |
| `hestonmc.cli` | `main`, the command line entry point |

Every pricer is an `OptionPricer` built from keyword arguments:
`n_paths`, `strike`, `maturity`, `r`, `option_type`, `s0`, `rho`,
`n_steps`, `kappa`, `gamma`, `vbar` and `v0`. It also takes an optional
`rng`, which may be a NumPy `Generator` or a seed. `BarrierOption` also
needs `barrier` and `kind`. `AsianOption` and `LookbackOption` also need
`strike_type`.

Calling `price()`, or calling the pricer itself, runs a fresh simulation
and returns the discounted average payoff.

```python
from hestonmc.vanilla import EuropeanVanilla

option = EuropeanVanilla(
    n_paths=1000, strike=100.0, maturity=1.0, r=0.05, option_type="call",
    s0=100.0, rho=0.7, n_steps=50, kappa=0.05, gamma=0.05, vbar=0.04,
    v0=0.05, rng=42,
)
print(option())
```

### Greeks

The Greeks bump one attribute of the option up and down by `h` and
reprice each time. `delta` and `gamma` bump `s0`, `rho` bumps `r`,
`theta` bumps `maturity`, and `vega` bumps `v0`. Results are scaled per
percentage point. The attribute is put back afterwards, even if pricing
fails. An `h` of zero raises `ValueError`.

### Risk measures

An `Exposure(option, n_sims, t)` reprices the option over its remaining
life `maturity - t`. It grows each price forward at the option's rate.
`values()` returns `n_sims` such exposures at `t`. `at(t)` does the same
for another time without changing the stored one.

- `expected_exposure` is the mean of the exposures.
- `potential_future_exposure` takes the exposure at a quantile, rounding
  the rank upwards.
- `cva` sums the discounted expected loss over quarterly steps up to the
  option's maturity, using a constant hazard rate and recovery rate.

Results are Monte Carlo estimates. Repeated runs give different values
unless a seed is fixed, and the spread narrows as the number of paths
grows.

## Limitations

The package has no calibration to market prices, no closed-form Heston
prices to check against, and no storage of results. Simulation runs in a
single process, path by path.