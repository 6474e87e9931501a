import numpy as np
import pytest

from hestonmc.barrier import BarrierKind, BarrierOption
from hestonmc.options import OptionType
from hestonmc.vanilla import EuropeanVanilla

PARAMS = dict(
    n_paths=40,
    strike=100.0,
    maturity=2.0,
    r=0.05,
    s0=100.0,
    rho=0.7,
    n_steps=12,
    kappa=0.05,
    gamma=0.05,
    vbar=0.04,
    v0=0.05,
)


def make(kind, barrier, option_type=OptionType.CALL, seed=7, **overrides):
    params = {**PARAMS, **overrides}
    return BarrierOption(
        kind=kind, barrier=barrier, option_type=option_type, rng=seed, **params
    )


def test_kind_accepts_string():
    option = make("up_out", 120.0)
    assert option.kind is BarrierKind.UP_OUT


def test_invalid_kind_raises():
    with pytest.raises(ValueError):
        make("sideways", 120.0)


@pytest.mark.parametrize(
    "kind, path, expected",
    [
        (BarrierKind.DOWN_IN, [100.0, 95.0, 89.0, 110.0], True),
        (BarrierKind.DOWN_IN, [100.0, 95.0, 92.0, 110.0], False),
        (BarrierKind.DOWN_OUT, [100.0, 95.0, 89.0, 110.0], False),
        (BarrierKind.DOWN_OUT, [100.0, 95.0, 92.0, 110.0], True),
    ],
)
def test_down_barrier_activity(kind, path, expected):
    option = make(kind, 90.0)
    assert option.is_active(np.array(path)) is expected


@pytest.mark.parametrize(
    "kind, path, expected",
    [
        (BarrierKind.UP_IN, [100.0, 105.0, 121.0, 90.0], True),
        (BarrierKind.UP_IN, [100.0, 105.0, 115.0, 90.0], False),
        (BarrierKind.UP_OUT, [100.0, 105.0, 121.0, 90.0], False),
        (BarrierKind.UP_OUT, [100.0, 105.0, 115.0, 90.0], True),
    ],
)
def test_up_barrier_activity(kind, path, expected):
    option = make(kind, 120.0)
    assert option.is_active(np.array(path)) is expected


def test_touching_barrier_counts_as_hit():
    assert make(BarrierKind.DOWN_IN, 90.0).is_active([100.0, 90.0, 100.0]) is True
    assert make(BarrierKind.UP_OUT, 110.0).is_active([100.0, 110.0, 100.0]) is False


def test_terminal_point_is_not_monitored():
    path = [100.0, 100.0, 150.0]
    assert make(BarrierKind.UP_IN, 120.0).is_active(path) is False
    assert make(BarrierKind.UP_OUT, 120.0).is_active(path) is True


@pytest.mark.parametrize("option_type", [OptionType.CALL, OptionType.PUT])
@pytest.mark.parametrize(
    "kind_in, kind_out, barrier",
    [
        (BarrierKind.DOWN_IN, BarrierKind.DOWN_OUT, 95.0),
        (BarrierKind.UP_IN, BarrierKind.UP_OUT, 105.0),
    ],
)
def test_in_plus_out_equals_vanilla(option_type, kind_in, kind_out, barrier):
    knock_in = make(kind_in, barrier, option_type).price()
    knock_out = make(kind_out, barrier, option_type).price()
    vanilla = EuropeanVanilla(option_type=option_type, rng=7, **PARAMS).price()
    assert knock_in + knock_out == pytest.approx(vanilla, rel=1e-9, abs=1e-12)


def test_down_in_with_barrier_above_spot_equals_vanilla():
    knock_in = make(BarrierKind.DOWN_IN, 100.0).price()
    vanilla = EuropeanVanilla(option_type=OptionType.CALL, rng=7, **PARAMS).price()
    assert knock_in == pytest.approx(vanilla)


def test_up_out_with_barrier_below_spot_is_worthless():
    assert make(BarrierKind.UP_OUT, 100.0).price() == 0.0


@pytest.mark.parametrize("kind", list(BarrierKind))
@pytest.mark.parametrize("option_type", [OptionType.CALL, OptionType.PUT])
def test_prices_are_non_negative(kind, option_type):
    assert make(kind, 100.0 * 1.05, option_type).price() >= 0.0


def test_call_operator_matches_price_for_same_seed():
    first = make(BarrierKind.DOWN_OUT, 95.0)
    second = make(BarrierKind.DOWN_OUT, 95.0)
    assert first() == pytest.approx(second.price())


def test_knock_out_not_above_vanilla():
    knock_out = make(BarrierKind.UP_OUT, 110.0).price()
    vanilla = EuropeanVanilla(option_type=OptionType.CALL, rng=7, **PARAMS).price()
    assert knock_out <= vanilla + 1e-12


def test_invalid_path_count_raises():
    with pytest.raises(ValueError):
        make(BarrierKind.UP_IN, 120.0, n_paths=0)