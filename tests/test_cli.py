import pytest

from hestonmc.cli import main

FAST = ["--paths", "20", "--steps", "8", "--sims", "3", "--seed", "7"]


def run(capsys, argv):
    code = main(argv)
    lines = capsys.readouterr().out.strip().splitlines()
    return code, lines


def value_of(lines, prefix):
    for line in lines:
        if line.startswith(prefix):
            return float(line.rsplit(":", 1)[1])
    raise AssertionError(f"no line starting with {prefix!r}")


def test_reports_all_figures(capsys):
    code, lines = run(capsys, FAST)
    assert code == 0
    assert len(lines) == 6
    assert lines[0].startswith("The option price (Call_A) is: ")
    assert lines[2].startswith("The option PFE (95%) (Call) is: ")
    assert lines[-1].startswith("Simulation took ")


def test_risky_value_is_price_minus_cva(capsys):
    _, lines = run(capsys, FAST)
    price = value_of(lines, "The option price (Call_A)")
    adjustment = value_of(lines, "The option CVA (Call)")
    risky = value_of(lines, "The option price CVA - option value (Call)")
    assert price >= 0
    assert adjustment >= 0
    assert risky == pytest.approx(price - adjustment)


def test_seed_makes_runs_repeatable(capsys):
    _, first = run(capsys, FAST)
    _, second = run(capsys, FAST)
    assert first[:5] == second[:5]


def test_put_flag_labels_output(capsys):
    _, lines = run(capsys, FAST + ["--put"])
    assert lines[0].startswith("The option price (Put_A) is: ")
    assert value_of(lines, "The option EE (Put)") >= 0


def test_pfe_not_below_expected_exposure_at_max_quantile(capsys):
    _, lines = run(capsys, FAST + ["--quantile", "1"])
    ee = value_of(lines, "The option EE (Call)")
    pfe = value_of(lines, "The option PFE (100%) (Call)")
    assert pfe >= ee - 1e-9


def test_bad_quantile_rejected():
    with pytest.raises(SystemExit) as info:
        main(FAST + ["--quantile", "1.5"])
    assert info.value.code == 2


def test_invalid_path_count_rejected():
    with pytest.raises(SystemExit) as info:
        main(["--paths", "0", "--steps", "4"])
    assert info.value.code == 2