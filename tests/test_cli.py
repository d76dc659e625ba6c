import pytest

from linreg.cli import build_parser, main, run
from linreg.config import TrainingConfig
from linreg.util.table import BORDER


def test_main_prints_range_report(capsys):
    assert main(["50", "0.01"]) == 0

    out = capsys.readouterr().out
    entries = [line for line in out.splitlines() if line.startswith("Input:")]
    assert len(entries) == 21
    assert out.startswith(f"{BORDER}\n")
    assert out.endswith(f"{BORDER}\n\n")


def test_parser_defaults():
    args = build_parser().parse_args([])

    assert args.num_epochs == 10000
    assert args.learning_rate == 0.01


def test_parser_single_argument():
    args = build_parser().parse_args(["250"])

    assert args.num_epochs == 250
    assert args.learning_rate == 0.01


@pytest.mark.parametrize("argv", [["-5"], ["abc"], ["10", "fast"], ["1", "2", "3"]])
def test_parser_rejects_malformed_arguments(argv):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(argv)

    assert excinfo.value.code == 2


def test_run_is_repeatable_with_seed(capsys):
    config = TrainingConfig(num_epochs=100, learning_rate=0.01, seed=3)

    first = run(config)
    second = run(config)

    assert first.get_weights() == second.get_weights()
    out = capsys.readouterr().out
    assert out.count(BORDER) == 4


def test_zero_epochs_still_reports(capsys):
    model = run(TrainingConfig(num_epochs=0, seed=0))

    assert model.optimizer.iterations == 0
    assert capsys.readouterr().out.count("Input:") == 21


@pytest.mark.parametrize("rate", ["inf", "nan", "-inf"])
def test_non_finite_learning_rate_is_reported(rate, capsys, caplog):
    assert main(["10", rate]) == 0

    assert capsys.readouterr().out == ""
    assert "learning_rate must be finite" in caplog.text
