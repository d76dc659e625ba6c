import argparse
import logging
from collections.abc import Sequence

from linreg.config import DEFAULT_LEARNING_RATE, DEFAULT_NUM_EPOCHS, TrainingConfig
from linreg.data import DEFAULT_INPUTS, DEFAULT_OUTPUTS
from linreg.models import LinearRegression

logger = logging.getLogger(__name__)


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linreg",
        description=(
            "Train a single-variable linear regression model on the reference "
            "data set (y = 10x + 2) and print its predictions for -10..10."
        ),
    )
    parser.add_argument(
        "num_epochs",
        nargs="?",
        type=_non_negative_int,
        default=DEFAULT_NUM_EPOCHS,
        help=f"number of training epochs (default: {DEFAULT_NUM_EPOCHS})",
    )
    parser.add_argument(
        "learning_rate",
        nargs="?",
        type=float,
        default=DEFAULT_LEARNING_RATE,
        help=f"learning rate (default: {DEFAULT_LEARNING_RATE})",
    )
    return parser


def run(config: TrainingConfig) -> LinearRegression:
    model = LinearRegression(rng=config.seed)
    model.attach_training_data(DEFAULT_INPUTS, DEFAULT_OUTPUTS)
    model.train(config.num_epochs, config.learning_rate)
    model.predict_range(config.range_min, config.range_max, config.range_step)
    return model


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = TrainingConfig(
            num_epochs=args.num_epochs, learning_rate=args.learning_rate
        )
    except ValueError as e:
        logger.error(f"Invalid training settings: {e}")
        return 0

    logger.info(f"Starting training: {config.to_dict()}")
    run(config)
    return 0
