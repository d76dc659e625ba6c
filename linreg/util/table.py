from collections.abc import Iterable, Iterator
from typing import TextIO

BORDER = "-" * 80
SNAP_THRESHOLD = 0.01


def snap_to_zero(value: float, threshold: float = SNAP_THRESHOLD) -> float:
    """Display `value` as exactly 0.0 when it lies strictly inside (-threshold, threshold)."""
    if -threshold < value < threshold:
        return 0.0
    return value


def format_entry(x: float, prediction: float, threshold: float = SNAP_THRESHOLD) -> str:
    return f"Input: {x:g}\nPredicted output: {snap_to_zero(prediction, threshold):g}\n"


def iter_prediction_table(
    pairs: Iterable[tuple[float, float]], threshold: float = SNAP_THRESHOLD
) -> Iterator[str]:
    """
    Yield a bordered report of (input, prediction) pairs piece by piece.

    Entries are separated by one blank line, the closing border is followed by
    an empty line. `pairs` is consumed lazily, one entry per pair.
    """
    yield f"{BORDER}\n"
    for i, (x, prediction) in enumerate(pairs):
        if i:
            yield "\n"
        yield format_entry(x, prediction, threshold)
    yield f"{BORDER}\n\n"


def write_prediction_table(
    stream: TextIO,
    pairs: Iterable[tuple[float, float]],
    threshold: float = SNAP_THRESHOLD,
) -> None:
    for chunk in iter_prediction_table(pairs, threshold):
        stream.write(chunk)


def format_prediction_table(
    pairs: Iterable[tuple[float, float]], threshold: float = SNAP_THRESHOLD
) -> str:
    return "".join(iter_prediction_table(pairs, threshold))
