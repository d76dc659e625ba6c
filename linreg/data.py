from pathlib import Path

import numpy as np

# Reference training set, sampled from y = 10x + 2.
DEFAULT_INPUTS = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
DEFAULT_OUTPUTS = np.array([2.0, 12.0, 22.0, 32.0, 42.0])


def load_csv(
    path: str | Path, delimiter: str = ",", skip_header: bool = False
) -> tuple[np.ndarray, np.ndarray]:
    """
    Read training pairs from a two-column text file, one ``input,output``
    pair per row.

    Returns two float64 arrays that the caller owns and can hand to
    ``LinearRegression.attach_training_data``.
    """
    table = np.loadtxt(
        path, delimiter=delimiter, skiprows=int(skip_header), ndmin=2, dtype=np.float64
    )
    if table.shape[1] != 2:
        raise ValueError(
            f"{path}: expected 2 columns (input, output), got {table.shape[1]}"
        )
    return np.ascontiguousarray(table[:, 0]), np.ascontiguousarray(table[:, 1])
