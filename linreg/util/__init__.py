from .functions import naive_shuffle
from .table import (
    BORDER,
    SNAP_THRESHOLD,
    format_prediction_table,
    snap_to_zero,
    write_prediction_table,
)

__all__ = [
    "naive_shuffle",
    "BORDER",
    "SNAP_THRESHOLD",
    "format_prediction_table",
    "snap_to_zero",
    "write_prediction_table",
]
