import math
from dataclasses import asdict, dataclass
from typing import Any

DEFAULT_NUM_EPOCHS = 10000
DEFAULT_LEARNING_RATE = 0.01


@dataclass
class TrainingConfig:
    """Settings for one train-and-report run."""

    num_epochs: int = DEFAULT_NUM_EPOCHS
    learning_rate: float = DEFAULT_LEARNING_RATE
    range_min: float = -10.0
    range_max: float = 10.0
    range_step: float = 1.0
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.num_epochs < 0:
            raise ValueError(f"num_epochs must be non-negative, got {self.num_epochs}")
        if not math.isfinite(self.learning_rate):
            raise ValueError(f"learning_rate must be finite, got {self.learning_rate}")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
