from dataclasses import dataclass
import numpy as np
from typing import Tuple

@dataclass(frozen=True)
class Sample: x: float; y: float

@dataclass
class FitSummary: samples: Tuple[Sample, ...]; coefficients: np.ndarray; integral: float; trapezoid: float
