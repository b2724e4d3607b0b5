from __future__ import annotations

class InterpolationError(ValueError):
    """Base class for every failure raised by the interpolator."""

class SampleLengthError(InterpolationError):
    def __init__(self, nx: int, ny: int):
        super().__init__(f"x and y must have the same length (got {nx} and {ny})")
        self.nx = nx; self.ny = ny

class EmptySampleError(InterpolationError):
    def __init__(self):
        super().__init__("at least one sample is required")

class DuplicateAbscissaError(InterpolationError):
    # divided differences divide by (x_j - x_i)
    def __init__(self, x: float, first: int, second: int):
        super().__init__(f"duplicate x-value {x!r} at samples {first} and {second}")
        self.x = x; self.first = first; self.second = second

class DegreeLimitError(InterpolationError):
    def __init__(self, n: int, limit: int):
        super().__init__(f"{n} samples exceed the limit of {limit} (expansion costs 2^n)")
        self.n = n; self.limit = limit

class NotReadyError(InterpolationError):
    def __init__(self):
        super().__init__("no samples loaded")

class NonFiniteSampleError(InterpolationError):
    def __init__(self, x: float, y: float, index: int):
        super().__init__(f"non-finite sample ({x!r}, {y!r}) at index {index}")
        self.x = x; self.y = y; self.index = index
