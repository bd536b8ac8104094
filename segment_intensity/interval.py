from __future__ import annotations

from dataclasses import dataclass
import torch

Tensor = torch.Tensor

@dataclass(frozen=True)
class HalfOpenInterval:
    """Half-open interval [start, end) on the number line.

    An interval with start >= end covers nothing; mutations over it are
    skipped rather than rejected.
    """
    start: float
    end: float

    @property
    def is_empty(self) -> bool:
        return not self.start < self.end

    def contains(self, x) -> bool:
        return self.start <= x < self.end

    def mask(self, points: Tensor) -> Tensor:
        points = torch.as_tensor(points, dtype=torch.float64)
        return (points >= self.start) & (points < self.end)
