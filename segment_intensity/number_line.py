from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterable
import torch

Tensor = torch.Tensor

@dataclass(frozen=True)
class NumberLine:
    """Immutable snapshot of a piecewise-constant intensity function.

    ``points[i]`` is where ``intensities[i]`` starts to hold; it lasts up to
    ``points[i + 1]`` (or forever for the last entry). Left of ``points[0]``
    and on an empty line the intensity is 0.

    Intensities are plain Python ints so they never overflow. Scalar and
    sequence lookups compare against ``points`` natively, so they are exact
    for ints of any size and for ``Fraction`` points. Tensor lookups go
    through ``torch.searchsorted`` on a float64 copy of the points.
    """
    points: tuple = ()
    intensities: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "points", tuple(self.points))
        object.__setattr__(self, "intensities", tuple(self.intensities))
        p, v = self.points, self.intensities
        if len(p) != len(v):
            raise ValueError("points and intensities must have the same length")
        if any(not isinstance(a, int) or isinstance(a, bool) for a in v):
            raise ValueError("intensities must be ints")
        if any(not b > a for a, b in zip(p, p[1:])):
            raise ValueError("points must be strictly increasing")
        if v and v[0] == 0:
            raise ValueError("first intensity must be nonzero")
        if any(a == b for a, b in zip(v, v[1:])):
            raise ValueError("adjacent intensities must differ")

    @classmethod
    def from_pairs(cls, pairs: Iterable) -> "NumberLine":
        pairs = [tuple(pair) for pair in pairs]
        return cls(
            points=tuple(point for point, _ in pairs),
            intensities=tuple(intensity for _, intensity in pairs),
        )

    def to_pairs(self) -> list[list]:
        return [[point, intensity] for point, intensity in zip(self.points, self.intensities)]

    def __len__(self) -> int:
        return len(self.points)

    @property
    def is_zero(self) -> bool:
        return len(self.points) == 0

    def breaks(self) -> Tensor:
        return torch.tensor(self.points, dtype=torch.float64)

    def locate(self, x) -> Tensor:
        """Index of the last breakpoint <= x, or -1 left of every breakpoint."""
        if isinstance(x, Tensor):
            x = x.to(torch.float64)
            if self.is_zero:
                return torch.full(x.shape, -1, dtype=torch.long)
            idx = torch.searchsorted(self.breaks(), x.reshape(-1), right=True) - 1
            return idx.reshape(x.shape)
        if isinstance(x, (list, tuple)):
            if any(isinstance(xi, (list, tuple, Tensor)) for xi in x):
                raise ValueError("x must be scalar or 1D")
            return torch.tensor([bisect_right(self.points, xi) - 1 for xi in x], dtype=torch.long)
        return torch.tensor(bisect_right(self.points, x) - 1, dtype=torch.long)

    def value_at(self, x):
        """f(x) as an int for a scalar ``x``, or a list of ints for a 1D input."""
        idx = self.locate(x)
        if idx.ndim == 0:
            i = int(idx.item())
            return self.intensities[i] if i >= 0 else 0
        if idx.ndim != 1:
            raise ValueError(f"x must be scalar or 1D, got shape {tuple(idx.shape)}")
        return [self.intensities[i] if i >= 0 else 0 for i in idx.tolist()]

    def as_tensors(
        self,
        dtype: torch.dtype = torch.float64,
        device: torch.device | None = None,
    ) -> tuple[Tensor, Tensor]:
        """Export ``(breaks, values)`` tensors.

        Values pass through Python ``float``; intensities beyond the float
        range (about 1e308) raise ``ValueError``.
        """
        try:
            values = [float(v) for v in self.intensities]
        except OverflowError:
            raise ValueError("intensities exceed the float range") from None
        breaks = torch.tensor(self.points, dtype=dtype, device=device)
        return breaks, torch.tensor(values, dtype=dtype, device=device)
