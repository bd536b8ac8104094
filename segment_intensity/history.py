from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .interval import HalfOpenInterval
from .store import SegmentIntensityStore

_OPS = ("add", "set")


@dataclass(frozen=True)
class Mutation:
    """One recorded ``add`` or ``set`` call over [start, end)."""
    op: str
    start: float
    end: float
    amount: int

    def __post_init__(self):
        if self.op not in _OPS:
            raise ValueError(f"op must be one of {_OPS}, got {self.op!r}")
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise ValueError("amount must be an int")

    @property
    def interval(self) -> HalfOpenInterval:
        return HalfOpenInterval(self.start, self.end)

    def apply_to(self, store: SegmentIntensityStore) -> None:
        getattr(store, self.op)(self.start, self.end, self.amount)

    def transform(self, intensity: int) -> int:
        return intensity + self.amount if self.op == "add" else self.amount


def replay(
    mutations: Iterable[Mutation],
    store: SegmentIntensityStore | None = None,
) -> SegmentIntensityStore:
    """Apply ``mutations`` in order to ``store`` (a fresh one by default)."""
    store = SegmentIntensityStore() if store is None else store
    for mutation in mutations:
        mutation.apply_to(store)
    return store


def reference_value(mutations: Iterable[Mutation], x):
    """Brute-force f(x): fold every mutation covering ``x`` in call order.

    A scalar ``x`` is compared natively and gives an int. A 1D sequence or
    tensor is masked per mutation (in float64) and gives a list of ints.
    """
    if isinstance(x, (list, tuple)) or hasattr(x, "ndim") and x.ndim == 1:
        values = [0] * len(x)
        for mutation in mutations:
            covered = mutation.interval.mask(x).tolist()
            values = [mutation.transform(v) if c else v for v, c in zip(values, covered)]
        return values

    value = 0
    for mutation in mutations:
        if mutation.interval.contains(x):
            value = mutation.transform(value)
    return value
