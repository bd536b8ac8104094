"""Piecewise-constant intensity over the whole number line.

The store keeps ``[point, intensity]`` pairs sorted by point. Each pair
says the intensity from ``point`` up to the next point (or onward, for the
last pair). Before the first point, and on an empty store, the intensity
is 0. After every mutation the list is minimal: it never opens with a
zero and no two neighbours carry the same intensity.
"""

from __future__ import annotations

import logging
from typing import Callable

from .interval import HalfOpenInterval
from .number_line import NumberLine

logger = logging.getLogger(__name__)


class SegmentIntensityStore:
    """Mutable intensity function supporting ``add``/``set`` over [from, to).

    Usage::

        store = SegmentIntensityStore()
        store.add(10, 30, 1)
        store.query()            # [[10, 1], [30, 0]]

    Not thread-safe; every mutation rewrites the whole breakpoint list.
    """

    def __init__(self):
        self._start_to_intensity: list[list] = []

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, from_, to, amount: int) -> None:
        """Add ``amount`` to the intensity on [from_, to)."""
        self._apply(HalfOpenInterval(from_, to), lambda intensity: intensity + amount)

    def set(self, from_, to, amount: int) -> None:
        """Overwrite the intensity on [from_, to) with ``amount``."""
        self._apply(HalfOpenInterval(from_, to), lambda _: amount)

    def clear(self) -> None:
        self._start_to_intensity = []

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def query(self) -> list[list]:
        """Copy of the breakpoint list as ``[[point, intensity], ...]``."""
        return [[point, intensity] for point, intensity in self._start_to_intensity]

    def number_line(self) -> NumberLine:
        return NumberLine.from_pairs(self._start_to_intensity)

    def value_at(self, x):
        return self.number_line().value_at(x)

    def __len__(self) -> int:
        return len(self._start_to_intensity)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._start_to_intensity!r})"

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    def _apply(self, interval: HalfOpenInterval, op: Callable[[int], int]) -> None:
        if interval.is_empty:
            logger.debug("skipping empty interval [%r, %r)", interval.start, interval.end)
            return

        # Both boundaries must exist before the scan below stops at `end`.
        self._insert_point(interval.start)
        self._insert_point(interval.end)

        for entry in self._start_to_intensity:
            start, intensity = entry
            if start >= interval.end:
                break
            if start >= interval.start:
                entry[1] = op(intensity)

        self._fuse()

    def _insert_point(self, point) -> None:
        """Materialize ``point``, inheriting the intensity on its left (0 if none)."""
        i = 0
        n = len(self._start_to_intensity)
        while i < n and self._start_to_intensity[i][0] < point:
            i += 1

        if i < n and self._start_to_intensity[i][0] == point:
            return

        prev_intensity = self._start_to_intensity[i - 1][1] if i > 0 else 0
        self._start_to_intensity.insert(i, [point, prev_intensity])

    def _fuse(self) -> None:
        """Drop entries that do not change the intensity to their left."""
        fused: list[list] = []
        last = 0
        for start, intensity in self._start_to_intensity:
            if intensity != last:
                fused.append([start, intensity])
                last = intensity
        self._start_to_intensity = fused
        logger.debug("fused number line to %d breakpoints", len(fused))
