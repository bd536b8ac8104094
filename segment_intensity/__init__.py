from .interval import HalfOpenInterval
from .number_line import NumberLine
from .store import SegmentIntensityStore
from .history import Mutation, replay, reference_value

__all__ = [
    "HalfOpenInterval",
    "NumberLine",
    "SegmentIntensityStore",
    "Mutation",
    "replay",
    "reference_value",
]
