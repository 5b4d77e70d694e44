"""Scoring strategies for inserting flexible meetings into a gap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class InsertionScorer(Protocol):
    def score(self, dist_from_current: float, dist_to_next_fixed: float) -> float:
        """Return the insertion cost of a candidate; lower is better."""


@dataclass(frozen=True, slots=True)
class WeightedDistanceScorer:
    """Distance to reach the candidate now plus a discounted distance onward.

    The onward leg toward the next fixed meeting is weighted by
    ``next_fixed_weight`` (0.5 by default).
    """

    next_fixed_weight: float = 0.5

    def score(self, dist_from_current: float, dist_to_next_fixed: float) -> float:
        return dist_from_current + self.next_fixed_weight * dist_to_next_fixed
