"""Split a day's meetings into fixed and flexible sets."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import MeetingCandidate


def partition(candidates: Sequence[MeetingCandidate]) -> tuple[list[MeetingCandidate], list[MeetingCandidate]]:
    """Return ``(fixed, flexible)``; fixed meetings sorted by start time.

    The sort is stable so fixed meetings sharing a start keep their input order.
    """
    fixed = [candidate for candidate in candidates if candidate.is_fixed]
    flexible = [candidate for candidate in candidates if not candidate.is_fixed]
    fixed.sort(key=lambda candidate: candidate.window.start_minutes)
    return fixed, flexible
