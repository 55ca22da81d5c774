"""Allocation Validator — decides whether a proposed participant may be admitted.

Invariants:
    - validate_allocation is PURE: reads its arguments only, never the store
    - Checks run in a fixed order: names, then range, then global quota
    - Sum of all stored participations never exceeds MAX_TOTAL_PARTICIPATION
      after a successful create
    - current_total is recomputed from the full snapshot on every call (no running counter)

Design Decisions:
    - math.fsum over sum(): correctly rounded, so 33.33 + 33.33 + 33.34 is admitted
      at exactly 100
    - Raises typed errors instead of returning status dicts: the GraphQL layer
      surfaces str(error) verbatim
"""

import math
from typing import Iterable

from app.core.domain_types import (
    HasParticipation,
    NormalizedParticipant,
    Participation,
    ProposedParticipant,
    MIN_PARTICIPATION,
    MAX_PARTICIPATION,
    MAX_TOTAL_PARTICIPATION,
)
from app.core.errors import InvalidNameError, OutOfRangeError, QuotaExceededError


def current_total(existing: Iterable[HasParticipation]) -> float:
    """Sum of participation over the snapshot."""
    return math.fsum(p.participation for p in existing)


def remaining_allowance(existing: Iterable[HasParticipation]) -> float:
    """Share still available before the global total hits 100%."""
    return MAX_TOTAL_PARTICIPATION - current_total(existing)


def validate_allocation(
    existing: Iterable[HasParticipation], proposed: ProposedParticipant,
) -> NormalizedParticipant:
    """Validate a candidate against field bounds and the global-sum invariant.

    Args:
        existing: full current snapshot of stored participants.
        proposed: candidate fields, untrimmed.

    Returns:
        The normalized record, ready for persistence.

    Raises:
        InvalidNameError: first or last name empty after trimming.
        OutOfRangeError: participation outside [0, 100].
        QuotaExceededError: admitting the candidate would exceed 100%.
    """
    first_name = proposed.first_name.strip()
    last_name = proposed.last_name.strip()
    if not first_name or not last_name:
        raise InvalidNameError()

    participation = proposed.participation
    # Written as a negated interval test so NaN is rejected as well
    if not (MIN_PARTICIPATION <= participation <= MAX_PARTICIPATION):
        raise OutOfRangeError(participation)

    shares = [p.participation for p in existing]
    total = math.fsum(shares)
    if math.fsum([*shares, participation]) > MAX_TOTAL_PARTICIPATION:
        raise QuotaExceededError(total, MAX_TOTAL_PARTICIPATION - total)

    return NormalizedParticipant(
        first_name=first_name,
        last_name=last_name,
        participation=Participation(participation),
    )
