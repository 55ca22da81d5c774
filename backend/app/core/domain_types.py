"""Domain Types — explicit record types shared by the validator and its callers.

Invariants:
    - ParticipantId wraps UUID — never a bare str in domain logic
    - Participation is a percentage, bounded 0.0–100.0
    - ProposedParticipant is raw input (untrimmed); NormalizedParticipant is ready to persist

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - Frozen dataclasses: records crossing the core boundary are immutable
"""

from dataclasses import dataclass
from typing import NewType, Protocol
from uuid import UUID


# ─── Identity & Value Types ──────────────────────────────────────

ParticipantId = NewType("ParticipantId", UUID)
Participation = NewType("Participation", float)   # 0.0–100.0

MIN_PARTICIPATION: float = 0.0
MAX_PARTICIPATION: float = 100.0
MAX_TOTAL_PARTICIPATION: float = 100.0


# ─── Records ─────────────────────────────────────────────────────

class HasParticipation(Protocol):
    """Anything carrying a participation share (ORM row, dataclass, test stub)."""
    participation: float


@dataclass(frozen=True)
class ProposedParticipant:
    """Candidate fields as received from the caller, not yet trimmed."""
    first_name: str
    last_name: str
    participation: float


@dataclass(frozen=True)
class NormalizedParticipant:
    """Validated candidate: trimmed names, numeric value unchanged."""
    first_name: str
    last_name: str
    participation: Participation
