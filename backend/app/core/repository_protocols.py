"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All store IO accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass plain fakes
    - Async in Protocol: implementations do IO; the pure validator that consumes
      their output is never async itself
"""

from typing import Protocol, Sequence

from app.core.domain_types import NormalizedParticipant, ParticipantId


class ParticipantLike(Protocol):
    """Structural contract for stored participants handed to services and resolvers."""
    id: ParticipantId
    first_name: str
    last_name: str
    participation: float


class ParticipantRepository(Protocol):
    """Contract for participant persistence — implemented by shell."""
    async def list_all(self) -> Sequence[ParticipantLike]: ...
    async def get(self, participant_id: ParticipantId) -> ParticipantLike | None: ...
    async def add(self, record: NormalizedParticipant) -> ParticipantLike: ...
    async def delete(self, participant_id: ParticipantId) -> ParticipantLike | None: ...
