"""Participant Service — orchestrates store IO around the pure allocation validator.

Invariants:
    - create reads the FULL current snapshot immediately before validating (no cache)
    - create persists only after validate_allocation returns
    - list is ordered by first_name ascending, case-sensitive ordinal, stable
    - delete raises ParticipantNotFoundError when the store removed nothing,
      so repeated deletes of one id always fail the same way
    - malformed ids behave exactly like unknown ids

Design Decisions:
    - Read-validate-write is NOT atomic: two concurrent creates can both pass
      against the same snapshot (ADR: accepted race, see DESIGN.md)
    - Ordering applied in Python: str comparison is ordinal on every backend,
      database collations are not
"""

import logging
from uuid import UUID

from app.core.allocation import validate_allocation
from app.core.domain_types import ParticipantId, ProposedParticipant
from app.core.errors import ParticipantNotFoundError, QuotaExceededError
from app.core.messages_pt_br import participant_removed
from app.core.repository_protocols import ParticipantLike, ParticipantRepository

logger = logging.getLogger(__name__)


def parse_participant_id(raw: str) -> ParticipantId | None:
    """Parse an opaque id; None when it cannot name any stored participant."""
    try:
        return ParticipantId(UUID(str(raw)))
    except ValueError:
        return None


class ParticipantService:
    """Query and mutation operations over the participant store."""

    def __init__(self, repository: ParticipantRepository):
        self.repository = repository

    async def list_participants(self) -> list[ParticipantLike]:
        participants = await self.repository.list_all()
        return sorted(participants, key=lambda p: p.first_name)

    async def get_participant(self, raw_id: str) -> ParticipantLike:
        participant_id = parse_participant_id(raw_id)
        participant = (
            await self.repository.get(participant_id)
            if participant_id is not None else None
        )
        if participant is None:
            raise ParticipantNotFoundError(str(raw_id))
        return participant

    async def create_participant(
        self, first_name: str, last_name: str, participation: float,
    ) -> ParticipantLike:
        existing = await self.repository.list_all()
        try:
            record = validate_allocation(
                existing,
                ProposedParticipant(first_name, last_name, participation),
            )
        except QuotaExceededError as e:
            logger.info(
                f"Participation rejected: total {e.current_total:.2f}%, "
                f"requested {participation}%",
                extra={"error_code": e.code},
            )
            raise
        participant = await self.repository.add(record)
        logger.info(
            f"Participant created: {participant.first_name} {participant.last_name}",
            extra={"participant_id": str(participant.id)},
        )
        return participant

    async def delete_participant(self, raw_id: str) -> str:
        logger.info(
            "Deleting participant", extra={"participant_id": str(raw_id)},
        )
        participant_id = parse_participant_id(raw_id)
        participant = (
            await self.repository.delete(participant_id)
            if participant_id is not None else None
        )
        if participant is None:
            logger.info(
                "Participant not found for deletion",
                extra={"participant_id": str(raw_id)},
            )
            raise ParticipantNotFoundError(str(raw_id))
        logger.info(
            f"Participant deleted: {participant.first_name} {participant.last_name}",
            extra={"participant_id": str(raw_id)},
        )
        return participant_removed(participant.first_name, participant.last_name)
