"""Participant Repository — SQLAlchemy implementation of ParticipantRepository.

Invariants:
    - One repository per request-scoped AsyncSession; no state outside the session
    - list_all returns rows in insertion order (created_at, id); callers sort for display
    - add/delete commit immediately; SQLAlchemy errors roll back and surface as DatabaseError
    - delete is delete-if-exists: returns the removed row, or None when nothing matched
"""

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import NormalizedParticipant, ParticipantId
from app.infrastructure.database import map_db_error
from app.models.participant import Participant

logger = logging.getLogger(__name__)


class SqlParticipantRepository:
    """Participant persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> Sequence[Participant]:
        try:
            result = await self.db.execute(
                select(Participant).order_by(
                    Participant.created_at.asc(), Participant.id.asc(),
                ),
            )
        except SQLAlchemyError as e:
            raise await self._fail(e, "query")
        return result.scalars().all()

    async def get(self, participant_id: ParticipantId) -> Participant | None:
        try:
            return await self.db.get(Participant, participant_id)
        except SQLAlchemyError as e:
            raise await self._fail(e, "query")

    async def add(self, record: NormalizedParticipant) -> Participant:
        participant = Participant(
            first_name=record.first_name,
            last_name=record.last_name,
            participation=record.participation,
        )
        try:
            self.db.add(participant)
            await self.db.commit()
            await self.db.refresh(participant)
        except SQLAlchemyError as e:
            raise await self._fail(e, "commit")
        return participant

    async def delete(self, participant_id: ParticipantId) -> Participant | None:
        try:
            participant = await self.db.get(Participant, participant_id)
            if participant is None:
                return None
            await self.db.delete(participant)
            await self.db.commit()
        except SQLAlchemyError as e:
            raise await self._fail(e, "commit")
        return participant

    async def _fail(self, exc: SQLAlchemyError, operation: str):
        await self.db.rollback()
        logger.error(f"Participant store {operation} failed: {exc}")
        return map_db_error(exc, operation)
