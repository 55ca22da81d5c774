"""GraphQL Schema — participant queries and mutations (strawberry).

Invariants:
    - Resolvers hold no business logic: they delegate to ParticipantService
    - Field names are camelCase on the wire (firstName, lastName, addParticipant)
    - Domain errors (ParticipationError) reach the client verbatim with
      extensions.code; any other resolver exception is masked
    - GraphQL syntax/validation errors carry no original_error and are never masked
    - Every error is logged once, server-side

Design Decisions:
    - Context carries a request-scoped ParticipantService built from get_db
      (see routes/graphql.py), so tests override get_db and nothing else
"""

import logging
from typing import Optional

import strawberry
from graphql import GraphQLError
from strawberry.extensions import MaskErrors
from strawberry.types import Info

from app.core.errors import ParticipationError, ParticipantNotFoundError
from app.core.messages_pt_br import INTERNAL_ERROR
from app.core.repository_protocols import ParticipantLike
from app.services.participant_service import ParticipantService

logger = logging.getLogger(__name__)


@strawberry.type(name="Participant")
class ParticipantType:
    id: strawberry.ID
    first_name: str
    last_name: str
    participation: float

    @classmethod
    def from_record(cls, record: ParticipantLike) -> "ParticipantType":
        return cls(
            id=strawberry.ID(str(record.id)),
            first_name=record.first_name,
            last_name=record.last_name,
            participation=record.participation,
        )


def _service(info: Info) -> ParticipantService:
    return info.context["service"]


@strawberry.type
class Query:
    @strawberry.field(description="All participants ordered by first name.")
    async def participants(self, info: Info) -> list[ParticipantType]:
        records = await _service(info).list_participants()
        return [ParticipantType.from_record(r) for r in records]

    @strawberry.field(description="A single participant, or null when unknown.")
    async def participant(
        self, info: Info, id: strawberry.ID,
    ) -> Optional[ParticipantType]:
        try:
            record = await _service(info).get_participant(id)
        except ParticipantNotFoundError:
            return None
        return ParticipantType.from_record(record)


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def add_participant(
        self, info: Info, first_name: str, last_name: str, participation: float,
    ) -> ParticipantType:
        record = await _service(info).create_participant(
            first_name, last_name, participation,
        )
        return ParticipantType.from_record(record)

    @strawberry.mutation
    async def delete_participant(self, info: Info, id: strawberry.ID) -> str:
        return await _service(info).delete_participant(id)


def should_mask_error(error: GraphQLError) -> bool:
    """Mask unexpected resolver exceptions; keep domain and GraphQL-level errors."""
    original = error.original_error
    return original is not None and not isinstance(original, ParticipationError)


class ParticipationSchema(strawberry.Schema):
    """Schema that logs GraphQL errors with the application's logger."""

    def process_errors(self, errors, execution_context=None) -> None:
        for error in errors:
            original = error.original_error
            if isinstance(original, ParticipationError):
                logger.warning(
                    f"GraphQL error: {error.message}",
                    extra={"error_code": original.code},
                )
            elif original is not None:
                logger.error(
                    f"GraphQL error: {error.message}", exc_info=original,
                )
            else:
                logger.info(f"GraphQL request error: {error.message}")


def build_schema() -> ParticipationSchema:
    """Extensions are passed as factories; strawberry builds one per operation."""
    return ParticipationSchema(
        query=Query,
        mutation=Mutation,
        extensions=[
            lambda: MaskErrors(
                should_mask_error=should_mask_error, error_message=INTERNAL_ERROR,
            ),
        ],
    )


schema = build_schema()
