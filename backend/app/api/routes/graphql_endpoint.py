"""GraphQL Endpoint — router for the participant schema (mounted at /graphql in main.py).

Invariants:
    - Each request gets its own DB session and ParticipantService (no cross-request state)
    - GraphiQL served only when settings.graphiql is true
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import GraphQLRouter

from app.api.graphql_schema import schema
from app.config import get_settings
from app.infrastructure.database import get_db
from app.infrastructure.participant_repository import SqlParticipantRepository
from app.services.participant_service import ParticipantService


async def get_context(db: AsyncSession = Depends(get_db)) -> dict:
    """Request-scoped resolver context."""
    return {"service": ParticipantService(SqlParticipantRepository(db))}


router = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphql_ide="graphiql" if get_settings().graphiql else None,
)
