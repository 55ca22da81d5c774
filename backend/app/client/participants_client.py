"""Participants Client — GraphQL-over-HTTP client used by the frontend.

Invariants:
    - The cached list is only ever REPLACED by the latest server response
      (incoming wins, no merging)
    - Every successful mutation is followed by a refetch of the list; a failed
      refetch never turns the mutation result into an error
    - Server error messages are surfaced verbatim via ParticipantsApiError
    - Transport and GraphQL errors are logged before being raised

Design Decisions:
    - Accepts a seed list so short-lived clients (one per UI action) keep the
      last known list when a refetch fails
    - Takes an httpx.AsyncClient instead of a URL: tests hand in an ASGI transport
      bound to the FastAPI app, production hands in a real base_url
"""

import logging
from typing import Iterable

import httpx

from app.client.queries import ADD_PARTICIPANT, DELETE_PARTICIPANT, GET_PARTICIPANTS
from app.schemas.participant import ParticipantForm, ParticipantRead

logger = logging.getLogger(__name__)


class ParticipantsApiError(Exception):
    """API call failed; message is the server's (or transport's) message."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code


class ParticipantsClient:
    """List, add and delete participants through the GraphQL API."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        endpoint: str = "/graphql",
        participants: Iterable[ParticipantRead] = (),
    ):
        self._http = http
        self._endpoint = endpoint
        self._participants: list[ParticipantRead] = list(participants)

    @property
    def participants(self) -> list[ParticipantRead]:
        """Last list received from the server."""
        return list(self._participants)

    async def fetch_participants(self) -> list[ParticipantRead]:
        data = await self._execute(GET_PARTICIPANTS)
        self._participants = [
            ParticipantRead.model_validate(p) for p in data["participants"]
        ]
        return self.participants

    async def add_participant(self, form: ParticipantForm) -> ParticipantRead:
        data = await self._execute(
            ADD_PARTICIPANT, form.model_dump(by_alias=True),
        )
        created = ParticipantRead.model_validate(data["addParticipant"])
        await self._refresh()
        return created

    async def delete_participant(self, participant_id: str) -> str:
        data = await self._execute(DELETE_PARTICIPANT, {"id": participant_id})
        await self._refresh()
        return data["deleteParticipant"]

    async def _refresh(self) -> None:
        """Refetch after a mutation; the mutation already succeeded, so a
        failed refetch leaves the previous list cached and is only logged."""
        try:
            await self.fetch_participants()
        except ParticipantsApiError as e:
            logger.warning(f"Participant list refresh failed: {e.message}")

    async def _execute(self, query: str, variables: dict | None = None) -> dict:
        try:
            response = await self._http.post(
                self._endpoint,
                json={"query": query, "variables": variables or {}},
            )
        except httpx.HTTPError as e:
            logger.error(f"[Network error]: {e}")
            raise ParticipantsApiError(str(e)) from e

        try:
            body = response.json()
        except ValueError:
            logger.error(f"[Network error]: HTTP {response.status_code}")
            raise ParticipantsApiError(f"HTTP {response.status_code}")

        errors = body.get("errors")
        if errors:
            for error in errors:
                logger.error(
                    f"[GraphQL error]: Message: {error.get('message')}, "
                    f"Location: {error.get('locations')}, Path: {error.get('path')}",
                )
            first = errors[0]
            raise ParticipantsApiError(
                first.get("message", ""),
                code=(first.get("extensions") or {}).get("code"),
            )
        if response.is_error:
            raise _error_from_envelope(response.status_code, body)
        return body["data"]


def _error_from_envelope(status_code: int, body: dict) -> ParticipantsApiError:
    """Build an error from a REST error envelope (e.g. 503 from the DB dependency)."""
    error = body.get("error")
    if isinstance(error, dict):
        return ParticipantsApiError(
            error.get("message", f"HTTP {status_code}"), code=error.get("code"),
        )
    if isinstance(error, str):
        return ParticipantsApiError(error)
    return ParticipantsApiError(f"HTTP {status_code}")
