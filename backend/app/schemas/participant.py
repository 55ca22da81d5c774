"""Participant Schemas — client-side form echo checks and API response parsing.

Invariants:
    - ParticipantForm: names stripped and non-empty, participation 0–100 (decimals allowed)
    - ParticipantRead mirrors the GraphQL Participant type (camelCase on the wire)
    - The form never replaces the server check: the allocation quota is only known server-side
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.core.messages_pt_br import NAME_REQUIRED


class ParticipantForm(BaseModel):
    """Entry form — rejects obviously invalid input before calling the API."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str
    last_name: str
    participation: float = Field(ge=0, le=100, allow_inf_nan=False)

    @field_validator("first_name", "last_name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError(NAME_REQUIRED)
        return v


class ParticipantRead(BaseModel):
    """Participant as returned by the API."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    first_name: str
    last_name: str
    participation: float
