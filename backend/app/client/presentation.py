"""Presentation helpers — pure formatting for the participants table and form."""

from typing import Iterable, Mapping, MutableMapping

from app.schemas.participant import ParticipantRead

TABLE_HEADERS = ("First Name", "Last Name", "Participation (%)", "Actions")
FORM_PLACEHOLDERS = ("First Name", "Last Name", "Participation (%)")
SUBMIT_LABEL = "Send"
SUBMIT_LABEL_LOADING = "Enviando..."
DELETE_LABEL = "Excluir"
CONFIRM_DELETE_LABEL = "Confirmar"
CANCEL_DELETE_LABEL = "Cancelar"
PENDING_DELETE_KEY = "pending_delete"


def format_participation(value: float) -> str:
    """30.0 → '30%', 25.5 → '25.5%'."""
    if float(value).is_integer():
        return f"{int(value)}%"
    return f"{value}%"


def delete_confirmation(participant: ParticipantRead) -> str:
    return (
        f"Tem certeza que deseja excluir "
        f"{participant.first_name} {participant.last_name}?"
    )


def table_rows(participants: Iterable[ParticipantRead]) -> list[dict]:
    """One dict per participant, keyed by the visible column headers."""
    first, last, share, _ = TABLE_HEADERS
    return [
        {
            first: p.first_name,
            last: p.last_name,
            share: format_participation(p.participation),
        }
        for p in participants
    ]


def submit_label(loading: bool) -> str:
    return SUBMIT_LABEL_LOADING if loading else SUBMIT_LABEL


def request_deletion(state: MutableMapping, participant_id: str) -> None:
    """First click: remember which participant awaits confirmation."""
    state[PENDING_DELETE_KEY] = participant_id


def is_pending_deletion(state: Mapping, participant_id: str) -> bool:
    return state.get(PENDING_DELETE_KEY) == participant_id


def resolve_deletion(state: MutableMapping, confirmed: bool) -> str | None:
    """Clear the pending request; return its id only when confirmed."""
    participant_id = state.pop(PENDING_DELETE_KEY, None)
    return participant_id if confirmed else None
