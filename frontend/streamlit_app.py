import asyncio
import os

import httpx
import pandas as pd
import streamlit as st
from pydantic import ValidationError

from app.client.participants_client import ParticipantsApiError, ParticipantsClient
from app.client.presentation import (
    CANCEL_DELETE_LABEL,
    CONFIRM_DELETE_LABEL,
    DELETE_LABEL,
    FORM_PLACEHOLDERS,
    SUBMIT_LABEL,
    TABLE_HEADERS,
    delete_confirmation,
    is_pending_deletion,
    request_deletion,
    resolve_deletion,
    table_rows,
)
from app.schemas.participant import ParticipantForm

# ---- CONFIG ----
st.set_page_config(
    page_title="Participações",
    page_icon="📊",
    layout="wide",
)

# API Configuration
API_BASE_URL = os.environ.get("PARTICIPATION_API_URL", "http://localhost:4000")


async def _call(operation, *args):
    """Run one client operation against a fresh connection; return (result, participants)."""
    async with httpx.AsyncClient(base_url=API_BASE_URL, timeout=10.0) as http:
        client = ParticipantsClient(http, participants=st.session_state.get("participants", []))
        result = await operation(client, *args)
        return result, client.participants


async def _fetch(client):
    return await client.fetch_participants()


async def _add(client, form):
    return await client.add_participant(form)


async def _delete(client, participant_id):
    return await client.delete_participant(participant_id)


def run(operation, *args):
    try:
        result, participants = asyncio.run(_call(operation, *args))
    except ParticipantsApiError as e:
        st.error(e.message)
        return None
    st.session_state["participants"] = participants
    return result


# ---- HEADER ----
st.title("Participações")

if "participants" not in st.session_state:
    st.session_state["participants"] = []
    run(_fetch)

# ---- FORM ----
with st.form("participant_form", clear_on_submit=True):
    col1, col2, col3, col4 = st.columns([3, 3, 2, 1])
    first_name = col1.text_input(FORM_PLACEHOLDERS[0], placeholder=FORM_PLACEHOLDERS[0])
    last_name = col2.text_input(FORM_PLACEHOLDERS[1], placeholder=FORM_PLACEHOLDERS[1])
    participation = col3.number_input(
        FORM_PLACEHOLDERS[2], min_value=0.0, max_value=100.0, step=0.5,
    )
    submitted = col4.form_submit_button(SUBMIT_LABEL)

if submitted:
    try:
        form = ParticipantForm(
            first_name=first_name, last_name=last_name, participation=participation,
        )
    except ValidationError as e:
        st.warning("; ".join(err["msg"] for err in e.errors()))
    else:
        if run(_add, form) is not None:
            st.success(f"{form.first_name} {form.last_name} adicionado")

# ---- TABLE ----
participants = st.session_state["participants"]
if participants:
    st.dataframe(pd.DataFrame(table_rows(participants)), use_container_width=True, hide_index=True)

    st.subheader(TABLE_HEADERS[3])
    for p in participants:
        pending = is_pending_deletion(st.session_state, p.id)
        with st.expander(f"{p.first_name} {p.last_name}", expanded=pending):
            if not pending:
                if st.button(DELETE_LABEL, key=f"delete-{p.id}"):
                    request_deletion(st.session_state, p.id)
                    st.rerun()
                continue

            st.warning(delete_confirmation(p))
            confirm_col, cancel_col = st.columns(2)
            if confirm_col.button(CONFIRM_DELETE_LABEL, key=f"confirm-{p.id}", type="primary"):
                message = run(_delete, resolve_deletion(st.session_state, confirmed=True))
                if message:
                    st.success(message)
                    st.rerun()
            if cancel_col.button(CANCEL_DELETE_LABEL, key=f"cancel-{p.id}"):
                resolve_deletion(st.session_state, confirmed=False)
                st.rerun()

    chart = pd.DataFrame(
        {"participation": [p.participation for p in participants]},
        index=[f"{p.first_name} {p.last_name}" for p in participants],
    )
    st.bar_chart(chart)
else:
    st.info("Nenhum participante cadastrado.")
