"""GraphQL participants API — queries and mutations over HTTP against SQLite.

Invariants:
    - participants query returns records ordered by firstName
    - participant(id) returns null for unknown or malformed ids
    - addParticipant surfaces validator messages verbatim with extensions.code
    - deleteParticipant returns the confirmation text; deleting again → not found
"""

import uuid
import warnings

import pytest

from app.api.graphql_schema import build_schema

PARTICIPANTS = """
query {
  participants { id firstName lastName participation }
}
"""

PARTICIPANT = """
query ($id: ID!) {
  participant(id: $id) { id firstName lastName participation }
}
"""

ADD = """
mutation ($firstName: String!, $lastName: String!, $participation: Float!) {
  addParticipant(firstName: $firstName, lastName: $lastName, participation: $participation) {
    id firstName lastName participation
  }
}
"""

DELETE = """
mutation ($id: ID!) { deleteParticipant(id: $id) }
"""


async def gql(client, query: str, **variables) -> dict:
    res = await client.post("/graphql", json={"query": query, "variables": variables})
    assert res.status_code == 200
    return res.json()


async def add(client, first: str, last: str, participation: float) -> dict:
    return await gql(
        client, ADD, firstName=first, lastName=last, participation=participation,
    )


# ─── Queries ─────────────────────────────────────────────────────

async def test_participants_empty(client):
    body = await gql(client, PARTICIPANTS)
    assert body.get("errors") is None
    assert body["data"]["participants"] == []


async def test_participants_ordered_by_first_name(client, seed_participants):
    await seed_participants(("Maria", "Santos", 70), ("João", "Silva", 30))
    body = await gql(client, PARTICIPANTS)
    names = [p["firstName"] for p in body["data"]["participants"]]
    assert names == ["João", "Maria"]


async def test_participant_by_id(client, seed_participants):
    (seeded,) = await seed_participants(("João", "Silva", 30))
    body = await gql(client, PARTICIPANT, id=str(seeded.id))
    assert body["data"]["participant"] == {
        "id": str(seeded.id), "firstName": "João",
        "lastName": "Silva", "participation": 30.0,
    }


@pytest.mark.parametrize("raw", [str(uuid.uuid4()), "not-an-id"])
async def test_participant_unknown_is_null(client, raw):
    body = await gql(client, PARTICIPANT, id=raw)
    assert body.get("errors") is None
    assert body["data"]["participant"] is None


# ─── addParticipant ──────────────────────────────────────────────

async def test_add_valid_participant(client):
    body = await add(client, "João", "Silva", 30.5)
    assert body.get("errors") is None
    created = body["data"]["addParticipant"]
    assert created["firstName"] == "João"
    assert created["lastName"] == "Silva"
    assert created["participation"] == 30.5
    assert uuid.UUID(created["id"])


async def test_add_trims_names(client):
    body = await add(client, "  Ana ", " Lima  ", 10)
    created = body["data"]["addParticipant"]
    assert (created["firstName"], created["lastName"]) == ("Ana", "Lima")


async def test_add_without_first_name_fails(client):
    body = await add(client, "", "Silva", 30)
    assert body["errors"][0]["message"] == "Nome e sobrenome são obrigatórios"
    assert body["errors"][0]["extensions"]["code"] == "INVALID_NAME"


async def test_add_out_of_range_fails(client):
    body = await add(client, "João", "Silva", 150)
    assert body["errors"][0]["message"] == "A participação deve estar entre 0 e 100"
    assert body["errors"][0]["extensions"]["code"] == "OUT_OF_RANGE"


async def test_add_exceeding_quota_fails(client, seed_participants):
    await seed_participants(("João", "Silva", 80))
    body = await add(client, "Maria", "Santos", 30)
    assert body["errors"][0]["message"] == (
        "A soma das participações não pode exceder 100%. "
        "Atual: 80.00%, máximo permitido: 20.00%"
    )
    assert body["errors"][0]["extensions"]["code"] == "QUOTA_EXCEEDED"
    listed = await gql(client, PARTICIPANTS)
    assert len(listed["data"]["participants"]) == 1


async def test_add_full_share_on_empty_store(client):
    body = await add(client, "João", "Silva", 100)
    assert body["data"]["addParticipant"]["participation"] == 100.0


async def test_add_zero_share(client):
    body = await add(client, "João", "Silva", 0)
    assert body["data"]["addParticipant"]["participation"] == 0.0


async def test_add_just_above_range_fails(client):
    body = await add(client, "João", "Silva", 100.01)
    assert body["errors"][0]["extensions"]["code"] == "OUT_OF_RANGE"


async def test_add_missing_argument_is_graphql_validation_error(client):
    res = await client.post("/graphql", json={
        "query": 'mutation { addParticipant(firstName: "João", lastName: "Silva") { id } }',
    })
    body = res.json()
    assert body["errors"]
    assert body["errors"][0]["message"] != "Erro interno do servidor"


async def test_created_participant_appears_in_ordered_list(client):
    await add(client, "Maria", "Santos", 20)
    await add(client, "Carlos", "Souza", 20)
    await add(client, "João", "Silva", 20)
    body = await gql(client, PARTICIPANTS)
    names = [p["firstName"] for p in body["data"]["participants"]]
    assert names == ["Carlos", "João", "Maria"]


# ─── deleteParticipant ───────────────────────────────────────────

async def test_delete_existing_participant(client):
    created = (await add(client, "João", "Silva", 30))["data"]["addParticipant"]
    body = await gql(client, DELETE, id=created["id"])
    assert body.get("errors") is None
    assert body["data"]["deleteParticipant"] == (
        "Participante João Silva removido com sucesso"
    )
    listed = await gql(client, PARTICIPANTS)
    assert listed["data"]["participants"] == []


async def test_delete_twice_fails_with_not_found(client):
    created = (await add(client, "João", "Silva", 30))["data"]["addParticipant"]
    await gql(client, DELETE, id=created["id"])
    body = await gql(client, DELETE, id=created["id"])
    assert body["errors"][0]["message"] == "Participante não encontrado"
    assert body["errors"][0]["extensions"]["code"] == "PARTICIPANT_NOT_FOUND"


async def test_delete_unknown_id_fails_with_not_found(client):
    body = await gql(client, DELETE, id=str(uuid.uuid4()))
    assert body["errors"][0]["message"] == "Participante não encontrado"


async def test_delete_frees_quota(client):
    created = (await add(client, "João", "Silva", 100))["data"]["addParticipant"]
    assert (await add(client, "Maria", "Santos", 1)).get("errors")
    await gql(client, DELETE, id=created["id"])
    body = await add(client, "Maria", "Santos", 1)
    assert body.get("errors") is None


# ─── Error masking ──────────────────────────────────────────────

async def test_unexpected_errors_are_masked(client, monkeypatch):
    async def boom(self):
        raise RuntimeError("secret internals")

    monkeypatch.setattr(
        "app.services.participant_service.ParticipantService.list_participants",
        boom,
    )
    body = await gql(client, PARTICIPANTS)
    assert body["errors"][0]["message"] == "Erro interno do servidor"
    assert "secret" not in str(body)


def test_schema_builds_without_deprecation_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        built = build_schema()
    assert built.extensions
    assert all(callable(ext) for ext in built.extensions)


async def test_masking_applies_on_every_request(client, monkeypatch):
    async def boom(self):
        raise RuntimeError("secret internals")

    monkeypatch.setattr(
        "app.services.participant_service.ParticipantService.list_participants",
        boom,
    )
    for _ in range(2):
        body = await gql(client, PARTICIPANTS)
        assert body["errors"][0]["message"] == "Erro interno do servidor"
