"""GraphQL documents used by the participants client."""

PARTICIPANT_FIELDS = """
    id
    firstName
    lastName
    participation
"""

GET_PARTICIPANTS = f"""
query {{
  participants {{{PARTICIPANT_FIELDS}}}
}}
"""

ADD_PARTICIPANT = f"""
mutation ($firstName: String!, $lastName: String!, $participation: Float!) {{
  addParticipant(
    firstName: $firstName
    lastName: $lastName
    participation: $participation
  ) {{{PARTICIPANT_FIELDS}}}
}}
"""

DELETE_PARTICIPANT = """
mutation ($id: ID!) {
  deleteParticipant(id: $id)
}
"""
