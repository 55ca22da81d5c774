"""User-facing messages (pt-BR) — every string returned to API callers.

Invariants:
    - Pure data and formatting, no IO
    - Percentages in messages always carry two decimals
"""

NAME_REQUIRED = "Nome e sobrenome são obrigatórios"
PARTICIPATION_OUT_OF_RANGE = "A participação deve estar entre 0 e 100"
PARTICIPANT_NOT_FOUND = "Participante não encontrado"
ENDPOINT_NOT_FOUND = "Endpoint não encontrado"
INTERNAL_ERROR = "Erro interno do servidor"
INTERNAL_ERROR_DETAIL_HIDDEN = "Algo deu errado"


def quota_exceeded(current_total: float, remaining: float) -> str:
    return (
        "A soma das participações não pode exceder 100%. "
        f"Atual: {current_total:.2f}%, máximo permitido: {remaining:.2f}%"
    )


def participant_removed(first_name: str, last_name: str) -> str:
    return f"Participante {first_name} {last_name} removido com sucesso"
