from app.core.messages_pt_br import participant_removed, quota_exceeded


def test_quota_exceeded_formats_two_decimals():
    assert quota_exceeded(12.5, 87.5) == (
        "A soma das participações não pode exceder 100%. "
        "Atual: 12.50%, máximo permitido: 87.50%"
    )


def test_participant_removed():
    assert participant_removed("João", "Silva") == (
        "Participante João Silva removido com sucesso"
    )
