# tests/test_smoke.py
"""
Smoke test do learnet.

Garante apenas que o pacote importa e expõe a superfície pública mínima.
Não valida comportamento de treino.
"""


def test_smoke():
    import learnet

    for name in ("source", "trainable", "node", "fit", "freeze", "thaw", "predict", "transform"):
        assert hasattr(learnet, name)
