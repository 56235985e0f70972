# tests/conftest.py
"""
Fixtures compartilhados para testes do learnet.

Este módulo define fixtures reutilizáveis que fornecem:
- Models determinísticos de brinquedo (tests/fixtures/models.py)
- configurações mínimas de treino (YAML e dict)
- um TrainingContext com identidade fixa

Decisões arquiteturais:
    - Models operam sobre listas de floats: valores esperados são calculáveis à mão
    - Nenhuma fixture realiza I/O (arquivos só via `tmp_path` nos próprios testes)
    - Cada fixture retorna instâncias novas (sem estado compartilhado entre testes)
"""

from datetime import datetime, timezone

import pytest

from tests.fixtures.models import (
    BadReturnModel,
    BoomModel,
    CenteringTransformer,
    DoublingModel,
    ShrunkSlopeLearner,
)


@pytest.fixture(autouse=True)
def fresh_default_context():
    """Isola o contexto default do processo entre testes."""
    from learnet.core.context import reset_default_context
    return reset_default_context()


@pytest.fixture
def doubling_model():
    return DoublingModel()


@pytest.fixture
def centering():
    return CenteringTransformer()


@pytest.fixture
def learner():
    return ShrunkSlopeLearner(lam=0.0)


@pytest.fixture
def boom_model():
    return BoomModel()


@pytest.fixture
def bad_return_model():
    return BadReturnModel()


@pytest.fixture
def training_config_defaults_yaml() -> str:
    """YAML de defaults de treino semelhante ao uso real (`learnet.defaults.yaml`)."""
    return """\
training:
  verbosity: 1
  rows: null
network:
  name: default
  tags: [baseline]
"""


@pytest.fixture
def training_config_local_yaml() -> str:
    """YAML de overrides locais: mais detalhe e um subconjunto de linhas."""
    return """\
training:
  verbosity: 2
  rows: [0, 1, 2]
network:
  tags: [local]
"""


@pytest.fixture
def dummy_config() -> dict:
    return {"training": {"verbosity": 1, "rows": None}}


@pytest.fixture
def dummy_ctx(dummy_config):
    """TrainingContext determinístico (run_id e created_at fixos)."""
    from learnet.core.context import TrainingContext
    return TrainingContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config=dummy_config,
    )


@pytest.fixture
def centered_network():
    """
    Rede de dois estágios: centralização de X e y, learner, inverse_transform.

        X ──ux──▶ Xc ──┐
                       ├─ learner ─▶ zhat ──uy⁻¹──▶ yhat
        y ──uy──▶ yc ──┘

    Com X = [1, 2, 3, 4] e y = [2, 4, 6, 8]: slope 2.0 e yhat == y.
    """
    from learnet import inverse_transform, predict, source, trainable, transform

    X = source([1.0, 2.0, 3.0, 4.0])
    y = source([2.0, 4.0, 6.0, 8.0])
    ux = trainable(CenteringTransformer(), X)
    uy = trainable(CenteringTransformer(), y)
    Xc = transform(ux, X)
    yc = transform(uy, y)
    learner = trainable(ShrunkSlopeLearner(lam=0.0), Xc, yc)
    zhat = predict(learner, Xc)
    yhat = inverse_transform(uy, zhat)
    return {
        "X": X, "y": y, "ux": ux, "uy": uy, "Xc": Xc, "yc": yc,
        "learner": learner, "zhat": zhat, "yhat": yhat,
    }
