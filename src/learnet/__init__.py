# src/learnet/__init__.py
"""
learnet — learning networks com retreino incremental.

O usuário monta um DAG de transformações e fits de modelos estatísticos
("learning network") e o treina/retreina de forma incremental:
sub-modelos inalterados são atualizados via `update`, congelados são
pulados, e predições fluem de forma lazy pelo grafo sob demanda.

Exemplo:

    X = source(X_train)
    y = source(y_train)
    scaler = trainable(SklearnTransformer(StandardScaler()), X)
    Xs = transform(scaler, X)
    ridge = trainable(SklearnRegressor(Ridge()), Xs, y)
    yhat = predict(ridge, Xs)

    fit(yhat)
    yhat()          # predições nos dados de treino
    yhat(X_new)     # mesmo grafo, substituindo X_new na source

Arquitetura em alto nível:
    - core.network → nodes, TrainableModels, tapes e operações
    - core.engine  → planner e driver de treino (política de frozen)
    - core.config  → configuração resolvida e FitOptions
    - modeling     → adapters scikit-learn e registry de modelos
"""

from learnet.core.config import FitOptions, load_config
from learnet.core.context import TrainingContext, default_context, reset_default_context
from learnet.core.engine import EntryStatus, TrainingResult, fit, plan_training, train_tape
from learnet.core.exceptions import (
    ArityError,
    DependencyError,
    InvalidModelError,
    InvalidNodeError,
    LearnetException,
    UnsupportedOperationError,
    UntrainedError,
)
from learnet.core.model import OPERATIONS, Model, Supervised, Supervision, Unsupervised
from learnet.core.network import (
    LearningNode,
    SourceNode,
    TrainableModel,
    freeze,
    inverse_transform,
    node,
    predict,
    predict_mean,
    predict_median,
    predict_mode,
    source,
    sources,
    thaw,
    trainable,
    transform,
)
from learnet.tasks import SupervisedTask, UnsupervisedTask, X_and_y

__all__ = [
    "FitOptions",
    "load_config",
    "TrainingContext",
    "default_context",
    "reset_default_context",
    "EntryStatus",
    "TrainingResult",
    "fit",
    "plan_training",
    "train_tape",
    "ArityError",
    "DependencyError",
    "InvalidModelError",
    "InvalidNodeError",
    "LearnetException",
    "UnsupportedOperationError",
    "UntrainedError",
    "OPERATIONS",
    "Model",
    "Supervised",
    "Supervision",
    "Unsupervised",
    "LearningNode",
    "SourceNode",
    "TrainableModel",
    "freeze",
    "inverse_transform",
    "node",
    "predict",
    "predict_mean",
    "predict_median",
    "predict_mode",
    "source",
    "sources",
    "thaw",
    "trainable",
    "transform",
    "SupervisedTask",
    "UnsupervisedTask",
    "X_and_y",
]
