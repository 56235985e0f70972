# src/learnet/core/network/__init__.py
"""
Learning networks: nodes, TrainableModels e dependency tapes.

Componentes:
    - tape       → conjunto ordenado por identidade com merge append-if-absent
    - nodes      → SourceNode, LearningNode, source(), sources()
    - trainable  → TrainableModel, trainable(), freeze(), thaw(), fit_trainable()
    - operations → node() e acessores (predict, transform, inverse_transform, ...)
    - rows       → seleção de linhas para materialização de argumentos de treino
"""

from .nodes import NO_DATA, LearningNode, Node, SourceNode, is_node, source, sources
from .operations import (
    inverse_transform,
    node,
    operation_for,
    predict,
    predict_mean,
    predict_median,
    predict_mode,
    transform,
)
from .rows import count_rows, select_rows
from .tape import Tape, merge_tapes
from .trainable import (
    TrainableModel,
    TrainingAction,
    fit_trainable,
    freeze,
    thaw,
    trainable,
    training_action,
)

__all__ = [
    "NO_DATA",
    "LearningNode",
    "Node",
    "SourceNode",
    "is_node",
    "source",
    "sources",
    "inverse_transform",
    "node",
    "operation_for",
    "predict",
    "predict_mean",
    "predict_median",
    "predict_mode",
    "transform",
    "count_rows",
    "select_rows",
    "Tape",
    "merge_tapes",
    "TrainableModel",
    "TrainingAction",
    "fit_trainable",
    "freeze",
    "thaw",
    "trainable",
    "training_action",
]
