# src/learnet/core/engine/__init__.py
"""
Engine de treino do learnet.

Componentes principais:
    - planner → validação estrutural da tape (ordem de dependências)
    - driver  → travessia sequencial da tape com política de frozen

Invariantes:
    - TrainableModels só são treinados após suas dependências
    - Cada entrada é processada no máximo uma vez por travessia
    - Execução síncrona: nenhuma paralelização implícita
"""

from .driver import EntryResult, EntryStatus, TrainingResult, fit, train_tape
from .planner import plan_training

__all__ = [
    "EntryResult",
    "EntryStatus",
    "TrainingResult",
    "fit",
    "train_tape",
    "plan_training",
]
