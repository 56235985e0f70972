# src/learnet/tasks.py
"""
Tasks: dados tabulares acompanhados do papel de cada coluna.

`trainable(model, task)` aceita uma task no lugar dos argumentos de treino:

    SupervisedTask(data, target="y")  → trainable(model, X, y)
    UnsupervisedTask(data)            → trainable(model, X)

Os argumentos são extraídos com pandas; cada um vira um SourceNode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

import pandas as pd


@dataclass(frozen=True)
class SupervisedTask:
    data: pd.DataFrame
    target: str
    features: Optional[Sequence[str]] = None

    def __post_init__(self) -> None:
        if self.target not in self.data.columns:
            raise KeyError(f"target column '{self.target}' not in data")
        missing = [c for c in (self.features or []) if c not in self.data.columns]
        if missing:
            raise KeyError(f"feature columns not in data: {missing}")

    def X_and_y(self) -> Tuple[pd.DataFrame, pd.Series]:
        if self.features is not None:
            X = self.data[list(self.features)]
        else:
            X = self.data.drop(columns=[self.target])
        return X, self.data[self.target]

    def training_args(self) -> Tuple[Any, ...]:
        return self.X_and_y()


@dataclass(frozen=True)
class UnsupervisedTask:
    data: pd.DataFrame
    features: Optional[Sequence[str]] = None

    def training_args(self) -> Tuple[Any, ...]:
        if self.features is not None:
            return (self.data[list(self.features)],)
        return (self.data,)


def X_and_y(task: SupervisedTask) -> Tuple[pd.DataFrame, pd.Series]:
    return task.X_and_y()
