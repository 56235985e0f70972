# src/learnet/core/context.py
"""
Contexto de treino compartilhado (`TrainingContext`).

Este módulo define o `TrainingContext`, a estrutura canônica de
observabilidade do learnet. Toda chamada de `fit` registra nele seus
eventos estruturados e warnings, identificados pelo `entry_id` do
TrainableModel envolvido.

Princípios fundamentais:
    - Logs são eventos estruturados (dicts), não strings livres
    - Warnings são sinais não fatais agrupados por `entry_id`
    - Contextos são explícitos; quando quem chama não fornece um, `fit` usa o
      contexto default do processo (`default_context()`), legível a qualquer momento

Política de verbosidade (aplicada por quem registra):
    - verbosity >= 1 → eventos INFO para cada ação de treino
    - verbosity >= 2 → eventos DEBUG (linhas materializadas, chaves de report)
    - verbosity <= 0 → apenas WARNING e ERROR

Invariantes:
    - Todo evento inclui `run_id`, `entry_id`, `level`, `message` e `timestamp`
    - Eventos são armazenados na ordem em que ocorreram

Limites explícitos:
    - Não treina Models
    - Não decide política de execução (frozen/skip)
    - Não persiste eventos
    - O contexto default acumula eventos até `reset_default_context()`
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import uuid

from .config.hashing import compute_config_hash


INFO = "INFO"
DEBUG = "DEBUG"
WARNING = "WARNING"
ERROR = "ERROR"

LAST_RESULT = "training.last_result"


@dataclass
class TrainingContext:
    """
    Contexto de observabilidade de uma ou mais chamadas de `fit`.

    Campos canônicos:
    - run_id: identificador da execução
    - created_at: timestamp UTC de criação do contexto
    - config: configuração efetiva usada para construir as FitOptions
    - events: log estruturado de eventos
    - warnings: warnings por entry_id
    """

    run_id: str
    created_at: datetime
    config: Dict[str, Any] = field(default_factory=dict)

    _artifacts: Dict[str, Any] = field(default_factory=dict, init=False, repr=False)
    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    @classmethod
    def new(cls, config: Optional[Dict[str, Any]] = None) -> "TrainingContext":
        return cls(
            run_id=uuid.uuid4().hex,
            created_at=datetime.now(timezone.utc),
            config=dict(config or {}),
        )

    @property
    def config_hash(self) -> str:
        return compute_config_hash(self.config)

    # -----------------------------
    # Artifact store
    # -----------------------------
    def set_artifact(self, key: str, value: Any) -> None:
        self._artifacts[key] = value

    def has_artifact(self, key: str) -> bool:
        return key in self._artifacts

    def get_artifact(self, key: str) -> Any:
        if key not in self._artifacts:
            raise KeyError(key)
        return self._artifacts[key]

    @property
    def last_result(self) -> Any:
        """`TrainingResult` da chamada de `fit` mais recente registrada neste contexto."""
        return self.get_artifact(LAST_RESULT)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, entry_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "entry_id": entry_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, entry_id: str, message: str) -> None:
        if entry_id not in self.warnings:
            self.warnings[entry_id] = []
        self.warnings[entry_id].append(message)
        self.log(entry_id=entry_id, level=WARNING, message=message)

    def events_for(self, entry_id: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["entry_id"] == entry_id]


_DEFAULT_CONTEXT: Optional[TrainingContext] = None


def default_context() -> TrainingContext:
    """Contexto usado por `fit` quando nenhum `ctx` é fornecido."""
    global _DEFAULT_CONTEXT
    if _DEFAULT_CONTEXT is None:
        _DEFAULT_CONTEXT = TrainingContext.new()
    return _DEFAULT_CONTEXT


def reset_default_context(config: Optional[Dict[str, Any]] = None) -> TrainingContext:
    """Substitui o contexto default por um novo (eventos e resultados descartados)."""
    global _DEFAULT_CONTEXT
    _DEFAULT_CONTEXT = TrainingContext.new(config)
    return _DEFAULT_CONTEXT


def resolve_context(ctx: Optional[TrainingContext]) -> TrainingContext:
    return ctx if ctx is not None else default_context()
