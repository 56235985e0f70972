# src/learnet/core/engine/driver.py
"""
Driver de treino de learning networks.

O driver é uma travessia pura: "treinar a tape em ordem, pulando entradas
congeladas". Ele é o único ponto onde a política de frozen é aplicada,
mantendo `fit_trainable` simples e reutilizável.

Política de execução:
    - a tape é validada pelo planner antes de qualquer treino
    - entradas são processadas sequencialmente, na ordem da tape
    - entradas congeladas são puladas (estado de fit intacto)
    - `rows` destinadas a um alvo congelado são descartadas com warning
    - apenas o TrainableModel vinculado ao node alvo recebe `rows`; as demais
      entradas usam suas linhas lembradas (update) ou todas (primeiro treino)
    - a primeira falha interrompe a travessia e é propagada sem alteração;
      entradas já processadas mantêm o estado alcançado (sem rollback)
    - o `TrainingResult` da travessia é registrado no contexto (`ctx.last_result`)

Invariantes:
    - Nenhuma entrada é treinada antes de suas dependências
    - Cada entrada é processada no máximo uma vez por chamada
    - Execução síncrona e single-threaded
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union

from learnet.core.config.options import FitOptions
from learnet.core.config.options import UNSET
from learnet.core.context import INFO, LAST_RESULT, TrainingContext, resolve_context
from learnet.core.exceptions import InvalidNodeError
from learnet.core.network.nodes import LearningNode, SourceNode
from learnet.core.network.trainable import (
    TrainableModel,
    TrainingAction,
    fit_trainable,
    training_action,
)

from .planner import plan_training


class EntryStatus(str, Enum):
    """Estado final de uma entrada da tape após uma travessia."""

    TRAINED = "trained"
    UPDATED = "updated"
    RETRAINED = "retrained"
    SKIPPED = "skipped"


_STATUS_BY_ACTION = {
    TrainingAction.TRAIN: EntryStatus.TRAINED,
    TrainingAction.UPDATE: EntryStatus.UPDATED,
    TrainingAction.RETRAIN: EntryStatus.RETRAINED,
}


@dataclass(frozen=True)
class EntryResult:
    """Resultado imutável do processamento de uma entrada da tape."""

    entry_id: str
    model: str
    status: EntryStatus
    summary: str


@dataclass(frozen=True)
class TrainingResult:
    """Resultado agregado de uma travessia, na ordem da tape."""

    entries: Dict[str, EntryResult] = field(default_factory=dict)

    def with_status(self, status: EntryStatus) -> List[str]:
        return [eid for eid, r in self.entries.items() if r.status == status]


def train_tape(
    tape: Iterable[Any],
    *,
    options: Optional[FitOptions] = None,
    target: Optional[TrainableModel] = None,
    ctx: Optional[TrainingContext] = None,
) -> TrainingResult:
    """Treina a tape em ordem, pulando entradas congeladas."""
    options = options or FitOptions()
    ctx = resolve_context(ctx)
    ordered = plan_training(tape)

    results: Dict[str, EntryResult] = {}
    for entry in ordered:
        model_name = type(entry.model).__name__

        if entry.frozen:
            if entry is target and options.rows is not None:
                ctx.add_warning(
                    entry_id=entry.entry_id,
                    message=f"rows ignored: {entry.entry_id} is frozen",
                )
            if not entry.is_trained:
                ctx.add_warning(
                    entry_id=entry.entry_id,
                    message=f"{entry.entry_id} is frozen but has never been trained",
                )
            if options.verbosity >= 1:
                ctx.log(entry_id=entry.entry_id, level=INFO, message=f"Skipping frozen {entry!r}.")
            results[entry.entry_id] = EntryResult(
                entry_id=entry.entry_id,
                model=model_name,
                status=EntryStatus.SKIPPED,
                summary="skipped (frozen)",
            )
            continue

        rows = options.rows if entry is target else None
        action = training_action(entry, rows)
        fit_trainable(entry, options.verbosity, rows, ctx=ctx)
        results[entry.entry_id] = EntryResult(
            entry_id=entry.entry_id,
            model=model_name,
            status=_STATUS_BY_ACTION[action],
            summary=f"{action.value} ok",
        )

    result = TrainingResult(entries=results)
    ctx.set_artifact(LAST_RESULT, result)
    return result


FitTarget = Union[TrainableModel, LearningNode, SourceNode]


def fit(
    target: FitTarget,
    verbosity: Any = UNSET,
    rows: Any = UNSET,
    *,
    options: Optional[FitOptions] = None,
    ctx: Optional[TrainingContext] = None,
) -> FitTarget:
    """
    Treina `target` e retorna o próprio `target`.

    - TrainableModel: fit/update direto, mesmo se congelado
    - LearningNode: travessia da tape pelo driver (congelados são pulados)
    - SourceNode: nada a treinar

    Valores fornecidos de `verbosity`/`rows` sobrescrevem `options`
    (default: `FitOptions()`, isto é, verbosity=1 e todas as linhas);
    `rows=None` explícito anula rows configuradas em `options` (update nas
    linhas lembradas, ou todas no primeiro treino).

    Eventos e o `TrainingResult` da chamada (`ctx.last_result`) ficam em
    `ctx`, ou no contexto default (`default_context()`) quando omitido.
    """
    resolved = (options or FitOptions()).override(verbosity=verbosity, rows=rows)
    ctx = resolve_context(ctx)

    if isinstance(target, TrainableModel):
        action = training_action(target, resolved.rows)
        fit_trainable(target, resolved.verbosity, resolved.rows, ctx=ctx)
        entry = EntryResult(
            entry_id=target.entry_id,
            model=type(target.model).__name__,
            status=_STATUS_BY_ACTION[action],
            summary=f"{action.value} ok",
        )
        ctx.set_artifact(LAST_RESULT, TrainingResult(entries={target.entry_id: entry}))
        return target

    if isinstance(target, LearningNode):
        if resolved.rows is not None and target.trainable is None:
            ctx.add_warning(
                entry_id=repr(target),
                message="rows ignored: node has no bound TrainableModel",
            )
        train_tape(target.tape, options=resolved, target=target.trainable, ctx=ctx)
        return target

    if isinstance(target, SourceNode):
        ctx.set_artifact(LAST_RESULT, TrainingResult())
        return target

    raise InvalidNodeError(
        f"cannot fit a {type(target).__name__}",
        details={"received": type(target).__name__},
    )
