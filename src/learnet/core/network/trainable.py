# src/learnet/core/network/trainable.py
"""
TrainableModel: um Model, seus argumentos de treino e o estado de fit.

Um TrainableModel é a unidade de estado mutável da learning network.
Ele é mutado apenas por `fit_trainable`, `freeze` e `thaw`.

Estado de fit:
    - `fitresult`, `cache` e `report` formam uma unidade: ou todos ausentes
      (nunca treinado) ou todos presentes
    - `rows` lembra o subconjunto de linhas usado no último fit completo
    - `frozen` é apenas um flag; congelar nunca descarta estado de fit

Protocolo de `fit_trainable` (single-model, sempre executa):
    - nunca treinado                → fit completo em `rows` (None = todas)
    - treinado e `rows` omitido     → update nas linhas lembradas
    - treinado e `rows` explícito   → fit completo do zero nas novas linhas

A política de pular TrainableModels congelados pertence ao driver de
treino (`learnet.core.engine.driver`), não a este módulo.
"""

from __future__ import annotations

from enum import Enum
from itertools import count
from typing import Any, Dict, FrozenSet, Optional, Tuple

from learnet.core.context import DEBUG, ERROR, INFO, TrainingContext, resolve_context
from learnet.core.errors import exception_to_error
from learnet.core.exceptions import (
    ArityError,
    InvalidNodeError,
    UnsupportedOperationError,
    UntrainedError,
)
from learnet.core.model import Supervision, validate_model

from .nodes import Node, SourceNode, is_node
from .rows import count_rows, select_rows
from .tape import Tape, merge_tapes


_ENTRY_COUNTER = count(1)

_UNSET: Any = object()


class TrainingAction(str, Enum):
    """Ação que `fit_trainable` executa para um dado estado e `rows`."""

    TRAIN = "train"
    UPDATE = "update"
    RETRAIN = "retrain"


class TrainableModel:
    """
    Um Model vinculado a nodes de treino, com estado de fit mutável.

    Construído via `trainable(model, *args)`, que valida aridade e
    capacidades e calcula a tape: merge das tapes dos argumentos seguido
    do próprio TrainableModel.
    """

    def __init__(self, model: Any, *args: Node) -> None:
        supervision, operations = validate_model(model)

        if len(args) != supervision.arity:
            usage = "trainable(model, X, y)" if supervision is Supervision.SUPERVISED else "trainable(model, X)"
            raise ArityError(
                f"Wrong number of arguments for {supervision.value} model "
                f"{type(model).__name__}: expected {supervision.arity}, got {len(args)}",
                details={
                    "model": type(model).__name__,
                    "supervision": supervision.value,
                    "expected": supervision.arity,
                    "received": len(args),
                },
                hint=f"Use {usage}",
            )
        for position, arg in enumerate(args):
            if not is_node(arg):
                raise InvalidNodeError(
                    f"training argument at position {position} must be a node, "
                    f"got {type(arg).__name__}",
                    details={"position": position, "received": type(arg).__name__},
                )

        self.model = model
        self.entry_id = f"{type(model).__name__}#{next(_ENTRY_COUNTER)}"
        self._args: Tuple[Node, ...] = tuple(args)
        self._supervision = supervision
        self._operations = operations
        self._frozen = False

        self._fitresult: Any = _UNSET
        self._cache: Any = _UNSET
        self._report: Dict[str, Any] = {}
        self._rows: Any = None

        self._tape = merge_tapes(*(arg.tape for arg in self._args))
        self._tape.append(self)

    # -----------------------------
    # Leitura
    # -----------------------------
    @property
    def args(self) -> Tuple[Node, ...]:
        return self._args

    @property
    def tape(self) -> Tape:
        return self._tape

    @property
    def supervision(self) -> Supervision:
        return self._supervision

    @property
    def operations(self) -> FrozenSet[str]:
        return self._operations

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def is_trained(self) -> bool:
        return self._fitresult is not _UNSET

    @property
    def fitresult(self) -> Any:
        return self._require_trained("fitresult")._fitresult

    @property
    def cache(self) -> Any:
        return self._require_trained("cache")._cache

    @property
    def report(self) -> Dict[str, Any]:
        return self._require_trained("report")._report

    @property
    def rows(self) -> Any:
        return self._rows

    def _require_trained(self, what: str) -> "TrainableModel":
        if not self.is_trained:
            raise UntrainedError(
                f"{self.entry_id} has not been trained; `{what}` is undefined",
                details={"entry_id": self.entry_id, "model": type(self.model).__name__},
                hint="Chame fit() antes de acessar o estado de treino",
            )
        return self

    # -----------------------------
    # Flag frozen
    # -----------------------------
    def freeze(self) -> "TrainableModel":
        self._frozen = True
        return self

    def thaw(self) -> "TrainableModel":
        self._frozen = False
        return self

    # -----------------------------
    # Operações
    # -----------------------------
    def check_operation(self, name: str) -> None:
        if name not in self._operations:
            raise UnsupportedOperationError(
                f"{type(self.model).__name__} does not support `{name}`",
                details={
                    "entry_id": self.entry_id,
                    "model": type(self.model).__name__,
                    "operation": name,
                    "supported": sorted(self._operations),
                },
            )

    def apply(self, name: str, data: Any) -> Any:
        """Executa `model.<name>(fitresult, data)` (exige capacidade e treino prévio)."""
        self.check_operation(name)
        self._require_trained(name)
        return getattr(self.model, name)(self._fitresult, data)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else ("trained" if self.is_trained else "untrained")
        return f"TrainableModel({self.entry_id}, {state})"


def trainable(model: Any, *args: Any) -> TrainableModel:
    """
    Constrói um TrainableModel.

    Argumentos aceitos além de nodes:
        - dados brutos: cada um é envolvido em um novo SourceNode
        - uma única task (`SupervisedTask` / `UnsupervisedTask`): expandida
          em `(X, y)` ou `(X,)` antes da validação de aridade
    """
    if len(args) == 1 and hasattr(args[0], "training_args"):
        args = tuple(args[0].training_args())
    if any(isinstance(arg, TrainableModel) for arg in args):
        raise InvalidNodeError(
            "a TrainableModel cannot be a training argument; wrap it with an operation "
            "(e.g. transform(t, X)) first",
            details={"model": type(model).__name__},
        )
    nodes = tuple(arg if is_node(arg) else SourceNode(arg) for arg in args)
    return TrainableModel(model, *nodes)


def freeze(t: TrainableModel) -> TrainableModel:
    return t.freeze()


def thaw(t: TrainableModel) -> TrainableModel:
    return t.thaw()


def training_action(t: TrainableModel, rows: Any = None) -> TrainingAction:
    if not t.is_trained:
        return TrainingAction.TRAIN
    if rows is None:
        return TrainingAction.UPDATE
    return TrainingAction.RETRAIN


def _check_report(t: TrainableModel, report: Any) -> None:
    if report is not None and not isinstance(report, dict):
        raise TypeError(
            f"{type(t.model).__name__} returned a report of type {type(report).__name__}; "
            "expected dict or None"
        )


def _unpack(t: TrainableModel, method: str, returned: Any) -> Tuple[Any, Any, Any]:
    if not isinstance(returned, tuple) or len(returned) != 3:
        raise TypeError(
            f"{type(t.model).__name__}.{method} must return (fitresult, cache, report)"
        )
    return returned


def fit_trainable(
    t: TrainableModel,
    verbosity: int = 1,
    rows: Any = None,
    *,
    ctx: Optional[TrainingContext] = None,
) -> TrainableModel:
    """
    Treina ou atualiza `t` segundo o protocolo fit/update.

    Sempre executa, mesmo que `t` esteja congelado. Falhas internas do Model
    são registradas em `ctx` (nível ERROR) e propagadas sem alteração; o
    estado de `t` permanece o anterior à chamada.
    """
    ctx = resolve_context(ctx)
    action = training_action(t, rows)
    model_name = type(t.model).__name__

    if verbosity >= 1:
        verb = "Updating" if action is TrainingAction.UPDATE else "Training"
        ctx.log(
            entry_id=t.entry_id,
            level=INFO,
            message=f"{verb} {t!r} whose model is {t.model!r}.",
            action=action.value,
        )

    effective_rows = t._rows if action is TrainingAction.UPDATE else rows

    try:
        materialized = [select_rows(arg(), effective_rows) for arg in t._args]
        if verbosity >= 2:
            ctx.log(
                entry_id=t.entry_id,
                level=DEBUG,
                message="materialized training arguments",
                n_rows=[count_rows(a) for a in materialized],
            )

        if action is TrainingAction.UPDATE:
            method = "update"
            returned = t.model.update(verbosity, t._fitresult, t._cache, *materialized)
        else:
            method = "fit"
            returned = t.model.fit(verbosity, *materialized)
        fitresult, cache, report = _unpack(t, method, returned)
        _check_report(t, report)

        t._fitresult, t._cache = fitresult, cache
        if report is not None:
            t._report.update(report)
        if action is not TrainingAction.UPDATE:
            t._rows = rows

    except Exception as exc:
        ctx.log(
            entry_id=t.entry_id,
            level=ERROR,
            message=f"{action.value} failed for {model_name}",
            error=exception_to_error(exc).to_dict(),
        )
        raise

    if verbosity >= 2:
        ctx.log(
            entry_id=t.entry_id,
            level=DEBUG,
            message="fit state updated",
            report_keys=sorted(t._report),
        )
    return t
