# src/learnet/core/model.py
"""
Contrato de Model consumido pelo core.

Um Model é um valor que carrega hiperparâmetros e expõe:

    fit(verbosity, *training_args) -> (fitresult, cache, report | None)
    update(verbosity, fitresult, cache, *training_args) -> (fitresult, cache, report | None)
    <operation>(fitresult, data) -> data    # uma por capacidade declarada

O core nunca despacha dinamicamente por tipo de Model. Cada Model declara
explicitamente:

    - `supervision`: Supervision.SUPERVISED (2 argumentos de treino: X, y)
                     ou Supervision.UNSUPERVISED (1 argumento de treino: X)
    - `operations`: conjunto de operações suportadas, subconjunto de OPERATIONS

Essas declarações são verificadas na construção de TrainableModels e
nodes, nunca no momento da chamada.

`update` possui implementação default que refaz o `fit` do zero; Models
com estado incremental útil (ex.: warm start) sobrescrevem.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, Tuple

from .exceptions import InvalidModelError


OPERATIONS: Tuple[str, ...] = (
    "predict",
    "predict_mean",
    "predict_mode",
    "predict_median",
    "transform",
    "inverse_transform",
)


class Supervision(str, Enum):
    """Tipos de supervisão de um Model; definem a aridade de treino."""

    SUPERVISED = "supervised"
    UNSUPERVISED = "unsupervised"

    @property
    def arity(self) -> int:
        return 2 if self is Supervision.SUPERVISED else 1


class Model:
    """Base opcional para Models (o core exige apenas conformidade estrutural)."""

    supervision: ClassVar[Supervision]
    operations: ClassVar[FrozenSet[str]] = frozenset()

    def fit(self, verbosity: int, *args: Any) -> Tuple[Any, Any, Any]:
        raise NotImplementedError

    def update(self, verbosity: int, fitresult: Any, cache: Any, *args: Any) -> Tuple[Any, Any, Any]:
        return self.fit(verbosity, *args)

    def params(self) -> Dict[str, Any]:
        return {k: v for k, v in vars(self).items() if not k.startswith("_")}

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self.params().items())
        return f"{type(self).__name__}({inner})"


class Supervised(Model):
    supervision = Supervision.SUPERVISED
    operations = frozenset({"predict"})


class Unsupervised(Model):
    supervision = Supervision.UNSUPERVISED
    operations = frozenset({"transform"})


def supervision_of(model: Any) -> Supervision:
    """Retorna a supervisão declarada de um Model, validando o valor."""
    kind = getattr(model, "supervision", None)
    try:
        return Supervision(kind)
    except ValueError:
        raise InvalidModelError(
            f"{type(model).__name__} does not declare a valid supervision kind",
            details={"model": type(model).__name__, "supervision": repr(kind)},
            hint="Declare `supervision = Supervision.SUPERVISED` ou `Supervision.UNSUPERVISED`",
        ) from None


def operations_of(model: Any) -> FrozenSet[str]:
    """Retorna o conjunto de capacidades declarado, validando nomes e métodos."""
    declared = frozenset(getattr(model, "operations", ()) or ())
    unknown = sorted(declared - set(OPERATIONS))
    if unknown:
        raise InvalidModelError(
            f"{type(model).__name__} declares unknown operations: {unknown}",
            details={"model": type(model).__name__, "unknown": unknown},
        )
    missing = sorted(op for op in declared if not callable(getattr(model, op, None)))
    if missing:
        raise InvalidModelError(
            f"{type(model).__name__} declares operations it does not implement: {missing}",
            details={"model": type(model).__name__, "missing": missing},
        )
    return declared


def validate_model(model: Any) -> Tuple[Supervision, FrozenSet[str]]:
    """Valida o contrato mínimo de um Model (supervisão, capacidades, fit/update)."""
    supervision = supervision_of(model)
    operations = operations_of(model)
    for method in ("fit", "update"):
        if not callable(getattr(model, method, None)):
            raise InvalidModelError(
                f"{type(model).__name__} does not implement `{method}`",
                details={"model": type(model).__name__, "method": method},
            )
    return supervision, operations
