# src/learnet/core/network/operations.py
"""
Construção de LearningNodes e acessores de operação.

`node(operation, *args)` cria um LearningNode:

    node(f, X, Y)            → operação estática: f(X(), Y())
    node(predict, t, X)      → operação dinâmica através do TrainableModel `t`

Os acessores (`predict`, `transform`, `inverse_transform`, ...) são gerados a
partir do catálogo `OPERATIONS` e têm duas formas:

    predict(t, X_node)  → LearningNode (lazy)
    predict(t, X_data)  → dados, via model.predict(fitresult, X_data)

Capacidades são verificadas na construção do node: vincular uma operação
não declarada pelo Model falha imediatamente com UnsupportedOperationError.
"""

from __future__ import annotations

from typing import Any, Callable, Dict

from learnet.core.exceptions import InvalidNodeError
from learnet.core.model import OPERATIONS

from .nodes import LearningNode, is_node
from .trainable import TrainableModel


def node(operation: Callable[..., Any], *args: Any) -> LearningNode:
    """Cria um LearningNode; um TrainableModel como primeiro argumento vincula a operação."""
    if args and isinstance(args[0], TrainableModel):
        bound, upstream = args[0], args[1:]
        name = getattr(operation, "operation_name", None)
        if name is not None:
            bound.check_operation(name)
        return LearningNode(operation, bound, upstream)
    return LearningNode(operation, None, args)


def _make_operation(name: str) -> Callable[..., Any]:
    def operation(t: TrainableModel, data: Any) -> Any:
        if not isinstance(t, TrainableModel):
            raise InvalidNodeError(
                f"{name} expects a TrainableModel as first argument, got {type(t).__name__}",
                details={"operation": name, "received": type(t).__name__},
            )
        if is_node(data):
            return node(operation, t, data)
        return t.apply(name, data)

    operation.__name__ = name
    operation.__qualname__ = name
    operation.__doc__ = (
        f"`{name}` através de um TrainableModel: LearningNode para nodes, dados para dados."
    )
    operation.operation_name = name  # type: ignore[attr-defined]
    return operation


_ACCESSORS: Dict[str, Callable[..., Any]] = {name: _make_operation(name) for name in OPERATIONS}

predict = _ACCESSORS["predict"]
predict_mean = _ACCESSORS["predict_mean"]
predict_mode = _ACCESSORS["predict_mode"]
predict_median = _ACCESSORS["predict_median"]
transform = _ACCESSORS["transform"]
inverse_transform = _ACCESSORS["inverse_transform"]


def operation_for(name: str) -> Callable[..., Any]:
    """Acessor registrado para `name` (KeyError se não pertencer ao catálogo)."""
    return _ACCESSORS[name]
