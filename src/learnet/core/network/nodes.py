# src/learnet/core/network/nodes.py
"""
Nodes de uma learning network.

Um node é qualquer valor chamável com zero ou um argumento de dados:

    node()   -> avalia o grafo a montante com os dados estacionados nas sources
    node(x)  -> reavalia o mesmo grafo substituindo `x` em cada source alcançada

Variantes (soma fechada, sem herança entre elas):
    - SourceNode: terminal, guarda um valor de dados substituível
    - LearningNode: derivado e imutável; aplica uma operação, opcionalmente
      através de um TrainableModel, aos valores dos nodes a montante

Princípios fundamentais:
    - Chamar um node nunca muta nada (substituição não é atribuição)
    - A recursão é estrutural sobre um grafo acíclico: argumentos existem antes
      do node que os recebe e nunca são reatribuídos, logo nenhum node pode
      depender de si mesmo (a aciclicidade é garantida pela construção)
    - LearningNodes não aparecem em tapes; apenas TrainableModels

Invariantes:
    - `depth` de uma source é 0; de um LearningNode é 1 + max(depth dos argumentos)
    - A tape de um LearningNode é o merge das tapes dos argumentos seguido
      da tape do TrainableModel vinculado (quando houver)
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Tuple, Union

from learnet.core.exceptions import InvalidNodeError, UntrainedError

from .tape import Tape, merge_tapes


class _NoData:
    def __repr__(self) -> str:
        return "<no data>"


NO_DATA: Any = _NoData()


class SourceNode:
    """Node terminal que guarda um valor de dados substituível."""

    def __init__(self, data: Any) -> None:
        self.data = data

    @property
    def tape(self) -> Tape:
        return Tape()

    @property
    def depth(self) -> int:
        return 0

    @property
    def args(self) -> Tuple[()]:
        return ()

    def __call__(self, data: Any = NO_DATA) -> Any:
        if data is NO_DATA:
            return self.data
        return data

    def __repr__(self) -> str:
        return f"SourceNode({type(self.data).__name__})"


class LearningNode:
    """
    Node derivado: `operation` aplicada aos valores dos argumentos.

    Com TrainableModel vinculado, a avaliação é
    `operation(trainable, arg1(), ..., argk())` e exige que o TrainableModel
    já tenha sido treinado. Sem TrainableModel (operação estática), a
    avaliação é `operation(arg1(), ..., argk())`.

    Instâncias são imutáveis: retreinar um TrainableModel a montante muda o
    que o node produz, nunca o node em si.
    """

    __slots__ = ("_operation", "_trainable", "_args", "_tape", "_depth")

    def __init__(
        self,
        operation: Callable[..., Any],
        trainable: Optional[Any],
        args: Tuple["Node", ...],
    ) -> None:
        if not callable(operation):
            raise InvalidNodeError(
                f"operation must be callable, got {type(operation).__name__}",
                details={"operation": repr(operation)},
            )
        if not args:
            raise InvalidNodeError(
                "a LearningNode requires at least one upstream node",
                details={"operation": _operation_name(operation)},
            )
        for position, arg in enumerate(args):
            require_node(arg, position=position, role="node argument")

        tape = merge_tapes(*(arg.tape for arg in args))
        if trainable is not None:
            tape.merge(trainable.tape)

        object.__setattr__(self, "_operation", operation)
        object.__setattr__(self, "_trainable", trainable)
        object.__setattr__(self, "_args", tuple(args))
        object.__setattr__(self, "_tape", tape)
        object.__setattr__(self, "_depth", 1 + max(arg.depth for arg in args))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"LearningNode is immutable (cannot set '{name}')")

    @property
    def operation(self) -> Callable[..., Any]:
        return self._operation

    @property
    def trainable(self) -> Optional[Any]:
        return self._trainable

    @property
    def args(self) -> Tuple["Node", ...]:
        return self._args

    @property
    def tape(self) -> Tape:
        return self._tape

    @property
    def depth(self) -> int:
        return self._depth

    def __call__(self, data: Any = NO_DATA) -> Any:
        if data is NO_DATA:
            values = [arg() for arg in self._args]
        else:
            values = [arg(data) for arg in self._args]

        if self._trainable is None:
            return self._operation(*values)

        if not self._trainable.is_trained:
            raise UntrainedError(
                f"{self._trainable.entry_id} has not been trained; "
                f"cannot evaluate {_operation_name(self._operation)} through it",
                details={
                    "entry_id": self._trainable.entry_id,
                    "model": type(self._trainable.model).__name__,
                    "operation": _operation_name(self._operation),
                },
                hint="Chame fit(node) antes de avaliar o node",
            )
        return self._operation(self._trainable, *values)

    def __repr__(self) -> str:
        bound = f", {self._trainable.entry_id}" if self._trainable is not None else ""
        return f"LearningNode({_operation_name(self._operation)}{bound}, depth={self._depth})"


Node = Union[SourceNode, LearningNode]
NODE_TYPES = (SourceNode, LearningNode)


def source(data: Any) -> SourceNode:
    """Cria um SourceNode guardando `data`."""
    return SourceNode(data)


def is_node(value: Any) -> bool:
    return isinstance(value, NODE_TYPES)


def require_node(value: Any, *, position: int, role: str) -> None:
    if not is_node(value):
        raise InvalidNodeError(
            f"{role} at position {position} must be a SourceNode or LearningNode, "
            f"got {type(value).__name__}",
            details={"position": position, "received": type(value).__name__},
        )


def _operation_name(operation: Callable[..., Any]) -> str:
    return getattr(operation, "__name__", None) or repr(operation)


def sources(node: Node) -> List[SourceNode]:
    """SourceNodes alcançados por `node` pelas arestas de dados, em ordem de descoberta."""
    found: List[SourceNode] = []
    seen = set()
    stack: List[Any] = [node]
    while stack:
        current = stack.pop(0)
        if id(current) in seen:
            continue
        seen.add(id(current))
        if isinstance(current, SourceNode):
            found.append(current)
        else:
            stack.extend(current.args)
    return found
