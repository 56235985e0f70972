# src/learnet/core/engine/planner.py
"""
Planejador de treino: validação estrutural de uma dependency tape.

Tapes construídas por `trainable()` e `node()` já são topologicamente
consistentes. O planner valida a tape antes de qualquer treino, rejeitando
tapes manipuladas diretamente por quem chama.

Regras de validação:
    - toda entrada deve ser um TrainableModel
    - nenhuma entrada aparece duas vezes (identidade)
    - toda dependência de treino de uma entrada (sua própria tape, exceto ela
      mesma) aparece em posição anterior na tape

Princípios fundamentais:
    - Validação estrutural ocorre antes da execução
    - Nenhuma reordenação silenciosa: a ordem recebida é a ordem executada
    - Erros estruturais são falhas fatais

Limites explícitos:
    - Não treina Models
    - Não decide política de frozen/skip
    - Não registra eventos
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from learnet.core.exceptions import DependencyError
from learnet.core.network.trainable import TrainableModel


def plan_training(tape: Iterable[Any]) -> List[TrainableModel]:
    """
    Valida e retorna a ordem de treino de uma tape.

    Args:
        tape (Iterable[Any]): Tape (ou qualquer sequência) de TrainableModels.

    Returns:
        List[TrainableModel]: Entradas na ordem recebida.

    Raises:
        DependencyError: Se houver entrada inválida, duplicada ou cuja
            dependência de treino não a preceda.
    """
    ordered = list(tape)
    position: Dict[int, int] = {}

    for i, entry in enumerate(ordered):
        if not isinstance(entry, TrainableModel):
            raise DependencyError(
                f"tape entry at position {i} is not a TrainableModel",
                details={"position": i, "received": type(entry).__name__},
            )
        if id(entry) in position:
            raise DependencyError(
                f"Duplicate tape entry: {entry.entry_id}",
                details={"entry_id": entry.entry_id, "positions": [position[id(entry)], i]},
            )
        position[id(entry)] = i

    for i, entry in enumerate(ordered):
        for dependency in entry.tape:
            if dependency is entry:
                continue
            dep_position = position.get(id(dependency))
            if dep_position is None or dep_position > i:
                raise DependencyError(
                    f"{entry.entry_id} requires {dependency.entry_id}, "
                    "which is not trained earlier in the tape",
                    details={
                        "entry_id": entry.entry_id,
                        "model": type(entry.model).__name__,
                        "missing_dependency": dependency.entry_id,
                        "dependency_model": type(dependency.model).__name__,
                    },
                    hint="Use a tape construída por node()/trainable() em vez de montá-la manualmente",
                )

    return ordered
