# src/learnet/core/network/tape.py
"""
Dependency tape: conjunto ordenado de TrainableModels.

Uma tape registra, em ordem de dependência, todos os TrainableModels
alcançáveis a partir de um node ou TrainableModel. É construída uma única
vez, na construção do dono, a partir das tapes dos argumentos.

Política de merge (append-if-absent):
    - entradas já presentes são ignoradas
    - entradas novas são anexadas preservando a ordem relativa da tape de origem

Invariantes:
    - Um TrainableModel aparece no máximo uma vez (identidade, não igualdade)
    - Toda dependência de treino de uma entrada aparece antes dela

Decisões arquiteturais:
    - Pertinência é testada por `id()`; a tape mantém referências fortes às
      entradas, de modo que os ids permanecem válidos enquanto ela existir
    - Models com `__eq__` estrutural nunca são confundidos entre si
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List


class Tape:
    """Sequência ordenada e sem duplicatas de TrainableModels."""

    __slots__ = ("_entries", "_index")

    def __init__(self, entries: Iterable[Any] = ()) -> None:
        self._entries: List[Any] = []
        self._index: Dict[int, int] = {}
        for entry in entries:
            self.append(entry)

    def append(self, entry: Any) -> bool:
        """Anexa `entry` se ausente. Retorna True quando a entrada foi adicionada."""
        key = id(entry)
        if key in self._index:
            return False
        self._index[key] = len(self._entries)
        self._entries.append(entry)
        return True

    def merge(self, other: Iterable[Any]) -> "Tape":
        for entry in other:
            self.append(entry)
        return self

    def index(self, entry: Any) -> int:
        try:
            return self._index[id(entry)]
        except KeyError:
            raise ValueError(f"{entry!r} is not in tape") from None

    def __contains__(self, entry: Any) -> bool:
        return id(entry) in self._index

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, i: int) -> Any:
        return self._entries[i]

    def __repr__(self) -> str:
        ids = ", ".join(getattr(e, "entry_id", repr(e)) for e in self._entries)
        return f"Tape([{ids}])"


def merge_tapes(*tapes: Iterable[Any]) -> Tape:
    """Nova tape com o merge append-if-absent de `tapes`, na ordem dada."""
    result = Tape()
    for tape in tapes:
        result.merge(tape)
    return result
