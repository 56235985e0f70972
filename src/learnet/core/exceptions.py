"""
learnet — Canonical Exceptions (v1)

Este módulo define as exceções tipadas do core de learning networks.

Objetivo:
- Permitir que nodes, TrainableModels e o driver de treino levantem
  exceções semânticas tipadas
- Facilitar o mapeamento determinístico para ErrorPayload
- Carregar contexto suficiente para diagnóstico (qual TrainableModel,
  qual Model, qual dependência ausente)

Regras:
- Não contém lógica de treino ou avaliação.
- Exceções carregam apenas dados estruturados em `details`.
- Falhas internas dos Models NÃO são encapsuladas aqui: propagam intactas.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(eq=False)
class LearnetException(Exception):
    """Base class para exceções internas do learnet.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    - `hint` indica onde corrigir, quando houver uma ação óbvia
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Construção de rede
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class ArityError(LearnetException):
    """Número de argumentos de treino incompatível com o tipo de supervisão do Model."""


@dataclass(eq=False)
class InvalidModelError(LearnetException):
    """Objeto não satisfaz o contrato de Model (supervisão ou capacidades inválidas)."""


@dataclass(eq=False)
class InvalidNodeError(LearnetException):
    """Argumento não é um node onde um node é exigido."""


@dataclass(eq=False)
class UnsupportedOperationError(LearnetException):
    """Operação não declarada no conjunto de capacidades do Model."""


# ---------------------------------------------------------------------------
# Treino / avaliação
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class UntrainedError(LearnetException):
    """Operação invocada através de um TrainableModel que nunca foi treinado."""


@dataclass(eq=False)
class DependencyError(LearnetException):
    """Tape contém uma entrada cujas dependências de treino não a precedem."""

