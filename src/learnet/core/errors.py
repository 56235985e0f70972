"""
learnet — Canonical Error Structures (v1)

Este módulo define o padrão canônico de payloads de erro do learnet.
Payloads são a forma serializável de uma falha, registrada no event log
do TrainingContext antes que a exceção original seja propagada.

Payloads devem ser:

- explícitos
- serializáveis
- acionáveis

O core nunca substitui a exceção original pelo payload: o payload é
apenas o registro estruturado da falha.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .exceptions import LearnetException


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do learnet.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida a quem embute o engine (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Construção de rede
ARITY_ERROR = "ARITY_ERROR"
INVALID_MODEL = "INVALID_MODEL"
INVALID_NODE = "INVALID_NODE"
UNSUPPORTED_OPERATION = "UNSUPPORTED_OPERATION"

# Treino / avaliação
UNTRAINED_ERROR = "UNTRAINED_ERROR"
DEPENDENCY_ERROR = "DEPENDENCY_ERROR"
MODEL_EXECUTION_ERROR = "MODEL_EXECUTION_ERROR"


_TYPE_BY_CLASS = {
    "ArityError": ARITY_ERROR,
    "InvalidModelError": INVALID_MODEL,
    "InvalidNodeError": INVALID_NODE,
    "UnsupportedOperationError": UNSUPPORTED_OPERATION,
    "UntrainedError": UNTRAINED_ERROR,
    "DependencyError": DEPENDENCY_ERROR,
}


def exception_to_error(exc: BaseException) -> ErrorPayload:
    """Converte exceções em ErrorPayload (serializável, acionável).

    Regras:
    - LearnetException: já carrega message/details/hint; o tipo vem do catálogo.
    - Outras exceções (falhas internas de Models): MODEL_EXECUTION_ERROR, sem stack trace.
    """
    if isinstance(exc, LearnetException):
        return ErrorPayload(
            type=_TYPE_BY_CLASS.get(exc.__class__.__name__, exc.__class__.__name__),
            message=str(exc) or "Erro no learnet",
            details=dict(exc.details or {}),
            hint=exc.hint,
        )

    return ErrorPayload(
        type=MODEL_EXECUTION_ERROR,
        message=str(exc) or "Erro inesperado durante fit/update do Model",
        details={"exception_class": exc.__class__.__name__},
        hint="Verifique a implementação do Model e os dados de treino",
    )
