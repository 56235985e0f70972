# src/learnet/core/config/options.py
"""
Registro explícito de opções de treino (`FitOptions`).

`FitOptions` substitui convenções implícitas de argumentos default por um
registro único, passado explicitamente a `fit`:

    - verbosity: nível de detalhe informacional (0 suprime eventos INFO)
    - rows: subconjunto de linhas usado para treinar (None = todas)

O registro pode ser construído diretamente, a partir da seção `training`
de uma configuração resolvida (`from_config`) ou dos arquivos de
configuração (`from_files`, via `load_config`):

    training:
      verbosity: 1
      rows: null

Invariantes:
    - Instâncias são imutáveis
    - `verbosity` é sempre um inteiro >= 0
    - `rows` é None, um slice, um range ou uma sequência de inteiros/booleanos
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

import numpy as np

from .errors import InvalidFitOptionError
from .loader import load_config


TRAINING_SECTION = "training"


class _Unset:
    def __repr__(self) -> str:
        return "<unset>"


# "não fornecido"; distinto de um `None` explícito
UNSET: Any = _Unset()

DEFAULT_TRAINING_CONFIG: Dict[str, Any] = {
    "verbosity": 1,
    "rows": None,
}


def _validate_verbosity(value: Any) -> int:
    # bool é subclasse de int, mas não é um nível de verbosidade
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFitOptionError(
            f"verbosity must be an int, got {type(value).__name__}"
        )
    if value < 0:
        raise InvalidFitOptionError(f"verbosity must be >= 0, got {value}")
    return value


def _validate_rows(value: Any) -> Any:
    if value is None or isinstance(value, (slice, range)):
        return value
    if isinstance(value, (str, bytes, dict)):
        raise InvalidFitOptionError(
            f"rows must be None, a slice or a sequence of ints, got {type(value).__name__}"
        )
    try:
        items = list(value)
    except TypeError:
        raise InvalidFitOptionError(
            f"rows must be None, a slice or a sequence of ints, got {type(value).__name__}"
        ) from None
    for item in items:
        if not isinstance(item, (int, np.integer, np.bool_)):
            raise InvalidFitOptionError(f"rows entries must be integers, got {item!r}")
    return value


@dataclass(frozen=True)
class FitOptions:
    """Opções explícitas de uma chamada de `fit`."""

    verbosity: int = 1
    rows: Any = None

    def __post_init__(self) -> None:
        _validate_verbosity(self.verbosity)
        _validate_rows(self.rows)

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]]) -> "FitOptions":
        """Constrói `FitOptions` a partir da seção `training` de uma config resolvida."""
        section = (config or {}).get(TRAINING_SECTION, {}) or {}
        if not isinstance(section, dict):
            raise InvalidFitOptionError(
                f"'{TRAINING_SECTION}' section must be a dict, got {type(section).__name__}"
            )
        merged = dict(DEFAULT_TRAINING_CONFIG)
        merged.update({k: v for k, v in section.items() if k in DEFAULT_TRAINING_CONFIG})
        return cls(verbosity=merged["verbosity"], rows=merged["rows"])

    @classmethod
    def from_files(cls, defaults_path: str, local_path: Optional[str] = None) -> "FitOptions":
        """Resolve defaults + overrides locais via `load_config` e lê a seção `training`."""
        return cls.from_config(load_config(defaults_path=defaults_path, local_path=local_path))

    def override(self, *, verbosity: Any = UNSET, rows: Any = UNSET) -> "FitOptions":
        """Retorna uma nova instância com os valores fornecidos aplicados.

        `rows=None` é um valor explícito (rows não especificadas); omitir o
        argumento mantém o valor atual.
        """
        changes: Dict[str, Any] = {}
        if verbosity is not UNSET:
            changes["verbosity"] = verbosity
        if rows is not UNSET:
            changes["rows"] = rows
        return replace(self, **changes) if changes else self
