# src/learnet/core/config/loader.py
"""
Carregamento dos arquivos de configuração de treino do learnet.

A configuração efetiva é resolvida a partir de:
    - um arquivo de defaults (obrigatório), tipicamente `learnet.defaults.yaml`
    - um arquivo local de overrides (opcional), tipicamente `learnet.local.yaml`

O consumidor principal é `FitOptions.from_files`, que lê a seção `training`
do resultado. Outras seções são preservadas sem interpretação.

Invariantes:
    - O resultado é sempre um `dict` (arquivo vazio → `{}`)
    - O local tem precedência sobre defaults (política de `deep_merge`)
    - Um arquivo local inexistente é ignorado; um defaults inexistente é erro
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional, TextIO, Union

import yaml  # PyYAML

from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge


PathLike = Union[str, Path]

_READERS: Dict[str, Callable[[TextIO], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.load,
}


def read_config_file(path: PathLike) -> Dict[str, Any]:
    """
    Lê um único arquivo de configuração (YAML ou JSON).

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não tiver leitor registrado.
        InvalidConfigRootTypeError: Se a raiz não for um mapeamento.
    """
    path = Path(path)
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise UnsupportedConfigFormatError(
            f"Formato não suportado: {path.suffix or '<sem extensão>'} "
            f"(aceitos: {', '.join(sorted(_READERS))})"
        )

    with path.open("r", encoding="utf-8") as f:
        data = reader(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__} ({path.name})"
        )
    return data


def load_config(
    *,
    defaults_path: PathLike,
    local_path: Optional[PathLike] = None,
) -> Dict[str, Any]:
    """
    Resolve a configuração efetiva: defaults + overrides locais (se existirem).

    Raises:
        DefaultsNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se um dos formatos não for suportado.
        InvalidConfigRootTypeError: Se um dos conteúdos não for um dicionário.
        ConfigTypeConflictError: Se o local conflitar estruturalmente com defaults.
    """
    defaults = read_config_file(defaults_path)
    if local_path is None or not Path(local_path).exists():
        return defaults
    return deep_merge(defaults, read_config_file(local_path))
