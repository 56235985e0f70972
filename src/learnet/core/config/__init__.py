# src/learnet/core/config/__init__.py
"""
Camada de configuração do learnet.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Geração de hash canônico para rastreabilidade
    - Registro explícito de opções de treino (`FitOptions`)

Limites explícitos:
    - Não treina Models
    - Não interage com nodes diretamente
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidFitOptionError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import load_config
from .merge import deep_merge
from .options import DEFAULT_TRAINING_CONFIG, UNSET, FitOptions

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidFitOptionError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "load_config",
    "deep_merge",
    "DEFAULT_TRAINING_CONFIG",
    "FitOptions",
    "UNSET",
]
