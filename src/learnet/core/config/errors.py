# src/learnet/core/config/errors.py
"""
Exceções canônicas da camada de configuração do learnet.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, a resolução e a validação da configuração de treino.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas a quem embute o engine

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa falha de treino de um Model

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende de nodes, TrainableModels ou do driver de treino
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do learnet.

    Todas as exceções levantadas durante carregamento, merge e validação
    de `FitOptions` herdam desta classe, permitindo captura genérica.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    não é encontrado no caminho especificado.

    O arquivo de defaults é obrigatório; nenhum default é inferido.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """Exceção levantada quando o conteúdo raiz da configuração não é um `dict`."""


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Este erro indica que uma mesma chave possui tipos incompatíveis
    entre a configuração base e o override (ex.: dict vs int).
    """


class InvalidFitOptionError(ConfigError):
    """
    Exceção levantada quando um valor de `FitOptions` é inválido.

    Exemplos:
        - `verbosity` não inteiro ou negativo
        - `rows` que não é sequência de inteiros, slice ou None
    """
