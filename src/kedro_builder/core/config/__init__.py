# src/kedro_builder/core/config/__init__.py
"""
Camada de configuração do Kedro Builder.

A configuração controla os aspectos da geração que não vêm do grafo:
versão do Kedro alvo, requisito de Python, lista de dependências do
projeto gerado, type hint genérico dos parâmetros e nome padrão do pipeline.

Resolução:
    - defaults empacotados (`defaults.yaml`) ou arquivo de defaults explícito
    - overrides locais opcionais (YAML ou JSON)
    - deep-merge determinístico (dict recursivo, lista/escalar sobrescritos)

Invariantes:
    - A configuração final é um dicionário puro (dict)
    - Conflitos estruturais de tipo são tratados como erro
    - `GeneratorSettings` é a única forma pela qual geradores veem configuração
"""
from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import default_config_path, load_config
from .merge import deep_merge
from .settings import GeneratorSettings

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "default_config_path",
    "load_config",
    "deep_merge",
    "GeneratorSettings",
]
