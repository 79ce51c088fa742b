# src/kedro_builder/core/config/loader.py
"""
Loader canônico de configuração do Kedro Builder.

A configuração efetiva é resolvida a partir de:
    - um arquivo de defaults (obrigatório; por padrão o `defaults.yaml`
      empacotado junto deste módulo)
    - um arquivo local de overrides (opcional)

Invariantes:
    - O arquivo de defaults sempre existe no momento da resolução
    - O resultado é sempre um dicionário puro (`dict`)
    - Overrides nunca mutam os defaults

Limites explícitos:
    - Não valida semântica (isso é feito por `GeneratorSettings.from_config`)
    - Não persiste configuração ou hash
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


_DEFAULTS_FILENAME = "defaults.yaml"


def default_config_path() -> Path:
    """Caminho do `defaults.yaml` distribuído com o pacote."""
    return Path(__file__).resolve().parent / _DEFAULTS_FILENAME


def read_structured_file(path: Path) -> Dict[str, Any]:
    """
    Lê um arquivo YAML ou JSON cujo conteúdo raiz deve ser um dicionário.

    Arquivos vazios são interpretados como `{}`. Também é usado pelo loader
    de snapshots, que compartilha as mesmas regras de formato.

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_config(
    *,
    defaults_path: Optional[Union[str, Path]] = None,
    local_path: Optional[Union[str, Path]] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva do Kedro Builder.

    Política de resolução:
        - Sem `defaults_path`, usa os defaults empacotados
        - `local_path` é opcional; se apontar para um arquivo inexistente,
          é ignorado (overrides locais não são obrigatórios)
        - Quando presente, o local tem prioridade via `deep_merge`

    Args:
        defaults_path: Caminho para o arquivo de configuração base.
        local_path: Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Configuração final resolvida.

    Raises:
        DefaultsNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se o formato não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """

    defaults_file = Path(defaults_path) if defaults_path is not None else default_config_path()
    if not defaults_file.exists():
        raise DefaultsNotFoundError(f"Arquivo de defaults não encontrado: {defaults_file}")

    effective = read_structured_file(defaults_file)

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, read_structured_file(local_file))

    return effective
