# src/kedro_builder/core/config/settings.py
"""
Configuração tipada consumida pelos geradores.

Geradores são funções puras e não leem arquivos: recebem um
`GeneratorSettings` explícito. Este módulo converte o dicionário resolvido
por `load_config` nesse objeto imutável.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .errors import ConfigError
from .loader import load_config


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = config.get(name, {})
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"Seção '{name}' deve ser um dict, recebido: {type(value).__name__}")
    return value


def _require_str(section: Dict[str, Any], key: str, where: str) -> str:
    value = section.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"'{where}.{key}' deve ser uma string não vazia")
    return value


# Espelha `project.dependencies` do defaults.yaml
DEFAULT_DEPENDENCIES: Tuple[str, ...] = (
    "ipython>=8.10",
    "jupyterlab>=3.0",
    "notebook",
    "kedro[jupyter]~=1.0.0",
    "kedro-datasets[pandas-csvdataset, pandas-exceldataset, pandas-parquetdataset]>=3.0",
    "kedro-viz>=6.7.0",
)


@dataclass(frozen=True)
class GeneratorSettings:
    """Opções de geração independentes do grafo (versões, dependências, estilo)."""

    kedro_version: str = "1.0.0"
    python_requires: str = ">=3.9"
    project_version: str = "0.1"
    dependencies: Tuple[str, ...] = DEFAULT_DEPENDENCIES
    default_pipeline_name: str = "data_processing"
    type_hint: str = "Any"
    indent: int = 4

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "GeneratorSettings":
        """
        Constrói as settings a partir da configuração efetiva.

        Raises:
            ConfigError: Se alguma seção ou chave obrigatória tiver tipo inválido.
        """
        kedro = _section(config, "kedro")
        project = _section(config, "project")
        pipeline = _section(config, "pipeline")
        codegen = _section(config, "codegen")

        deps = project.get("dependencies", [])
        if not isinstance(deps, list) or not all(isinstance(d, str) for d in deps):
            raise ConfigError("'project.dependencies' deve ser uma lista de strings")

        indent = codegen.get("indent", 4)
        if not isinstance(indent, int) or isinstance(indent, bool) or indent < 1:
            raise ConfigError("'codegen.indent' deve ser um inteiro positivo")

        return cls(
            kedro_version=_require_str(kedro, "version", "kedro"),
            python_requires=_require_str(project, "python_requires", "project"),
            project_version=str(project.get("version", "0.1")),
            dependencies=tuple(deps),
            default_pipeline_name=_require_str(pipeline, "default_name", "pipeline"),
            type_hint=_require_str(codegen, "type_hint", "codegen"),
            indent=indent,
        )

    @classmethod
    def load(cls, *, local_path: Optional[str] = None) -> "GeneratorSettings":
        """Atalho: defaults empacotados + override local opcional."""
        return cls.from_config(load_config(local_path=local_path))
