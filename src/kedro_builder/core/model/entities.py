# src/kedro_builder/core/model/entities.py
"""
Entidades imutáveis do snapshot do Kedro Builder.

Um `Snapshot` é a fotografia do estado no instante em que validação ou
export são solicitados. Validadores e geradores recebem o snapshot como
parâmetro explícito e nunca consultam estado global.

Decisões arquiteturais:
    - Todas as entidades são frozen dataclasses
    - Coleções ordenadas são tuplas (ordem de inserção preservada)
    - `Snapshot.capture` copia profundamente os mapas de configuração, de
      modo que o chamador não consegue alterar um snapshot já capturado
    - `Node.inputs`/`Node.outputs` existem para compatibilidade com o
      documento persistido; a fonte de verdade são as conexões
      (ver `snapshot.derive_node_io`)

Limites explícitos:
    - Não valida nomes nem estrutura (responsabilidade de `core.validation`)
    - Não deriva arestas (responsabilidade de `core.graph`)
"""

from __future__ import annotations

import re
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple

from .types import NodeCategory


NODE_ID_PREFIX = "node-"
DATASET_ID_PREFIX = "dataset-"

DEFAULT_NODE_NAME = "Unnamed Node"
DEFAULT_DATASET_NAME = "Unnamed Dataset"

_PROJECT_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")


@dataclass(frozen=True)
class Node:
    """Passo de processamento; compila para uma função em `nodes.py`."""

    id: str
    name: str
    type: str = NodeCategory.CUSTOM.value
    inputs: Tuple[str, ...] = ()
    outputs: Tuple[str, ...] = ()
    function_code: Optional[str] = None
    description: Optional[str] = None
    parameters: Dict[str, Any] = field(default_factory=dict)
    position: Tuple[float, float] = (0.0, 0.0)


@dataclass(frozen=True)
class Dataset:
    """Artefato de dados; compila para uma entrada do `catalog.yml` (exceto `memory`)."""

    id: str
    name: str
    type: Optional[str] = None
    filepath: Optional[str] = None
    layer: Optional[str] = None
    versioned: bool = False
    catalog_config: Dict[str, Any] = field(default_factory=dict)
    description: Optional[str] = None
    position: Tuple[float, float] = (0.0, 0.0)


@dataclass(frozen=True)
class Connection:
    """Aresta dirigida entre um node e um dataset (em qualquer sentido)."""

    id: str
    source: str
    target: str
    source_handle: str = "output"
    target_handle: str = "input"
    label: Optional[str] = None


def derive_package_name(project_name: str) -> str:
    """`my-kedro-project` → `my_kedro_project`."""
    return project_name.strip().replace("-", "_").lower()


def is_valid_project_name(project_name: str) -> bool:
    """Nome de diretório do projeto: letras, números, hífens e underscores."""
    return bool(project_name and project_name.strip() and _PROJECT_NAME_RE.match(project_name))


@dataclass(frozen=True)
class ProjectMetadata:
    """Metadados do projeto; o export suporta exatamente um pipeline."""

    name: str
    python_package: str
    pipeline_name: str
    description: str = ""

    @classmethod
    def from_name(
        cls,
        name: str,
        *,
        pipeline_name: str = "data_processing",
        description: str = "",
    ) -> "ProjectMetadata":
        return cls(
            name=name,
            python_package=derive_package_name(name),
            pipeline_name=pipeline_name,
            description=description,
        )


@dataclass(frozen=True)
class Snapshot:
    """Visão somente-leitura de um projeto: metadados, nodes, datasets e conexões."""

    project: ProjectMetadata
    nodes: Tuple[Node, ...] = ()
    datasets: Tuple[Dataset, ...] = ()
    connections: Tuple[Connection, ...] = ()

    @classmethod
    def capture(
        cls,
        project: ProjectMetadata,
        nodes: Iterable[Node] = (),
        datasets: Iterable[Dataset] = (),
        connections: Iterable[Connection] = (),
    ) -> "Snapshot":
        """Cria um snapshot independente das coleções (e mapas) do chamador."""
        return cls(
            project=project,
            nodes=tuple(deepcopy(n) for n in nodes),
            datasets=tuple(deepcopy(d) for d in datasets),
            connections=tuple(connections),
        )

    def node_by_id(self, node_id: str) -> Optional[Node]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def dataset_by_id(self, dataset_id: str) -> Optional[Dataset]:
        for dataset in self.datasets:
            if dataset.id == dataset_id:
                return dataset
        return None

    @property
    def node_ids(self) -> Tuple[str, ...]:
        return tuple(n.id for n in self.nodes)

    @property
    def dataset_ids(self) -> Tuple[str, ...]:
        return tuple(d.id for d in self.datasets)
