# src/kedro_builder/core/model/__init__.py
"""
Modelo de entidades do Kedro Builder.

O modelo representa o snapshot somente-leitura produzido pela camada de
estado (canvas e formulários, fora deste pacote):

- **types**     → NodeCategory, DatasetType, DataLayer e o catálogo de formatos
- **entities**  → Node, Dataset, Connection, ProjectMetadata e Snapshot
- **endpoints** → união tagueada NodeEndpoint | DatasetEndpoint
- **snapshot**  → derivação de inputs/outputs e carregamento de documentos

Invariantes:
    - Entidades são imutáveis (frozen dataclasses, coleções em tuplas)
    - A ordem de inserção das coleções é preservada
    - Ids de node e de dataset vivem em namespaces disjuntos (prefixos)
"""
from .endpoints import DatasetEndpoint, Endpoint, NodeEndpoint, UnknownEndpoint, classify_endpoint
from .entities import Connection, Dataset, Node, ProjectMetadata, Snapshot
from .snapshot import derive_node_io, load_snapshot, snapshot_from_dict
from .types import DATA_LAYERS, DataLayer, DatasetType, NodeCategory, node_category

__all__ = [
    "Connection",
    "Dataset",
    "Node",
    "ProjectMetadata",
    "Snapshot",
    "Endpoint",
    "NodeEndpoint",
    "DatasetEndpoint",
    "UnknownEndpoint",
    "classify_endpoint",
    "derive_node_io",
    "load_snapshot",
    "snapshot_from_dict",
    "DATA_LAYERS",
    "DataLayer",
    "DatasetType",
    "NodeCategory",
    "node_category",
]
