# src/kedro_builder/core/model/endpoints.py
"""
União tagueada dos extremos de uma conexão.

A camada de estado distingue nodes e datasets apenas pelo prefixo do id
(`node-…`, `dataset-…`). Esse teste de prefixo vive exclusivamente aqui:
o restante do core recebe um `NodeEndpoint`, um `DatasetEndpoint` ou um
`UnknownEndpoint` e decide por tipo.

Uma conexão só é significativa quando liga exatamente um node a um
dataset; `connection_direction` devolve a direção nesse caso e None em
qualquer outro (node → node, dataset → dataset, ids desconhecidos).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .entities import Connection, DATASET_ID_PREFIX, NODE_ID_PREFIX


@dataclass(frozen=True)
class NodeEndpoint:
    id: str


@dataclass(frozen=True)
class DatasetEndpoint:
    id: str


@dataclass(frozen=True)
class UnknownEndpoint:
    id: str


Endpoint = Union[NodeEndpoint, DatasetEndpoint, UnknownEndpoint]


def classify_endpoint(endpoint_id: object) -> Endpoint:
    """Classifica um id pelo prefixo; nunca levanta exceção."""
    if isinstance(endpoint_id, str):
        if endpoint_id.startswith(NODE_ID_PREFIX):
            return NodeEndpoint(endpoint_id)
        if endpoint_id.startswith(DATASET_ID_PREFIX):
            return DatasetEndpoint(endpoint_id)
        return UnknownEndpoint(endpoint_id)
    return UnknownEndpoint(str(endpoint_id))


# Direções possíveis de uma conexão válida
PRODUCES = "produces"   # node → dataset
CONSUMES = "consumes"   # dataset → node


def connection_direction(conn: Connection) -> Optional[Tuple[str, str, str]]:
    """
    Resolve uma conexão para `(direção, node_id, dataset_id)`.

    Returns:
        `(PRODUCES, node, dataset)` para node → dataset,
        `(CONSUMES, node, dataset)` para dataset → node,
        None para qualquer conexão que não ligue um node a um dataset.
    """
    source = classify_endpoint(conn.source)
    target = classify_endpoint(conn.target)

    if isinstance(source, NodeEndpoint) and isinstance(target, DatasetEndpoint):
        return PRODUCES, source.id, target.id
    if isinstance(source, DatasetEndpoint) and isinstance(target, NodeEndpoint):
        return CONSUMES, target.id, source.id
    return None
