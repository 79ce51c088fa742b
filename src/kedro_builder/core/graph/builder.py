# src/kedro_builder/core/graph/builder.py
"""
Construção do grafo de dependências entre nodes.

Para cada dataset, todo node que o produz passa a ter aresta para todo
node que o consome. O resultado é um mapa `node_id → {node_ids sucessores}`.

Decisões arquiteturais:
    - Uma única varredura das conexões, classificando extremos pela união
      tagueada de `core.model.endpoints`
    - Conexões node → node, dataset → dataset ou com ids inexistentes são
      ignoradas silenciosamente (estados intermediários da edição)
    - Função pura: nenhum cache, nenhuma mutação do snapshot

Invariantes:
    - Todo node do snapshot é chave do mapa (isolados → conjunto vazio)
    - Nenhuma chave fora do conjunto de nodes do snapshot
"""

from __future__ import annotations

from typing import Dict, List, Set

from kedro_builder.core.model.endpoints import PRODUCES, connection_direction
from kedro_builder.core.model.entities import Snapshot


DependencyGraph = Dict[str, Set[str]]


def build_dependency_graph(snapshot: Snapshot) -> DependencyGraph:
    """
    Deriva o grafo node → node a partir das conexões node ↔ dataset.

    Args:
        snapshot (Snapshot): Estado capturado do projeto.

    Returns:
        DependencyGraph: mapa de cada node para seus sucessores diretos.
    """
    graph: DependencyGraph = {node.id: set() for node in snapshot.nodes}
    dataset_ids = set(snapshot.dataset_ids)

    producers: Dict[str, List[str]] = {}
    consumers: Dict[str, List[str]] = {}

    for conn in snapshot.connections:
        resolved = connection_direction(conn)
        if resolved is None:
            continue
        direction, node_id, dataset_id = resolved
        if node_id not in graph or dataset_id not in dataset_ids:
            continue
        side = producers if direction == PRODUCES else consumers
        side.setdefault(dataset_id, []).append(node_id)

    for dataset_id, producing in producers.items():
        for source in producing:
            for target in consumers.get(dataset_id, []):
                graph[source].add(target)

    return graph
