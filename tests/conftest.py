# tests/conftest.py
"""
Fixtures compartilhados para testes do Kedro Builder.

Este módulo define fixtures reutilizáveis que fornecem:
- um construtor fluente de grafos sintéticos (nodes, datasets, conexões)
- configuração efetiva determinística (defaults empacotados)
- um BuildContext controlado para o step de export

Decisões arquiteturais:
    - Ids seguem os prefixos reais (`node-…`, `dataset-…`)
    - Snapshots são sempre produzidos por `Snapshot.capture`
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Nenhuma fixture contém regra de validação ou geração

Este módulo existe como infraestrutura de teste e não
como validação funcional do builder.
"""

import pytest
from datetime import datetime, timezone


class GraphBuilder:
    """Monta snapshots sintéticos com ids sequenciais e prefixados."""

    def __init__(self, project_name: str = "my-kedro-project", pipeline_name: str = "data_processing"):
        self.project_name = project_name
        self.pipeline_name = pipeline_name
        self.nodes = []
        self.datasets = []
        self.connections = []

    def node(self, name: str, *, code=None, node_id=None, **fields):
        from kedro_builder.core.model.entities import Node

        node = Node(
            id=node_id or f"node-{len(self.nodes) + 1}",
            name=name,
            function_code=code,
            **fields,
        )
        self.nodes.append(node)
        return node.id

    def dataset(self, name: str, *, type="csv", filepath="auto", dataset_id=None, **fields):
        from kedro_builder.core.model.entities import Dataset

        if filepath == "auto":
            filepath = f"data/01_raw/{name}.csv" if type and type != "memory" else None
        dataset = Dataset(
            id=dataset_id or f"dataset-{len(self.datasets) + 1}",
            name=name,
            type=type,
            filepath=filepath,
            **fields,
        )
        self.datasets.append(dataset)
        return dataset.id

    def connect(self, source: str, target: str):
        from kedro_builder.core.model.entities import Connection

        self.connections.append(
            Connection(id=f"conn-{len(self.connections) + 1}", source=source, target=target)
        )
        return self

    def chain(self, *ids: str):
        for source, target in zip(ids, ids[1:]):
            self.connect(source, target)
        return self

    def snapshot(self):
        from kedro_builder.core.model.entities import ProjectMetadata, Snapshot

        project = ProjectMetadata.from_name(self.project_name, pipeline_name=self.pipeline_name)
        return Snapshot.capture(project, self.nodes, self.datasets, self.connections)


@pytest.fixture
def graph():
    """
    Fixture factory que fornece o `GraphBuilder`.

    Uso:
        g = graph()
        n = g.node("load_data", code="return raw_data")
        d = g.dataset("raw_data")
        g.connect(d, n)
        snapshot = g.snapshot()

    Returns:
        type: Classe GraphBuilder, instanciável com nome de projeto/pipeline.
    """
    return GraphBuilder


@pytest.fixture
def linear_snapshot(graph):
    """raw_data → load_data → processed_data, sem warnings de configuração."""
    g = graph()
    raw = g.dataset("raw_data", type="csv")
    node = g.node("load_data", code="return raw_data")
    out = g.dataset("processed_data", type="parquet", filepath="data/02_intermediate/processed_data.parquet")
    g.chain(raw, node, out)
    return g.snapshot()


@pytest.fixture
def effective_config() -> dict:
    """Configuração efetiva a partir dos defaults empacotados."""
    from kedro_builder.core.config.loader import load_config

    return load_config()


@pytest.fixture
def build_ctx(effective_config):
    """
    Fixture que fornece um BuildContext determinístico para testes.

    `build_id` e `created_at` são fixos; a configuração é a efetiva
    (defaults empacotados, sem override local).
    """
    from kedro_builder.core.context import BuildContext

    return BuildContext(
        build_id="build-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config=effective_config,
        meta={"source": "pytest"},
    )
