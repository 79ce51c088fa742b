# tests/core/model/test_endpoints.py
"""
Testes da união tagueada de extremos de conexão.

O teste de prefixo de id vive apenas em `classify_endpoint`; uma conexão
só tem direção quando liga exatamente um node a um dataset.
"""

import pytest

from kedro_builder.core.model.endpoints import (
    CONSUMES,
    PRODUCES,
    DatasetEndpoint,
    NodeEndpoint,
    UnknownEndpoint,
    classify_endpoint,
    connection_direction,
)
from kedro_builder.core.model.entities import Connection


@pytest.mark.parametrize(
    "endpoint_id, kind",
    [
        ("node-1", NodeEndpoint),
        ("dataset-abc", DatasetEndpoint),
        ("conn-1", UnknownEndpoint),
        ("", UnknownEndpoint),
        (None, UnknownEndpoint),
    ],
)
def test_classify_endpoint(endpoint_id, kind):
    assert isinstance(classify_endpoint(endpoint_id), kind)


def test_node_to_dataset_produces():
    conn = Connection(id="c", source="node-1", target="dataset-1")
    assert connection_direction(conn) == (PRODUCES, "node-1", "dataset-1")


def test_dataset_to_node_consumes():
    conn = Connection(id="c", source="dataset-1", target="node-1")
    assert connection_direction(conn) == (CONSUMES, "node-1", "dataset-1")


@pytest.mark.parametrize(
    "source, target",
    [
        ("node-1", "node-2"),
        ("dataset-1", "dataset-2"),
        ("node-1", "ghost"),
    ],
)
def test_meaningless_connections_have_no_direction(source, target):
    assert connection_direction(Connection(id="c", source=source, target=target)) is None
