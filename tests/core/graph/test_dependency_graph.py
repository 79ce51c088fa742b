# tests/core/graph/test_dependency_graph.py
"""
Testes do grafo implícito node → node.

Invariantes:
    - Todo node é chave do mapa, inclusive os isolados
    - Arestas = produtores × consumidores de cada dataset
    - Conexões malformadas são ignoradas sem exceção
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from kedro_builder.core.graph.builder import build_dependency_graph
from kedro_builder.core.model.entities import Connection, Node, ProjectMetadata, Snapshot


def test_cross_product_over_shared_dataset(graph):
    g = graph()
    a = g.node("a")
    b = g.node("b")
    c = g.node("c")
    d = g.node("d")
    shared = g.dataset("shared")
    g.connect(a, shared).connect(b, shared)
    g.connect(shared, c).connect(shared, d)

    assert build_dependency_graph(g.snapshot()) == {
        a: {c, d},
        b: {c, d},
        c: set(),
        d: set(),
    }


def test_malformed_connections_are_skipped(graph):
    g = graph()
    a = g.node("a")
    b = g.node("b")
    ds = g.dataset("ds")
    g.connect(a, b)                 # node → node
    g.connect(ds, "dataset-404")    # dataset → dataset
    g.connect("node-404", ds)       # node apagado
    g.connect(ds, b)

    assert build_dependency_graph(g.snapshot()) == {a: set(), b: set()}


@settings(max_examples=50)
@given(st.integers(min_value=0, max_value=30))
def test_no_connections_means_empty_adjacency(count):
    """Sem conexões, todo node mapeia para o conjunto vazio."""
    nodes = [Node(id=f"node-{i}", name=f"n{i}") for i in range(count)]
    snapshot = Snapshot.capture(ProjectMetadata.from_name("p"), nodes, [], [])

    out = build_dependency_graph(snapshot)
    assert set(out) == {n.id for n in nodes}
    assert all(v == set() for v in out.values())


def test_self_loop_through_dataset(graph):
    g = graph()
    a = g.node("a")
    ds = g.dataset("ds")
    g.chain(a, ds, a)
    assert build_dependency_graph(g.snapshot()) == {a: {a}}
