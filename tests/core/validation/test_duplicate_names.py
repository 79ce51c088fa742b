# tests/core/validation/test_duplicate_names.py
"""
Testes da detecção de nomes duplicados.

Invariantes:
    - Agrupamento insensível a maiúsculas e a espaços nas pontas
    - Nodes e datasets são agrupados separadamente
    - Um erro por membro de cada grupo, citando o tamanho do grupo
"""

from hypothesis import given
from hypothesis import strategies as st

from kedro_builder.core.validation.rules import validate_duplicate_names


def test_case_and_whitespace_variants_form_one_group(graph):
    g = graph()
    ids = [g.node("Node"), g.node("node"), g.node(" node ")]
    findings = validate_duplicate_names(g.snapshot())

    assert [f.component_id for f in findings] == ids
    assert all("found in 3 nodes" in f.message for f in findings)
    assert all(f.suggestion == "Rename this node to make it unique" for f in findings)


def test_node_and_dataset_may_share_a_name(graph):
    g = graph()
    g.node("customers")
    g.dataset("customers")
    assert validate_duplicate_names(g.snapshot()) == []


def test_duplicate_datasets(graph):
    g = graph()
    a = g.dataset("raw_data")
    b = g.dataset("raw_data")
    g.dataset("other")
    findings = validate_duplicate_names(g.snapshot())

    assert [f.id for f in findings] == [f"error-duplicate-dataset-{a}", f"error-duplicate-dataset-{b}"]
    assert findings[0].message == 'Duplicate dataset name "raw_data" found in 2 datasets'


def test_empty_names_are_not_duplicates(graph):
    g = graph()
    g.node("")
    g.node("")
    g.node("Unnamed Node")
    assert validate_duplicate_names(g.snapshot()) == []


@given(
    st.text(alphabet="abcXYZ_", min_size=1, max_size=8),
    st.text(alphabet=" \t", max_size=3),
    st.text(alphabet=" \t", max_size=3),
)
def test_grouping_ignores_case_and_padding(name, left, right):
    from kedro_builder.core.model.entities import Node, ProjectMetadata, Snapshot

    nodes = [
        Node(id="node-1", name=name),
        Node(id="node-2", name=f"{left}{name.upper()}{right}"),
        Node(id="node-3", name=name.lower()),
    ]
    snapshot = Snapshot.capture(ProjectMetadata.from_name("p"), nodes)
    findings = validate_duplicate_names(snapshot)
    assert len(findings) == 3
