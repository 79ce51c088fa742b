# tests/codegen/test_nodes_generator.py
"""
Testes do gerador de `nodes.py`.

Invariantes:
    - Uma função por node, em ordem de declaração
    - Parâmetros derivados das conexões de entrada, tipados com o hint
    - Código do usuário embutido e indentado; placeholder quando ausente
    - Saída byte a byte idêntica para a mesma entrada
"""

import ast

from kedro_builder.codegen.nodes import generate_nodes
from kedro_builder.core.config.settings import GeneratorSettings


def _two_node_snapshot(graph):
    g = graph()
    raw = g.dataset("raw_data")
    params = g.dataset("model_options", type="yaml")
    load = g.node("Load Data", code="df = raw_data.copy()\n\nreturn df")
    clean = g.node("cleanData", description="Drop rows with nulls.")
    mid = g.dataset("clean_input")
    out = g.dataset("clean_data")
    g.connect(raw, load).connect(params, load).connect(load, mid)
    g.connect(mid, clean).connect(clean, out)
    return g.snapshot()


def test_functions_signatures_and_bodies(graph):
    source = generate_nodes(_two_node_snapshot(graph))

    assert "def load_data(raw_data: Any, model_options: Any) -> Any:" in source
    assert "def clean_data(clean_input: Any) -> Any:" in source
    assert "    df = raw_data.copy()\n\n    return df" in source
    assert "raise NotImplementedError(\"Implement the 'clean_data' node\")" in source
    assert "from typing import Any" in source
    assert source.index("def load_data") < source.index("def clean_data")


def test_docstring_lists_inputs_and_outputs(graph):
    source = generate_nodes(_two_node_snapshot(graph))

    assert "        raw_data: Input raw_data" in source
    assert "        model_options: Input model_options" in source
    assert "    Drop rows with nulls." in source
    assert "    Returns:\n        clean_data" in source


def test_generated_module_is_valid_python(graph):
    source = generate_nodes(_two_node_snapshot(graph))
    tree = ast.parse(source)
    names = [n.name for n in tree.body if isinstance(n, ast.FunctionDef)]
    assert names == ["load_data", "clean_data"]


def test_node_without_outputs_returns_none(graph):
    g = graph()
    ds = g.dataset("report")
    g.connect(ds, g.node("Print Report", code="print(report)"))
    source = generate_nodes(g.snapshot())
    assert "def print_report(report: Any) -> None:" in source


def test_indented_user_code_is_dedented_first(graph):
    g = graph()
    g.node("step", code="    x = 1\n    return x")
    source = generate_nodes(g.snapshot())
    assert "\n    x = 1\n    return x\n" in source
    ast.parse(source)


def test_custom_type_hint_and_indent(graph):
    g = graph()
    ds = g.dataset("companies")
    g.connect(ds, g.node("preprocess"))
    settings = GeneratorSettings(type_hint="pd.DataFrame", indent=2)
    source = generate_nodes(g.snapshot(), settings)

    assert "def preprocess(companies: pd.DataFrame) -> None:" in source
    assert "from typing import Any" not in source
    assert '\n  """' in source


def test_output_is_deterministic(graph):
    snapshot = _two_node_snapshot(graph)
    assert generate_nodes(snapshot) == generate_nodes(snapshot)


def test_empty_node_set(graph):
    source = generate_nodes(graph().snapshot())
    ast.parse(source)
    assert "def " not in source
