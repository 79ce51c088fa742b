# src/kedro_builder/codegen/pipeline.py
"""
Gerador do módulo `pipeline.py`: a fábrica `create_pipeline`.

Cada node vira uma linha `Node(func=…, inputs=…, outputs=…, name=…)`.
Inputs e outputs seguem a convenção de chamada do Kedro:
    - nenhum dataset → `None`
    - um dataset     → `"nome"`
    - vários         → `["a", "b"]`
"""

from __future__ import annotations

from typing import List

from kedro_builder.core.model.entities import Snapshot
from kedro_builder.core.model.snapshot import derive_node_io

from .helpers import format_node_inputs, format_node_outputs
from .nodes import function_name


def generate_pipeline(snapshot: Snapshot) -> str:
    pipeline_name = snapshot.project.pipeline_name
    io = derive_node_io(snapshot)
    names = [function_name(node, i) for i, node in enumerate(snapshot.nodes)]

    lines: List[str] = [
        '"""',
        f"Pipeline definition for {pipeline_name} pipeline.",
        '"""',
        "",
        "from kedro.pipeline import Node, Pipeline",
    ]
    if names:
        lines.append("")
        lines.append(f"from .nodes import {', '.join(names)}")

    lines.extend([
        "",
        "",
        "def create_pipeline(**kwargs) -> Pipeline:",
        f'    """Create the {pipeline_name} pipeline."""',
    ])

    if not names:
        lines.append("    return Pipeline([])")
        return "\n".join(lines) + "\n"

    lines.append("    return Pipeline(")
    lines.append("        [")
    for node, name in zip(snapshot.nodes, names):
        inputs, outputs = io[node.id]
        lines.append(
            f"            Node(func={name}, inputs={format_node_inputs(inputs)}, "
            f'outputs={format_node_outputs(outputs)}, name="{name}_node"),'
        )
    lines.append("        ]")
    lines.append("    )")
    return "\n".join(lines) + "\n"
