# src/kedro_builder/codegen/nodes.py
"""
Gerador do módulo `nodes.py` de um pipeline.

Para cada node, em ordem de declaração, emite uma função:
    - nome: `to_snake_case(node.name)`
    - parâmetros: datasets de entrada, tipados com o hint genérico
    - docstring: descrição (ou título padrão), Args e Returns
    - corpo: o código do usuário, indentado, ou um placeholder que levanta
      `NotImplementedError`

Inputs e outputs vêm das conexões (`derive_node_io`), nunca dos campos
`Node.inputs`/`Node.outputs`.
"""

from __future__ import annotations

import textwrap
from typing import List, Optional

from kedro_builder.core.config.settings import GeneratorSettings
from kedro_builder.core.model.entities import Node, Snapshot
from kedro_builder.core.model.snapshot import derive_node_io

from .helpers import (
    format_docstring_params,
    format_function_params,
    indent_code,
    to_snake_case,
)


def function_name(node: Node, index: int) -> str:
    """Nome da função gerada; nodes sem nome recebem `node_<n>`."""
    return to_snake_case(node.name) or f"node_{index + 1}"


def _docstring(node: Node, inputs, outputs, pad: str) -> List[str]:
    title = (node.description or "").strip() or f"{node.name.strip()} node."
    title = title.replace('"""', '\\"\\"\\"')

    lines = [f'{pad}"""']
    lines.extend(f"{pad}{line}".rstrip() for line in title.split("\n"))
    if inputs:
        lines.append("")
        lines.append(f"{pad}Args:")
        lines.append(format_docstring_params(inputs, indent=pad * 2))
    if outputs:
        lines.append("")
        lines.append(f"{pad}Returns:")
        lines.extend(f"{pad * 2}{name}" for name in outputs)
    lines.append(f'{pad}"""')
    return lines


def _body(node: Node, name: str, indent: int) -> str:
    code = (node.function_code or "").strip("\n")
    if code.strip():
        return indent_code(textwrap.dedent(code).rstrip(), indent)
    return indent_code(f'raise NotImplementedError("Implement the \'{name}\' node")', indent)


def generate_nodes(snapshot: Snapshot, settings: Optional[GeneratorSettings] = None) -> str:
    settings = settings or GeneratorSettings()
    pad = " " * settings.indent
    pipeline_name = snapshot.project.pipeline_name
    io = derive_node_io(snapshot)

    lines: List[str] = [
        '"""',
        f"This is a boilerplate pipeline '{pipeline_name}'",
        "generated using Kedro Builder",
        '"""',
        "",
    ]
    if settings.type_hint == "Any" or settings.type_hint.startswith("Any["):
        lines.append("from typing import Any")
    lines.append("")

    for index, node in enumerate(snapshot.nodes):
        inputs, outputs = io[node.id]
        name = function_name(node, index)
        returns = settings.type_hint if outputs else "None"

        lines.append("")
        lines.append(f"def {name}({format_function_params(inputs, settings.type_hint)}) -> {returns}:")
        lines.extend(_docstring(node, inputs, outputs, pad))
        lines.append(_body(node, name, settings.indent))
        lines.append("")

    return "\n".join(lines).rstrip("\n") + "\n"
