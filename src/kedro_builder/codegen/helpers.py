# src/kedro_builder/codegen/helpers.py
"""
Helpers compartilhados pelos geradores.

Normalização de nomes:
    `to_snake_case` converte o nome de um node no nome da função gerada:
        1. remove espaços nas pontas
        2. sequências de espaços → `_`
        3. cada maiúscula → `_` + minúscula
        4. underscores repetidos → um só
        5. underscores iniciais removidos
    A função é total (nunca levanta) e idempotente.

Formatação:
    - parâmetros e docstrings das funções geradas
    - codificação de inputs/outputs de `Node(...)`: `None`, `"x"` ou `["x", "y"]`
    - indentação de corpos de função
    - aspas em valores YAML com caracteres significativos
"""

from __future__ import annotations

import keyword
import re
from typing import Optional, Sequence

from kedro_builder.core.model.types import DATASET_TYPE_SPECS, DataLayer, dataset_type_spec


_WHITESPACE_RE = re.compile(r"\s+")
_UPPER_RE = re.compile(r"[A-Z]")
_UNDERSCORES_RE = re.compile(r"_{2,}")
_IDENTIFIER_RE = re.compile(r"^[a-z_][a-z0-9_]*$")

# Caracteres que alteram o significado de um escalar YAML sem aspas
_YAML_SPECIAL_RE = re.compile(r"[:#\[\]{}|><@`]")


def to_snake_case(value: Optional[str]) -> str:
    """`"Load Data"` → `load_data`; `"CleanData"` → `clean_data`."""
    if not value:
        return ""
    text = _WHITESPACE_RE.sub("_", str(value).strip())
    text = _UPPER_RE.sub(lambda m: "_" + m.group(0).lower(), text)
    text = _UNDERSCORES_RE.sub("_", text)
    return text.lstrip("_").lower()


def is_valid_python_identifier(name: str) -> bool:
    """O nome, depois de normalizado, pode ser usado como identificador Python?"""
    identifier = to_snake_case(name)
    return bool(_IDENTIFIER_RE.match(identifier)) and not keyword.iskeyword(identifier)


def infer_data_layer(name: str) -> str:
    """
    Infere a camada de dados a partir do nome do dataset.

    As regras são avaliadas em ordem; a primeira que casar vence. Sem
    correspondência, o dataset vai para `01_raw`.
    """
    lower = (name or "").lower()

    if "raw" in lower:
        return DataLayer.RAW.value
    if "intermediate" in lower or "interim" in lower:
        return DataLayer.INTERMEDIATE.value
    if "primary" in lower or "master" in lower:
        return DataLayer.PRIMARY.value
    if "feature" in lower:
        return DataLayer.FEATURE.value
    if "model_input" in lower or "model-input" in lower:
        return DataLayer.MODEL_INPUT.value
    if "model" in lower and "input" not in lower:
        return DataLayer.MODELS.value
    if "model_output" in lower or "prediction" in lower:
        return DataLayer.MODEL_OUTPUT.value
    if "report" in lower or "metric" in lower:
        return DataLayer.REPORTING.value

    return DataLayer.RAW.value


def get_file_extension(dataset_type: Optional[str]) -> str:
    """
    Extensão padrão para um formato, aceitando a tag (`csv`) ou a classe
    Kedro (`pandas.CSVDataset`).

    Formatos sem arquivo devolvem `""`; formatos desconhecidos, `.csv`.
    """
    if not dataset_type:
        return ".csv"

    spec = dataset_type_spec(dataset_type)
    if spec is None:
        for candidate in DATASET_TYPE_SPECS.values():
            if candidate.kedro_type == dataset_type:
                spec = candidate
                break

    if spec is None:
        return ".csv"
    return spec.extension or ""


def format_function_params(params: Sequence[str], type_hint: str = "Any") -> str:
    return ", ".join(f"{to_snake_case(p)}: {type_hint}" for p in params)


def format_docstring_params(params: Sequence[str], indent: str = " " * 8) -> str:
    return "\n".join(f"{indent}{to_snake_case(p)}: Input {p}" for p in params)


def _format_names(names: Sequence[str]) -> str:
    if len(names) == 0:
        return "None"
    if len(names) == 1:
        return f'"{names[0]}"'
    return "[" + ", ".join(f'"{n}"' for n in names) + "]"


def format_node_inputs(inputs: Sequence[str]) -> str:
    return _format_names(inputs)


def format_node_outputs(outputs: Sequence[str]) -> str:
    return _format_names(outputs)


def indent_code(code: str, spaces: int = 4) -> str:
    """Indenta cada linha não vazia; linhas em branco ficam como estão."""
    pad = " " * spaces
    return "\n".join(pad + line if line.strip() else line for line in code.split("\n"))


def escape_yaml_string(value: str) -> str:
    """
    Coloca `value` entre aspas duplas quando ele contém caracteres
    significativos para YAML (`: # [ ] { } | > < @` e crase) ou quebra de
    linha; caso contrário devolve o texto sem alteração.
    """
    if _YAML_SPECIAL_RE.search(value) or "\n" in value:
        escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
        return f'"{escaped}"'
    return value
