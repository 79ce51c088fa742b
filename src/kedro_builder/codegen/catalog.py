# src/kedro_builder/codegen/catalog.py
"""
Gerador do `conf/base/catalog.yml`.

Uma entrada por dataset, em ordem de declaração, exceto os datasets em
memória (o Kedro os cria implicitamente).

Regras de cada entrada:
    - `type`: classe do kedro-datasets associada ao formato; tags
      desconhecidas são usadas como estão; sem tipo, `pandas.CSVDataset`
    - `filepath`: o valor informado; se ausente e o formato for baseado em
      arquivo, `data/<camada>/<nome><extensão>`
    - `versioned: true` quando o dataset é versionado
    - chaves extras de `catalog_config`, na ordem em que foram definidas
    - `metadata.kedro-viz.layer`: camada explícita, a do filepath ou a inferida
"""

from __future__ import annotations

from typing import Any, List, Optional

import yaml

from kedro_builder.core.model.entities import Dataset, Snapshot
from kedro_builder.core.model.types import (
    DATA_LAYERS,
    MEMORY_DATASET_TYPE,
    DataLayer,
    DatasetType,
    dataset_type_spec,
)

from .filepath import build_filepath, parse_filepath
from .helpers import escape_yaml_string, infer_data_layer


HEADER = [
    "# Data Catalog",
    "# Generated by Kedro Builder",
    "# https://docs.kedro.org/en/stable/catalog-data/data_catalog/",
]

# Chaves controladas pelo gerador; não podem vir de `catalog_config`
_MANAGED_KEYS = {"type", "filepath", "versioned", "metadata"}


def _reads_back_as_string(text: str) -> bool:
    """`null`, `true`, `0.5`, `- x` e afins não sobrevivem sem aspas."""
    try:
        return yaml.safe_load(text) == text
    except yaml.YAMLError:
        return False


def _scalar(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    text = str(value)
    if text == "":
        return '""'
    escaped = escape_yaml_string(text)
    if escaped == text and not _reads_back_as_string(text):
        return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'
    return escaped


def _key(key: Any) -> str:
    return _scalar(str(key))


def _emit_item(value: Any, depth: int, out: List[str]) -> None:
    pad = "  " * depth
    lead = f"{pad}  - "
    sub: List[str] = []
    if isinstance(value, dict) and value:
        for k, v in value.items():
            _emit(k, v, depth + 2, sub)
    elif isinstance(value, (list, tuple)) and value:
        for item in value:
            _emit_item(item, depth + 1, sub)
    elif isinstance(value, dict):
        out.append(f"{lead}{{}}")
        return
    elif isinstance(value, (list, tuple)):
        out.append(f"{lead}[]")
        return
    else:
        out.append(f"{lead}{_scalar(value)}")
        return
    # A primeira linha do bloco aninhado passa a abrir o item da lista
    sub[0] = lead + sub[0][len(pad) + 4:]
    out.extend(sub)


def _emit(key: Any, value: Any, depth: int, out: List[str]) -> None:
    pad = "  " * depth
    name = _key(key)
    if isinstance(value, dict):
        if not value:
            out.append(f"{pad}{name}: {{}}")
            return
        out.append(f"{pad}{name}:")
        for k, v in value.items():
            _emit(k, v, depth + 1, out)
    elif isinstance(value, (list, tuple)):
        if not value:
            out.append(f"{pad}{name}: []")
            return
        out.append(f"{pad}{name}:")
        for item in value:
            _emit_item(item, depth, out)
    else:
        out.append(f"{pad}{name}: {_scalar(value)}")


def dataset_layer(dataset: Dataset) -> str:
    """Camada do dataset: explícita, a do filepath informado ou a inferida pelo nome."""
    if dataset.layer in DATA_LAYERS:
        return str(dataset.layer)
    filepath = (dataset.filepath or "").strip()
    # Só um caminho com segmento de camada declara a camada; `x.csv` não declara
    if len([p for p in filepath.split("/") if p]) >= 2:
        parsed = parse_filepath(filepath)
        if parsed.data_layer in DATA_LAYERS:
            return parsed.data_layer
    return infer_data_layer(dataset.name)


def kedro_type(dataset: Dataset) -> str:
    tag = dataset.type or DatasetType.CSV.value
    spec = dataset_type_spec(tag)
    return spec.kedro_type if spec is not None else tag


def dataset_filepath(dataset: Dataset) -> Optional[str]:
    """Filepath explícito, ou o padrão para formatos baseados em arquivo; None caso contrário."""
    if dataset.filepath and dataset.filepath.strip():
        return dataset.filepath.strip()

    spec = dataset_type_spec(dataset.type or DatasetType.CSV.value)
    if spec is None or not spec.file_based:
        return None
    name = dataset.name.strip()
    return build_filepath("data", dataset_layer(dataset), f"{name}{spec.extension}")


def _entry(dataset: Dataset) -> List[str]:
    out = [f"{dataset.name.strip()}:"]
    out.append(f"  type: {_scalar(kedro_type(dataset))}")

    filepath = dataset_filepath(dataset)
    if filepath:
        out.append(f"  filepath: {_scalar(filepath)}")
    if dataset.versioned:
        out.append("  versioned: true")

    for key, value in dataset.catalog_config.items():
        if key in _MANAGED_KEYS:
            continue
        _emit(key, value, 1, out)

    out.append("  metadata:")
    out.append("    kedro-viz:")
    out.append(f"      layer: {DataLayer(dataset_layer(dataset)).label}")
    return out


def generate_catalog(snapshot: Snapshot) -> str:
    lines: List[str] = list(HEADER)
    entries = [d for d in snapshot.datasets if d.type != MEMORY_DATASET_TYPE]

    if not entries:
        lines.append("")
        lines.append("# No datasets configured. In-memory datasets need no catalog entry.")
        return "\n".join(lines) + "\n"

    for dataset in entries:
        lines.append("")
        lines.extend(_entry(dataset))
    return "\n".join(lines) + "\n"
