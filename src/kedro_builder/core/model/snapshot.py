# src/kedro_builder/core/model/snapshot.py
"""
Derivação de inputs/outputs e carregamento de snapshots persistidos.

Responsabilidades do módulo:
    - `derive_node_io`: calcula, a partir das conexões, os datasets de
      entrada e saída de cada node (a única fonte de verdade para isso)
    - `snapshot_from_dict`: converte o documento persistido
      `{project, nodes, datasets, connections}` em um `Snapshot`
    - `load_snapshot`: lê esse documento de um arquivo YAML ou JSON

O documento persistido usa chaves camelCase (`functionCode`,
`pythonPackage`, `catalogConfig`, `sourceHandle`, …); as variantes
snake_case também são aceitas.

Decisões arquiteturais:
    - Conexões para entidades inexistentes são ignoradas na derivação
    - Problemas estruturais do documento levantam `SnapshotFormatError`
    - Campos desconhecidos são ignorados
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple, Union

import yaml

from kedro_builder.core.config.errors import ConfigError
from kedro_builder.core.config.loader import read_structured_file
from kedro_builder.core.exceptions import SnapshotFormatError

from .endpoints import CONSUMES, PRODUCES, connection_direction
from .entities import (
    Connection,
    Dataset,
    Node,
    ProjectMetadata,
    Snapshot,
    derive_package_name,
)
from .types import node_category


NodeIO = Tuple[Tuple[str, ...], Tuple[str, ...]]


def derive_node_io(snapshot: Snapshot) -> Dict[str, NodeIO]:
    """
    Calcula `(inputs, outputs)` de cada node a partir das conexões.

    Ordem: a ordem das conexões no snapshot. Um mesmo dataset ligado duas
    vezes ao mesmo node aparece uma única vez. Todo node do snapshot está
    presente no resultado, mesmo sem conexões.
    """
    dataset_names = {d.id: d.name for d in snapshot.datasets}
    inputs: Dict[str, List[str]] = {n.id: [] for n in snapshot.nodes}
    outputs: Dict[str, List[str]] = {n.id: [] for n in snapshot.nodes}

    for conn in snapshot.connections:
        resolved = connection_direction(conn)
        if resolved is None:
            continue
        direction, node_id, dataset_id = resolved
        if node_id not in inputs or dataset_id not in dataset_names:
            continue

        bucket = outputs[node_id] if direction == PRODUCES else inputs[node_id]
        name = dataset_names[dataset_id]
        if name not in bucket:
            bucket.append(name)

    return {nid: (tuple(inputs[nid]), tuple(outputs[nid])) for nid in inputs}


# ---------------------------------------------------------------------------
# Documento persistido → Snapshot
# ---------------------------------------------------------------------------

def _pick(raw: Mapping[str, Any], snake: str, camel: str, default: Any = None) -> Any:
    if snake in raw:
        return raw[snake]
    return raw.get(camel, default)


def _require_mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SnapshotFormatError(
            message=f"{where} must be a mapping",
            details={"where": where, "received": type(value).__name__},
        )
    return value


def _require_list(raw: Mapping[str, Any], key: str) -> List[Any]:
    value = raw.get(key, [])
    if value is None:
        return []
    if not isinstance(value, list):
        raise SnapshotFormatError(
            message=f"'{key}' must be a list",
            details={"where": key, "received": type(value).__name__},
        )
    return value


def _require_id(raw: Mapping[str, Any], where: str) -> str:
    value = raw.get("id")
    if not isinstance(value, str) or not value.strip():
        raise SnapshotFormatError(
            message=f"{where} without a valid 'id'",
            details={"where": where},
        )
    return value


def _position(raw: Mapping[str, Any]) -> Tuple[float, float]:
    pos = raw.get("position")
    if isinstance(pos, Mapping):
        try:
            return float(pos.get("x", 0.0)), float(pos.get("y", 0.0))
        except (TypeError, ValueError):
            return 0.0, 0.0
    return 0.0, 0.0


def _optional_str(value: Any) -> Union[str, None]:
    if value is None:
        return None
    return str(value)


def _dict(value: Any) -> Dict[str, Any]:
    return dict(value) if isinstance(value, Mapping) else {}


def _names(value: Any) -> Tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(str(v) for v in value)


def _project_from_dict(raw: Mapping[str, Any]) -> ProjectMetadata:
    name = raw.get("name")
    if not isinstance(name, str):
        raise SnapshotFormatError(
            message="project without a 'name'",
            details={"where": "project"},
        )
    package = _pick(raw, "python_package", "pythonPackage")
    return ProjectMetadata(
        name=name,
        python_package=package if isinstance(package, str) and package else derive_package_name(name),
        pipeline_name=str(_pick(raw, "pipeline_name", "pipelineName", "") or ""),
        description=str(raw.get("description") or ""),
    )


def _node_from_dict(raw: Mapping[str, Any]) -> Node:
    return Node(
        id=_require_id(raw, "node"),
        name=str(raw.get("name") or ""),
        type=node_category(raw.get("type")).value,
        inputs=_names(raw.get("inputs")),
        outputs=_names(raw.get("outputs")),
        function_code=_optional_str(_pick(raw, "function_code", "functionCode")),
        description=_optional_str(raw.get("description")),
        parameters=_dict(raw.get("parameters")),
        position=_position(raw),
    )


def _dataset_from_dict(raw: Mapping[str, Any]) -> Dataset:
    return Dataset(
        id=_require_id(raw, "dataset"),
        name=str(raw.get("name") or ""),
        type=_optional_str(raw.get("type")) or None,
        filepath=_optional_str(raw.get("filepath")),
        layer=_optional_str(raw.get("layer")) or None,
        versioned=bool(raw.get("versioned", False)),
        catalog_config=_dict(_pick(raw, "catalog_config", "catalogConfig")),
        description=_optional_str(raw.get("description")),
        position=_position(raw),
    )


def _connection_from_dict(raw: Mapping[str, Any]) -> Connection:
    return Connection(
        id=_require_id(raw, "connection"),
        source=str(raw.get("source") or ""),
        target=str(raw.get("target") or ""),
        source_handle=str(_pick(raw, "source_handle", "sourceHandle", "output") or "output"),
        target_handle=str(_pick(raw, "target_handle", "targetHandle", "input") or "input"),
        label=_optional_str(_pick(raw, "label", "datasetName")),
    )


def snapshot_from_dict(document: Mapping[str, Any]) -> Snapshot:
    """
    Converte o documento persistido de um projeto em `Snapshot`.

    Raises:
        SnapshotFormatError: Se `project` estiver ausente, se coleções não
            forem listas ou se alguma entidade não possuir `id`.
    """
    document = _require_mapping(document, "document")
    if "project" not in document:
        raise SnapshotFormatError(
            message="document without 'project'",
            details={"where": "project"},
        )

    project = _project_from_dict(_require_mapping(document["project"], "project"))
    nodes = [_node_from_dict(_require_mapping(n, "node")) for n in _require_list(document, "nodes")]
    datasets = [_dataset_from_dict(_require_mapping(d, "dataset")) for d in _require_list(document, "datasets")]
    connections = [
        _connection_from_dict(_require_mapping(c, "connection"))
        for c in _require_list(document, "connections")
    ]

    return Snapshot.capture(project, nodes, datasets, connections)


def load_snapshot(path: Union[str, Path]) -> Snapshot:
    """
    Lê um documento de projeto (YAML ou JSON) e devolve o `Snapshot`.

    Raises:
        SnapshotFormatError: Para arquivo ausente, formato não suportado,
            conteúdo malformado ou estrutura inválida.
    """
    source = Path(path)
    try:
        document = read_structured_file(source)
    except (ConfigError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise SnapshotFormatError(
            message=str(e) or "snapshot could not be read",
            details={"source": str(source), "error_type": e.__class__.__name__},
        ) from e
    return snapshot_from_dict(document)
