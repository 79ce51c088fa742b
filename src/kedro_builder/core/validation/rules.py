# src/kedro_builder/core/validation/rules.py
"""
Validadores estruturais do grafo.

Cada validador recebe o snapshot e devolve uma lista de findings. Nenhum
validador altera estado ou levanta exceção sobre snapshots inconsistentes.

Regras de nome:
    - Node: `^[A-Za-z][A-Za-z0-9_ ]*$` sobre o nome sem espaços nas pontas
      (nomes de node viram funções via normalização, por isso aceitam
      espaços e palavras reservadas)
    - Dataset: `^[a-z][a-z0-9_]*$` e nunca uma palavra reservada do Python
      (o nome vai direto para o catálogo e para os parâmetros das funções)
    - Nomes vazios (ou o placeholder de criação) são reportados apenas pela
      regra de nome vazio

Severidades:
    - error   → ciclos, nomes duplicados, nomes inválidos, nomes vazios
    - warning → órfãos, função sem código, dataset sem configuração
"""

from __future__ import annotations

import keyword
import re
from collections import OrderedDict
from typing import Dict, Iterable, List, Sequence, Set, Tuple

from kedro_builder.core.model.entities import (
    DEFAULT_DATASET_NAME,
    DEFAULT_NODE_NAME,
    Dataset,
    Node,
    ProjectMetadata,
    Snapshot,
    derive_package_name,
    is_valid_project_name,
)
from kedro_builder.core.model.types import MEMORY_DATASET_TYPE

from .findings import ComponentType, Finding, error, warning


NODE_NAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_ ]*$")
DATASET_NAME_RE = re.compile(r"^[a-z][a-z0-9_]*$")
PIPELINE_NAME_RE = re.compile(r"^[a-z][a-z0-9_]*$")

RESERVED_WORDS: Tuple[str, ...] = tuple(keyword.kwlist)

NODE_NAME_SUGGESTION = "Use only letters, numbers, spaces, and underscores. Must start with a letter."
DATASET_NAME_SUGGESTION = "Use snake_case: lowercase letters, numbers, and underscores only."
RESERVED_WORD_SUGGESTION = "Python reserved words cannot be used as dataset names. Choose another name."


def _has_name(name: str, placeholder: str) -> bool:
    stripped = (name or "").strip()
    return bool(stripped) and stripped != placeholder


def _duplicate_groups(items: Sequence[Tuple[str, str]]) -> "OrderedDict[str, List[str]]":
    """Agrupa `(id, nome)` por nome normalizado (trim + casefold)."""
    groups: "OrderedDict[str, List[str]]" = OrderedDict()
    for item_id, name in items:
        key = name.strip().lower()
        groups.setdefault(key, []).append(item_id)
    return groups


# ---------------------------------------------------------------------------
# Erros
# ---------------------------------------------------------------------------

def validate_duplicate_names(snapshot: Snapshot) -> List[Finding]:
    """Um erro por membro de cada grupo de nomes repetidos (nodes e datasets separados)."""
    findings: List[Finding] = []

    node_items = [(n.id, n.name) for n in snapshot.nodes if _has_name(n.name, DEFAULT_NODE_NAME)]
    names = {n.id: n.name for n in snapshot.nodes}
    for members in _duplicate_groups(node_items).values():
        if len(members) < 2:
            continue
        for node_id in members:
            findings.append(error(
                f"error-duplicate-node-{node_id}",
                node_id,
                ComponentType.NODE,
                f'Duplicate node name "{names[node_id].strip()}" found in {len(members)} nodes',
                "Rename this node to make it unique",
            ))

    dataset_items = [(d.id, d.name) for d in snapshot.datasets if _has_name(d.name, DEFAULT_DATASET_NAME)]
    names = {d.id: d.name for d in snapshot.datasets}
    for members in _duplicate_groups(dataset_items).values():
        if len(members) < 2:
            continue
        for dataset_id in members:
            findings.append(error(
                f"error-duplicate-dataset-{dataset_id}",
                dataset_id,
                ComponentType.DATASET,
                f'Duplicate dataset name "{names[dataset_id].strip()}" found in {len(members)} datasets',
                "Rename this dataset to make it unique",
            ))

    return findings


def is_valid_node_name(name: str) -> bool:
    return bool(NODE_NAME_RE.match((name or "").strip()))


def is_valid_dataset_name(name: str) -> bool:
    stripped = (name or "").strip()
    return bool(DATASET_NAME_RE.match(stripped)) and stripped not in RESERVED_WORDS


def validate_invalid_names(snapshot: Snapshot) -> List[Finding]:
    findings: List[Finding] = []

    for node in snapshot.nodes:
        if not _has_name(node.name, DEFAULT_NODE_NAME):
            continue
        if not is_valid_node_name(node.name):
            findings.append(error(
                f"error-invalid-node-name-{node.id}",
                node.id,
                ComponentType.NODE,
                f'Invalid node name "{node.name}"',
                NODE_NAME_SUGGESTION,
            ))

    for dataset in snapshot.datasets:
        if not _has_name(dataset.name, DEFAULT_DATASET_NAME):
            continue
        stripped = dataset.name.strip()
        if not DATASET_NAME_RE.match(stripped):
            findings.append(error(
                f"error-invalid-dataset-name-{dataset.id}",
                dataset.id,
                ComponentType.DATASET,
                f'Invalid dataset name "{dataset.name}"',
                DATASET_NAME_SUGGESTION,
            ))
        elif stripped in RESERVED_WORDS:
            findings.append(error(
                f"error-reserved-dataset-name-{dataset.id}",
                dataset.id,
                ComponentType.DATASET,
                f'Dataset name "{stripped}" is a Python reserved word',
                RESERVED_WORD_SUGGESTION,
            ))

    return findings


def validate_empty_names(snapshot: Snapshot) -> List[Finding]:
    findings: List[Finding] = []

    for node in snapshot.nodes:
        if not _has_name(node.name, DEFAULT_NODE_NAME):
            findings.append(error(
                f"error-empty-node-name-{node.id}",
                node.id,
                ComponentType.NODE,
                "Node has no name",
                "Give this node a descriptive name",
            ))

    for dataset in snapshot.datasets:
        if not _has_name(dataset.name, DEFAULT_DATASET_NAME):
            findings.append(error(
                f"error-empty-dataset-name-{dataset.id}",
                dataset.id,
                ComponentType.DATASET,
                "Dataset has no name",
                "Give this dataset a descriptive name",
            ))

    return findings


# ---------------------------------------------------------------------------
# Warnings
# ---------------------------------------------------------------------------

def _connected_ids(snapshot: Snapshot) -> Set[str]:
    ids: Set[str] = set()
    for conn in snapshot.connections:
        ids.add(conn.source)
        ids.add(conn.target)
    return ids


def _display(name: str, placeholder: str) -> str:
    return name if (name or "").strip() else placeholder


def validate_orphan_nodes(snapshot: Snapshot) -> List[Finding]:
    connected = _connected_ids(snapshot)
    return [
        warning(
            f"warning-orphan-node-{node.id}",
            node.id,
            ComponentType.NODE,
            f'Node "{_display(node.name, DEFAULT_NODE_NAME)}" is not connected to any datasets',
            "Connect this node or remove it from the pipeline",
        )
        for node in snapshot.nodes
        if node.id not in connected
    ]


def validate_orphan_datasets(snapshot: Snapshot) -> List[Finding]:
    connected = _connected_ids(snapshot)
    return [
        warning(
            f"warning-orphan-dataset-{dataset.id}",
            dataset.id,
            ComponentType.DATASET,
            f'Dataset "{_display(dataset.name, DEFAULT_DATASET_NAME)}" is not connected to any nodes',
            "Connect this dataset or remove it from the pipeline",
        )
        for dataset in snapshot.datasets
        if dataset.id not in connected
    ]


def validate_missing_code(snapshot: Snapshot) -> List[Finding]:
    return [
        warning(
            f"warning-no-code-{node.id}",
            node.id,
            ComponentType.NODE,
            f'Node "{_display(node.name, DEFAULT_NODE_NAME)}" has no function code',
            "Add Python code for this node or it will need to be implemented later",
        )
        for node in snapshot.nodes
        if not (node.function_code or "").strip()
    ]


def missing_config_fields(dataset: Dataset) -> List[str]:
    """Campos de configuração ausentes (`type`, `filepath`) de um dataset."""
    missing: List[str] = []
    if not dataset.type:
        missing.append("type")
    if dataset.type != MEMORY_DATASET_TYPE and not (dataset.filepath or "").strip():
        missing.append("filepath")
    return missing


def validate_missing_config(snapshot: Snapshot) -> List[Finding]:
    findings: List[Finding] = []
    for dataset in snapshot.datasets:
        missing = missing_config_fields(dataset)
        if missing:
            findings.append(warning(
                f"warning-missing-config-{dataset.id}",
                dataset.id,
                ComponentType.DATASET,
                f'Dataset "{_display(dataset.name, DEFAULT_DATASET_NAME)}" is missing: {", ".join(missing)}',
                "Configure this dataset in the config panel",
            ))
    return findings


# ---------------------------------------------------------------------------
# Metadados do projeto
# ---------------------------------------------------------------------------

def project_metadata_problems(project: ProjectMetadata, pipeline_name: str) -> List[Dict[str, str]]:
    """
    Problemas que impedem o uso dos metadados na geração.

    Returns:
        Lista de `{"field", "value", "reason"}`; vazia quando tudo é utilizável.
    """
    problems: List[Dict[str, str]] = []

    if not is_valid_project_name(project.name):
        problems.append({
            "field": "name",
            "value": project.name,
            "reason": "must be non-empty and contain only letters, numbers, hyphens and underscores",
        })

    package = project.python_package or derive_package_name(project.name)
    if not package.isidentifier() or keyword.iskeyword(package):
        problems.append({
            "field": "python_package",
            "value": package,
            "reason": "must be a valid Python identifier and not a reserved word",
        })

    if not PIPELINE_NAME_RE.match(pipeline_name) or keyword.iskeyword(pipeline_name):
        problems.append({
            "field": "pipeline_name",
            "value": pipeline_name,
            "reason": "must be lower snake_case and not a reserved word",
        })

    return problems


STRUCTURAL_RULES = (
    validate_duplicate_names,
    validate_invalid_names,
    validate_empty_names,
    validate_orphan_nodes,
    validate_orphan_datasets,
    validate_missing_code,
    validate_missing_config,
)


def run_rules(snapshot: Snapshot, rules: Iterable = STRUCTURAL_RULES) -> List[Finding]:
    findings: List[Finding] = []
    for rule in rules:
        findings.extend(rule(snapshot))
    return findings
