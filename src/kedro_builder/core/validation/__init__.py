# src/kedro_builder/core/validation/__init__.py
"""
Validação estrutural do grafo do Kedro Builder.

- **findings**   → Finding, Severity, ComponentType, ValidationResult
- **rules**      → validadores independentes (nomes, duplicados, órfãos, …)
- **aggregator** → `validate_pipeline`, o portão da geração
"""
from .findings import ComponentType, Finding, Severity, ValidationResult
from .aggregator import collect_findings, validate_pipeline
from .rules import missing_config_fields, project_metadata_problems

__all__ = [
    "ComponentType",
    "Finding",
    "Severity",
    "ValidationResult",
    "collect_findings",
    "validate_pipeline",
    "missing_config_fields",
    "project_metadata_problems",
]
