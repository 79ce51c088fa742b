# src/kedro_builder/core/validation/aggregator.py
"""
Agregador da validação: o único portão consultado antes da geração.

Ordem fixa de execução:
    1. ciclos
    2. nomes duplicados
    3. nomes inválidos
    4. nomes vazios
    5. nodes órfãos
    6. datasets órfãos
    7. nodes sem código
    8. datasets sem configuração

Invariantes:
    - Idempotente e sem efeitos colaterais (pode rodar a cada edição)
    - `is_valid` ⇔ nenhum finding com severidade `error`
"""

from __future__ import annotations

from typing import List

from kedro_builder.core.graph.cycles import detect_cycles
from kedro_builder.core.model.entities import Snapshot

from .findings import Finding, ValidationResult
from .rules import run_rules


def collect_findings(snapshot: Snapshot) -> List[Finding]:
    cycle_findings, _ = detect_cycles(snapshot)
    return cycle_findings + run_rules(snapshot)


def validate_pipeline(snapshot: Snapshot) -> ValidationResult:
    """Valida o snapshot inteiro e particiona os findings por severidade."""
    return ValidationResult.from_findings(collect_findings(snapshot))
