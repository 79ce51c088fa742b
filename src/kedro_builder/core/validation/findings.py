# src/kedro_builder/core/validation/findings.py
"""
Tipos de resultado da validação estrutural.

Um `Finding` descreve um problema em um componente do grafo. Findings com
severidade `error` bloqueiam a geração; `warning` apenas informam.

Invariantes:
    - `ValidationResult.is_valid` é verdadeiro se e somente se não há erros
    - A ordem dos findings é a ordem de execução dos validadores
    - `to_dict` produz a forma consumida pela UI:
      `{"errors": [...], "warnings": [...], "isValid": bool}`
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class ComponentType(str, Enum):
    """Tipo do componente apontado por um finding (usado para foco na UI)."""
    NODE = "node"
    DATASET = "dataset"
    CONNECTION = "connection"
    PIPELINE = "pipeline"


@dataclass(frozen=True)
class Finding:
    id: str
    severity: Severity
    component_id: str
    component_type: ComponentType
    message: str
    suggestion: Optional[str] = None

    @property
    def is_blocking(self) -> bool:
        return self.severity == Severity.ERROR

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "severity": self.severity.value,
            "componentId": self.component_id,
            "componentType": self.component_type.value,
            "message": self.message,
        }
        if self.suggestion is not None:
            data["suggestion"] = self.suggestion
        return data


def error(id: str, component_id: str, component_type: ComponentType, message: str,
          suggestion: Optional[str] = None) -> Finding:
    return Finding(id, Severity.ERROR, component_id, component_type, message, suggestion)


def warning(id: str, component_id: str, component_type: ComponentType, message: str,
            suggestion: Optional[str] = None) -> Finding:
    return Finding(id, Severity.WARNING, component_id, component_type, message, suggestion)


@dataclass(frozen=True)
class ValidationResult:
    """Resultado agregado: erros, warnings e o portão `is_valid`."""

    errors: Tuple[Finding, ...] = field(default_factory=tuple)
    warnings: Tuple[Finding, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @classmethod
    def from_findings(cls, findings: Iterable[Finding]) -> "ValidationResult":
        """Particiona findings por severidade preservando a ordem."""
        errors: List[Finding] = []
        warnings: List[Finding] = []
        for f in findings:
            (errors if f.is_blocking else warnings).append(f)
        return cls(errors=tuple(errors), warnings=tuple(warnings))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "errors": [f.to_dict() for f in self.errors],
            "warnings": [f.to_dict() for f in self.warnings],
            "isValid": self.is_valid,
        }
