"""
Kedro Builder — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do Kedro Builder.
Erros que chegam ao usuário (export bloqueado, falha de geração, metadados
inválidos, snapshot malformado) são artefatos de domínio e devem ser:

- explícitos
- serializáveis
- acionáveis

Findings de validação (`core.validation.findings`) não passam por aqui:
eles descrevem o grafo. Este módulo descreve por que um export não ocorreu.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BuilderErrorPayload:
    """
    Payload canônico de erro do Kedro Builder.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao usuário (onde corrigir)
    - decision_required: indica que o export aguarda uma ação explícita do usuário
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    decision_required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Validação / portão de export
EXPORT_VALIDATION_BLOCKED = "EXPORT_VALIDATION_BLOCKED"

# Geração
EXPORT_GENERATION_ERROR = "EXPORT_GENERATION_ERROR"
EXPORT_CONFIGURATION_ERROR = "EXPORT_CONFIGURATION_ERROR"

# Entradas
PROJECT_METADATA_INVALID = "PROJECT_METADATA_INVALID"
SNAPSHOT_FORMAT_INVALID = "SNAPSHOT_FORMAT_INVALID"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def export_validation_blocked(
    *,
    errors: List[Dict[str, Any]],
    warnings_count: int = 0,
    hint: str = "Corrija os erros bloqueantes listados no painel de validação antes de exportar.",
) -> BuilderErrorPayload:
    return BuilderErrorPayload(
        type=EXPORT_VALIDATION_BLOCKED,
        message="Pipeline has blocking validation errors",
        details={
            "errors": errors,
            "errors_count": len(errors),
            "warnings_count": warnings_count,
        },
        hint=hint,
        decision_required=True,
    )


def export_generation_error(
    *,
    exc_type: Optional[str] = None,
    exc_message: Optional[str] = None,
    generator: Optional[str] = None,
    hint: str = "Falha interna na geração do projeto. Nenhum arquivo parcial foi produzido.",
) -> BuilderErrorPayload:
    return BuilderErrorPayload(
        type=EXPORT_GENERATION_ERROR,
        message="Failed to generate project",
        details={
            "generator": generator,
            "exc_type": exc_type,
            "exc_message": exc_message,
        },
        hint=hint,
        decision_required=False,
    )


def project_metadata_invalid(
    *,
    field: str,
    value: Any,
    reason: str,
    hint: str = "Use apenas letras, números, hífens e underscores no nome do projeto.",
) -> BuilderErrorPayload:
    return BuilderErrorPayload(
        type=PROJECT_METADATA_INVALID,
        message=f"Invalid project {field}",
        details={
            "field": field,
            "value": value,
            "reason": reason,
        },
        hint=hint,
        decision_required=True,
    )


def snapshot_format_invalid(
    *,
    reason: str,
    source: Optional[str] = None,
    hint: str = "O documento do projeto deve conter 'project', 'nodes', 'datasets' e 'connections'.",
) -> BuilderErrorPayload:
    return BuilderErrorPayload(
        type=SNAPSHOT_FORMAT_INVALID,
        message="Project snapshot could not be read",
        details={
            "reason": reason,
            "source": source,
        },
        hint=hint,
        decision_required=False,
    )


def export_configuration_error(
    *,
    reason: str,
    hint: str = "Revise o arquivo de configuração local; as chaves devem seguir o defaults.yaml.",
) -> BuilderErrorPayload:
    return BuilderErrorPayload(
        type=EXPORT_CONFIGURATION_ERROR,
        message="Builder configuration is invalid",
        details={"reason": reason},
        hint=hint,
        decision_required=True,
    )
