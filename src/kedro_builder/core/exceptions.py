"""
Kedro Builder — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do Kedro Builder.

Objetivo:
- Permitir que loaders e o portão de export levantem exceções semânticas
- Facilitar o mapeamento determinístico para BuilderErrorPayload
- Evitar ValueError/RuntimeError genéricos nas fronteiras do core

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Validadores e geradores não levantam estas exceções: validadores retornam
  findings, geradores são funções totais.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class BuilderException(Exception):
    """Base class para exceções internas do Kedro Builder.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    decision_required: bool = False

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Entradas
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SnapshotFormatError(BuilderException):
    """Documento de projeto não possui a estrutura esperada."""


@dataclass(frozen=True)
class InvalidProjectMetadata(BuilderException):
    """Nome do projeto, pacote ou pipeline não pode ser usado na geração."""


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GenerationDefect(BuilderException):
    """Um gerador falhou sobre um snapshot validado (defeito de programação)."""
