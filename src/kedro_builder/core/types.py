# src/kedro_builder/core/types.py
"""
Tipos canônicos de resultado do export do Kedro Builder.

Componentes principais:
    - ExportStatus → enum de estados finais (SUCCESS, BLOCKED, FAILED)
    - ExportResult → estrutura imutável de resultado de um export

Princípios fundamentais:
    - Tipos são estáveis e serializáveis
    - Nenhuma lógica de geração vive neste módulo

Invariantes:
    - Enums possuem valores textuais canônicos
    - ExportResult é imutável; `files` só é preenchido em SUCCESS
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class ExportStatus(str, Enum):
    """
    Estados finais possíveis de um export.

    Estados definidos:
        - SUCCESS: mapa de arquivos gerado por completo
        - BLOCKED: validação reportou erros bloqueantes; geradores não rodaram
        - FAILED: metadados inválidos ou falha interna de geração

    Invariantes:
        - O valor textual do enum é estável e canônico
        - Nenhum estado representa um export parcial
    """
    SUCCESS = "success"
    BLOCKED = "blocked"
    FAILED = "failed"


@dataclass(frozen=True)
class ExportResult:
    """
    Resultado imutável de um export.

    Campos:
        - step_id: identificador do step que produziu o resultado
        - status: estado final do export
        - summary: resumo textual
        - files: mapa path → conteúdo (vazio quando não SUCCESS)
        - warnings: mensagens de findings não bloqueantes
        - metrics: contagens (nodes, datasets, arquivos, erros, warnings)
        - payload: dados adicionais (ex.: `error` serializado)
    """
    step_id: str
    status: ExportStatus
    summary: str
    files: Dict[str, str] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)
    payload: Dict[str, Any] = field(default_factory=dict)
