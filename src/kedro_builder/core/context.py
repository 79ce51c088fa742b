# src/kedro_builder/core/context.py
"""
Contexto de um export do Kedro Builder.

Este módulo define o `BuildContext`, a estrutura que acompanha uma
execução de export: configuração efetiva, artefatos produzidos, log
estruturado de eventos e warnings não fatais.

Princípios fundamentais:
    - Isolamento por export (cada export possui seu próprio contexto)
    - Nenhum logger global: eventos são registros estruturados explícitos
    - Geradores não recebem o contexto; apenas o step de export o utiliza

Invariantes:
    - Logs sempre incluem `build_id` e `step_id`
    - Warnings são agrupados por `step_id`
    - Timestamps são sempre UTC
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class BuildContext:
    """
    Contexto de execução de um export.

    O BuildContext consolida:
        - identidade do export (build_id, created_at)
        - configuração resolvida (defaults + local)
        - artefatos produzidos (ex.: o mapa de arquivos)
        - eventos de log estruturados
        - warnings associados a steps específicos

    Limites explícitos:
        - Não executa geradores
        - Não persiste dados automaticamente
    """
    build_id: str
    created_at: datetime
    config: Dict[str, Any]
    meta: Dict[str, Any] = field(default_factory=dict)

    _artifacts: Dict[str, Any] = field(default_factory=dict, init=False, repr=False)
    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Artifact store
    # -----------------------------
    def set_artifact(self, key: str, value: Any) -> None:
        self._artifacts[key] = value

    def has_artifact(self, key: str) -> bool:
        return key in self._artifacts

    def get_artifact(self, key: str) -> Any:
        try:
            return self._artifacts[key]
        except KeyError:
            raise KeyError(f"Artefato não registrado neste export: '{key}'") from None

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        # Campos extras não sobrescrevem a identidade do evento
        event = {
            **extra,
            "build_id": self.build_id,
            "step_id": step_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        self.events.append(event)

    def add_warning(self, *, step_id: str, message: str) -> None:
        self.warnings.setdefault(step_id, []).append(message)
