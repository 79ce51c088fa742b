# src/kedro_builder/export/step.py
"""
Step canônico: export.kedro_project (v1)

Portão entre o grafo editado e o projeto gerado.

Fluxo:
    1. resolve as settings a partir de `ctx.config`
    2. resolve e verifica os metadados do projeto
    3. roda `validate_pipeline`; warnings são registrados no contexto
    4. com erros bloqueantes, recusa a geração (BLOCKED)
    5. monta o mapa de arquivos e o publica como artefato `export.files`

Invariantes:
    - Nenhum resultado carrega um mapa parcial: `files` só é preenchido em SUCCESS
    - Toda falha vira um BuilderErrorPayload serializável em `payload["error"]`
    - Warnings nunca bloqueiam
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from kedro_builder.core.config.errors import ConfigError
from kedro_builder.core.config.hashing import compute_config_hash
from kedro_builder.core.config.loader import load_config
from kedro_builder.core.config.settings import GeneratorSettings
from kedro_builder.core.context import BuildContext
from kedro_builder.core.errors import (
    BuilderErrorPayload,
    export_configuration_error,
    export_generation_error,
    export_validation_blocked,
    project_metadata_invalid,
    snapshot_format_invalid,
)
from kedro_builder.core.exceptions import GenerationDefect, InvalidProjectMetadata, SnapshotFormatError
from kedro_builder.core.model.entities import Snapshot
from kedro_builder.core.model.snapshot import load_snapshot
from kedro_builder.core.types import ExportResult, ExportStatus
from kedro_builder.core.validation.aggregator import validate_pipeline

from .assembler import assemble_project, resolve_project


FILES_ARTIFACT = "export.files"


class ExportProjectStep:
    """export.kedro_project — valida o snapshot e gera o mapa de arquivos do projeto."""

    id = "export.kedro_project"

    def __init__(self, snapshot: Snapshot):
        self.snapshot = snapshot

    def _failed(self, ctx: BuildContext, error: BuilderErrorPayload, summary: str,
                metrics: Optional[Dict[str, Any]] = None, warnings: Optional[List[str]] = None,
                status: ExportStatus = ExportStatus.FAILED) -> ExportResult:
        ctx.log(step_id=self.id, level="error", message=summary, error_type=error.type)
        return ExportResult(
            step_id=self.id,
            status=status,
            summary=summary,
            warnings=list(warnings or []),
            metrics=dict(metrics or {}),
            payload={"error": error.to_dict()},
        )

    def run(self, ctx: BuildContext) -> ExportResult:
        snapshot = self.snapshot
        config_hash = compute_config_hash(ctx.config or {})
        ctx.log(
            step_id=self.id,
            level="info",
            message="export started",
            project=snapshot.project.name,
            nodes=len(snapshot.nodes),
            datasets=len(snapshot.datasets),
            connections=len(snapshot.connections),
            config_hash=config_hash,
        )

        try:
            settings = GeneratorSettings.from_config(ctx.config or {})
        except ConfigError as e:
            return self._failed(ctx, export_configuration_error(reason=str(e)), "export failed (configuration)")

        try:
            project = resolve_project(snapshot.project, settings)
        except InvalidProjectMetadata as e:
            problems = list(e.details.get("problems", []))
            first = problems[0] if problems else {"field": "name", "value": snapshot.project.name, "reason": e.message}
            error = project_metadata_invalid(field=first["field"], value=first["value"], reason=first["reason"])
            return self._failed(ctx, error, "export failed (invalid project metadata)",
                                metrics={"problems": len(problems)})

        validation = validate_pipeline(snapshot)
        warnings = [f.message for f in validation.warnings]
        for message in warnings:
            ctx.add_warning(step_id=self.id, message=message)

        metrics: Dict[str, Any] = {
            "nodes": len(snapshot.nodes),
            "datasets": len(snapshot.datasets),
            "connections": len(snapshot.connections),
            "errors": len(validation.errors),
            "warnings": len(validation.warnings),
        }
        ctx.log(step_id=self.id, level="info", message="validation finished", **metrics)

        if not validation.is_valid:
            error = export_validation_blocked(
                errors=[f.to_dict() for f in validation.errors],
                warnings_count=len(validation.warnings),
            )
            return self._failed(ctx, error, "export blocked (validation errors)",
                                metrics=metrics, warnings=warnings, status=ExportStatus.BLOCKED)

        try:
            files = assemble_project(snapshot, settings)
        except GenerationDefect as e:
            error = export_generation_error(
                exc_type=e.details.get("exc_type"),
                exc_message=e.details.get("exc_message"),
                generator=e.details.get("generator"),
            )
            return self._failed(ctx, error, "export failed (generation error)", metrics=metrics, warnings=warnings)
        except Exception as e:
            error = export_generation_error(exc_type=type(e).__name__, exc_message=str(e))
            return self._failed(ctx, error, "export failed (generation error)", metrics=metrics, warnings=warnings)

        metrics["files"] = len(files)
        ctx.set_artifact(FILES_ARTIFACT, files)
        ctx.log(step_id=self.id, level="info", message="export finished", files=len(files),
                python_package=project.python_package, pipeline=project.pipeline_name)

        return ExportResult(
            step_id=self.id,
            status=ExportStatus.SUCCESS,
            summary=f"generated {len(files)} files for '{project.name}'",
            files=files,
            warnings=warnings,
            metrics=metrics,
            payload={
                "project": project.name,
                "python_package": project.python_package,
                "pipeline_name": project.pipeline_name,
                "config_hash": config_hash,
            },
        )


def new_context(*, config: Optional[Dict[str, Any]] = None, local_config_path: Optional[str] = None) -> BuildContext:
    """
    Contexto novo com a configuração informada ou a resolvida (defaults + local).

    Raises:
        ConfigError: Se o override local não puder ser lido ou mesclado.
    """
    if config is None:
        config = load_config(local_path=local_config_path)
    return BuildContext(
        build_id=uuid.uuid4().hex,
        created_at=datetime.now(timezone.utc),
        config=config,
    )


def _configuration_failed(e: ConfigError) -> ExportResult:
    return ExportResult(
        step_id=ExportProjectStep.id,
        status=ExportStatus.FAILED,
        summary="export failed (configuration)",
        payload={"error": export_configuration_error(reason=str(e)).to_dict()},
    )


def export_project(
    snapshot: Snapshot,
    *,
    ctx: Optional[BuildContext] = None,
    local_config_path: Optional[str] = None,
) -> ExportResult:
    """Roda o `ExportProjectStep` em um contexto novo (ou no informado)."""
    if ctx is None:
        try:
            ctx = new_context(local_config_path=local_config_path)
        except ConfigError as e:
            return _configuration_failed(e)
    return ExportProjectStep(snapshot).run(ctx)


def export_project_file(
    path: Union[str, Path],
    *,
    ctx: Optional[BuildContext] = None,
    local_config_path: Optional[str] = None,
) -> ExportResult:
    """Carrega um documento de projeto e o exporta; documentos malformados viram FAILED."""
    if ctx is None:
        try:
            ctx = new_context(local_config_path=local_config_path)
        except ConfigError as e:
            return _configuration_failed(e)
    try:
        snapshot = load_snapshot(path)
    except SnapshotFormatError as e:
        ctx.log(step_id=ExportProjectStep.id, level="error", message="snapshot could not be read", source=str(path))
        return ExportResult(
            step_id=ExportProjectStep.id,
            status=ExportStatus.FAILED,
            summary="export failed (invalid snapshot)",
            payload={"error": snapshot_format_invalid(reason=e.message, source=str(path)).to_dict()},
        )
    return ExportProjectStep(snapshot).run(ctx)
