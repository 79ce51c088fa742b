# src/kedro_builder/export/assembler.py
"""
Montagem do projeto Kedro completo.

`assemble_project` chama cada gerador em ordem fixa e devolve o mapa
`path relativo → conteúdo`. A ordem de inserção do mapa é a ordem
canônica dos arquivos do projeto.

Decisões arquiteturais:
    - O pipeline sem nome (ou com o placeholder legado `__default__`)
      recebe o nome padrão configurado
    - Metadados inutilizáveis levantam `InvalidProjectMetadata` antes de
      qualquer geração
    - Falha de um gerador vira `GenerationDefect` com o nome do gerador;
      nenhum mapa parcial é devolvido

Limites explícitos:
    - Não valida o grafo (responsabilidade de `validate_pipeline`, consultada
      pelo `ExportProjectStep`)
    - Não escreve em disco
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Dict, List, Optional

from kedro_builder.codegen import registry, static_files
from kedro_builder.codegen.catalog import generate_catalog
from kedro_builder.codegen.nodes import generate_nodes
from kedro_builder.codegen.pipeline import generate_pipeline
from kedro_builder.codegen.pyproject import generate_pyproject
from kedro_builder.core.config.settings import GeneratorSettings
from kedro_builder.core.exceptions import GenerationDefect, InvalidProjectMetadata
from kedro_builder.core.model.entities import ProjectMetadata, Snapshot, derive_package_name
from kedro_builder.core.model.types import DataLayer
from kedro_builder.core.validation.rules import project_metadata_problems


LEGACY_DEFAULT_PIPELINE = "__default__"


def resolve_pipeline_name(name: Optional[str], default: str) -> str:
    stripped = (name or "").strip()
    if not stripped or stripped == LEGACY_DEFAULT_PIPELINE:
        return default
    return stripped


def resolve_project(project: ProjectMetadata, settings: GeneratorSettings) -> ProjectMetadata:
    """
    Completa e verifica os metadados usados na geração.

    Raises:
        InvalidProjectMetadata: Com a lista de problemas em `details["problems"]`.
    """
    resolved = replace(
        project,
        name=project.name.strip(),
        python_package=(project.python_package or "").strip() or derive_package_name(project.name),
        pipeline_name=resolve_pipeline_name(project.pipeline_name, settings.default_pipeline_name),
    )

    problems = project_metadata_problems(resolved, resolved.pipeline_name)
    if problems:
        first = problems[0]
        raise InvalidProjectMetadata(
            message=f"Invalid project {first['field']}",
            details={"problems": problems},
            hint="Use apenas letras, números, hífens e underscores no nome do projeto.",
            decision_required=True,
        )
    return resolved


def project_paths(project: ProjectMetadata) -> List[str]:
    """Caminhos do projeto, na ordem canônica de montagem."""
    pkg = f"src/{project.python_package}"
    pipe = f"{pkg}/pipelines/{project.pipeline_name}"
    return [
        "pyproject.toml",
        "README.md",
        ".gitignore",
        "conf/base/catalog.yml",
        "conf/base/parameters.yml",
        "conf/base/logging.yml",
        "conf/local/credentials.yml",
        f"{pkg}/__init__.py",
        f"{pkg}/__main__.py",
        f"{pkg}/settings.py",
        f"{pkg}/pipeline_registry.py",
        f"{pkg}/pipelines/__init__.py",
        f"{pipe}/__init__.py",
        f"{pipe}/nodes.py",
        f"{pipe}/pipeline.py",
        *[f"data/{layer.value}/.gitkeep" for layer in DataLayer],
        "logs/.gitkeep",
        "notebooks/.gitkeep",
    ]


def _generate(generator: str, fn: Callable[..., str], *args: Any) -> str:
    try:
        return fn(*args)
    except Exception as e:
        raise GenerationDefect(
            message=f"Generator '{generator}' failed",
            details={
                "generator": generator,
                "exc_type": type(e).__name__,
                "exc_message": str(e),
            },
        ) from e


def assemble_project(snapshot: Snapshot, settings: Optional[GeneratorSettings] = None) -> Dict[str, str]:
    """
    Gera todos os arquivos do projeto a partir do snapshot.

    Args:
        snapshot (Snapshot): Estado capturado (já validado pelo chamador).
        settings (GeneratorSettings, opcional): Versões, dependências e
            estilo de código; por padrão, os valores embutidos.

    Returns:
        Dict[str, str]: mapa `path → conteúdo`, na ordem de `project_paths`.

    Raises:
        InvalidProjectMetadata: Se nome, pacote ou pipeline forem inutilizáveis.
        GenerationDefect: Se algum gerador falhar.
    """
    settings = settings or GeneratorSettings()
    project = resolve_project(snapshot.project, settings)
    snapshot = replace(snapshot, project=project)

    contents: List[str] = [
        _generate("pyproject", generate_pyproject, project, settings),
        _generate("readme", static_files.generate_readme, project),
        _generate("gitignore", static_files.generate_gitignore),
        _generate("catalog", generate_catalog, snapshot),
        _generate("parameters", static_files.generate_parameters_config),
        _generate("logging", static_files.generate_logging_config, project.python_package),
        _generate("credentials", static_files.generate_credentials_template),
        _generate("package_init", static_files.generate_init_py, settings),
        _generate("main", static_files.generate_main_py, project),
        _generate("settings", registry.generate_settings),
        _generate("pipeline_registry", registry.generate_pipeline_registry, project),
        _generate("pipelines_init", static_files.generate_package_init),
        _generate("pipeline_init", registry.generate_pipeline_init, project.pipeline_name),
        _generate("nodes", generate_nodes, snapshot, settings),
        _generate("pipeline", generate_pipeline, snapshot),
    ]
    placeholders = len(DataLayer) + 2
    contents.extend(static_files.generate_gitkeep() for _ in range(placeholders))

    return dict(zip(project_paths(project), contents))
