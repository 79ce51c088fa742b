# src/kedro_builder/codegen/pyproject.py
"""
Gerador do `pyproject.toml` do projeto exportado.

Depende apenas dos metadados do projeto e das settings (versões e
dependências); nunca do grafo.
"""

from __future__ import annotations

from typing import List, Optional

from kedro_builder.core.config.settings import GeneratorSettings
from kedro_builder.core.model.entities import ProjectMetadata


def _toml_str(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def generate_pyproject(project: ProjectMetadata, settings: Optional[GeneratorSettings] = None) -> str:
    settings = settings or GeneratorSettings()
    pkg = project.python_package

    deps: List[str] = [f"    {_toml_str(dep)}," for dep in settings.dependencies]

    lines = [
        "[build-system]",
        'requires = ["setuptools"]',
        'build-backend = "setuptools.build_meta"',
        "",
        "[project]",
        f"requires-python = {_toml_str(settings.python_requires)}",
        f"name = {_toml_str(pkg)}",
        'readme = "README.md"',
        'dynamic = ["version"]',
    ]
    if deps:
        lines.append("dependencies = [")
        lines.extend(deps)
        lines.append("]")
    else:
        lines.append("dependencies = []")

    lines.extend([
        "",
        "[project.scripts]",
        f'{project.name} = "{pkg}.__main__:main"',
        "",
        "[tool.kedro]",
        f"package_name = {_toml_str(pkg)}",
        f"project_name = {_toml_str(project.name)}",
        f"kedro_init_version = {_toml_str(settings.kedro_version)}",
        "tools = \"['None']\"",
        'example_pipeline = "False"',
        'source_dir = "src"',
        "",
        '[project.entry-points."kedro.hooks"]',
        "",
        "[tool.setuptools.dynamic.version]",
        f'attr = "{pkg}.__version__"',
        "",
        "[tool.setuptools.packages.find]",
        'where = ["src"]',
        "namespaces = false",
    ])
    return "\n".join(lines) + "\n"
