# tests/codegen/test_pyproject_generator.py
"""
Testes do gerador de `pyproject.toml`.

O manifesto depende apenas dos metadados do projeto e das settings; o
grafo nunca é consultado.
"""

import sys

import pytest

from kedro_builder.codegen.pyproject import generate_pyproject
from kedro_builder.core.config.settings import GeneratorSettings
from kedro_builder.core.model.entities import ProjectMetadata


SETTINGS = GeneratorSettings(
    kedro_version="1.0.0",
    python_requires=">=3.9",
    dependencies=("kedro[jupyter]~=1.0.0", "kedro-viz>=6.7.0"),
)


def test_manifest_sections():
    text = generate_pyproject(ProjectMetadata.from_name("my-kedro-project"), SETTINGS)

    assert 'name = "my_kedro_project"' in text
    assert 'requires-python = ">=3.9"' in text
    assert 'my-kedro-project = "my_kedro_project.__main__:main"' in text
    assert 'package_name = "my_kedro_project"' in text
    assert 'project_name = "my-kedro-project"' in text
    assert 'kedro_init_version = "1.0.0"' in text
    assert 'attr = "my_kedro_project.__version__"' in text
    assert '    "kedro-viz>=6.7.0",' in text


@pytest.mark.skipif(sys.version_info < (3, 11), reason="tomllib requires Python 3.11+")
def test_manifest_is_valid_toml():
    import tomllib

    data = tomllib.loads(generate_pyproject(ProjectMetadata.from_name("demo"), SETTINGS))
    assert data["project"]["name"] == "demo"
    assert data["project"]["dependencies"] == list(SETTINGS.dependencies)
    assert data["project"]["scripts"] == {"demo": "demo.__main__:main"}
    assert data["tool"]["kedro"]["source_dir"] == "src"
    assert data["tool"]["setuptools"]["packages"]["find"]["where"] == ["src"]


def test_empty_dependency_list():
    text = generate_pyproject(ProjectMetadata.from_name("demo"), GeneratorSettings(dependencies=()))
    assert "dependencies = []" in text
