# src/kedro_builder/codegen/__init__.py
"""
Geradores de artefatos do projeto Kedro.

Cada gerador é uma função pura: recebe o snapshot (ou apenas os metadados
do projeto) e devolve o texto de um arquivo. Mesma entrada, mesmos bytes:
nenhum timestamp, nenhum id aleatório.

- **helpers**      → normalização de nomes e formatação compartilhada
- **filepath**     → decomposição/reconstrução de `base/camada/arquivo`
- **nodes**        → `pipelines/<pipe>/nodes.py`
- **pipeline**     → `pipelines/<pipe>/pipeline.py`
- **catalog**      → `conf/base/catalog.yml`
- **pyproject**    → `pyproject.toml`
- **registry**     → `settings.py`, `pipeline_registry.py`, `__init__` do pipeline
- **static_files** → arquivos fixos (README, .gitignore, logging, …)
"""
from .catalog import generate_catalog
from .nodes import generate_nodes
from .pipeline import generate_pipeline
from .pyproject import generate_pyproject

__all__ = [
    "generate_catalog",
    "generate_nodes",
    "generate_pipeline",
    "generate_pyproject",
]
