# src/kedro_builder/export/__init__.py
"""
Export do projeto Kedro.

- **assembler**   → `assemble_project`: snapshot → mapa path → conteúdo
- **step**        → `ExportProjectStep`: portão de validação + log estruturado
- **file_tree**   → visão em árvore do mapa de arquivos
- **materialize** → adaptadores para zip e diretório

O mapa de arquivos é o único entregável; zip e disco são adaptadores.
"""
from .assembler import assemble_project, project_paths, resolve_project
from .file_tree import FileNode, build_file_tree, find_file_by_path, get_file_language
from .materialize import write_directory, write_zip
from .step import ExportProjectStep, export_project, export_project_file, new_context

__all__ = [
    "assemble_project",
    "project_paths",
    "resolve_project",
    "FileNode",
    "build_file_tree",
    "find_file_by_path",
    "get_file_language",
    "write_directory",
    "write_zip",
    "ExportProjectStep",
    "export_project",
    "export_project_file",
    "new_context",
]
