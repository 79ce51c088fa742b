# src/kedro_builder/export/file_tree.py
"""
Visão em árvore do mapa de arquivos, para navegação e pré-visualização.

Pastas vêm antes de arquivos; dentro de cada grupo, ordem alfabética.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional


FILE = "file"
FOLDER = "folder"

# Pastas exibidas recolhidas por padrão
_COLLAPSED = {"data", "logs", "notebooks", "local"}


@dataclass
class FileNode:
    name: str
    type: str
    path: str
    content: Optional[str] = None
    children: List["FileNode"] = field(default_factory=list)
    expanded: bool = False

    @property
    def is_folder(self) -> bool:
        return self.type == FOLDER


def _sort(node: FileNode) -> None:
    node.children.sort(key=lambda c: (not c.is_folder, c.name.lower(), c.name))
    for child in node.children:
        if child.is_folder:
            _sort(child)


def build_file_tree(files: Mapping[str, str], root_name: str) -> FileNode:
    """Constrói a árvore de pastas e arquivos com raiz `root_name` (path `/`)."""
    root = FileNode(name=root_name, type=FOLDER, path="/", expanded=True)
    folders: Dict[str, FileNode] = {"": root}

    for path, content in files.items():
        parts = [p for p in path.split("/") if p]
        parent = root
        for depth in range(len(parts) - 1):
            folder_path = "/".join(parts[: depth + 1])
            folder = folders.get(folder_path)
            if folder is None:
                folder = FileNode(
                    name=parts[depth],
                    type=FOLDER,
                    path=folder_path,
                    expanded=parts[depth] not in _COLLAPSED,
                )
                folders[folder_path] = folder
                parent.children.append(folder)
            parent = folder
        parent.children.append(FileNode(name=parts[-1], type=FILE, path="/".join(parts), content=content))

    _sort(root)
    return root


def find_file_by_path(root: FileNode, path: str) -> Optional[FileNode]:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.path == path:
            return node
        stack.extend(reversed(node.children))
    return None


def get_file_language(filename: str) -> str:
    """Linguagem para realce de sintaxe, pela extensão do arquivo."""
    if filename.endswith(".py"):
        return "python"
    if filename.endswith((".yml", ".yaml")):
        return "yaml"
    if filename.endswith(".toml"):
        return "toml"
    if filename.endswith(".md"):
        return "markdown"
    return "text"
