# tests/export/test_file_tree.py
"""
Testes da visão em árvore do mapa de arquivos.
"""

from kedro_builder.export.file_tree import build_file_tree, find_file_by_path, get_file_language


FILES = {
    "pyproject.toml": "[project]\n",
    "conf/base/catalog.yml": "raw: {}\n",
    "conf/local/credentials.yml": "",
    "src/pkg/__init__.py": "",
    "data/01_raw/.gitkeep": "",
    "README.md": "# demo\n",
}


def test_root_and_ordering():
    root = build_file_tree(FILES, "demo")

    assert root.name == "demo"
    assert root.path == "/"
    assert root.expanded is True
    assert [c.name for c in root.children] == ["conf", "data", "src", "pyproject.toml", "README.md"]


def test_folder_expansion_defaults():
    root = build_file_tree(FILES, "demo")

    assert find_file_by_path(root, "conf").expanded is True
    assert find_file_by_path(root, "conf/local").expanded is False
    assert find_file_by_path(root, "data").expanded is False
    assert find_file_by_path(root, "src/pkg").expanded is True


def test_find_file_by_path_returns_content():
    root = build_file_tree(FILES, "demo")

    node = find_file_by_path(root, "conf/base/catalog.yml")
    assert node is not None
    assert node.type == "file"
    assert node.content == "raw: {}\n"
    assert find_file_by_path(root, "conf/base/missing.yml") is None


def test_get_file_language():
    assert get_file_language("nodes.py") == "python"
    assert get_file_language("catalog.yml") == "yaml"
    assert get_file_language("x.yaml") == "yaml"
    assert get_file_language("pyproject.toml") == "toml"
    assert get_file_language("README.md") == "markdown"
    assert get_file_language(".gitignore") == "text"
    assert get_file_language(".gitkeep") == "text"
