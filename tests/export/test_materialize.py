# tests/export/test_materialize.py
"""
Testes da materialização do mapa de arquivos (zip e diretório).
"""

import io
import zipfile

import pytest

from kedro_builder.export.materialize import ZIP_TIMESTAMP, write_directory, write_zip


FILES = {
    "pyproject.toml": "[project]\nname = \"demo\"\n",
    "src/demo/__init__.py": "",
    "conf/base/catalog.yml": "raw:\n  type: pandas.CSVDataset\n",
}


def test_zip_is_rooted_at_project_name():
    data = write_zip(FILES, "demo")

    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        assert zf.namelist() == [f"demo/{p}" for p in FILES]
        assert zf.read("demo/conf/base/catalog.yml").decode("utf-8") == FILES["conf/base/catalog.yml"]
        info = zf.getinfo("demo/pyproject.toml")
        assert info.date_time == ZIP_TIMESTAMP
        assert info.compress_type == zipfile.ZIP_DEFLATED


def test_zip_bytes_are_reproducible():
    assert write_zip(FILES, "demo") == write_zip(dict(FILES), "demo")


def test_write_directory(tmp_path):
    written = write_directory(FILES, tmp_path / "out")

    assert [p.relative_to(tmp_path / "out").as_posix() for p in written] == list(FILES)
    assert (tmp_path / "out" / "src" / "demo" / "__init__.py").read_text(encoding="utf-8") == ""
    assert (tmp_path / "out" / "pyproject.toml").read_text(encoding="utf-8") == FILES["pyproject.toml"]


@pytest.mark.parametrize("path", ["/etc/passwd", "../escape.txt", "conf/../../x"])
def test_unsafe_paths_are_rejected(tmp_path, path):
    with pytest.raises(ValueError):
        write_zip({path: "x"}, "demo")
    with pytest.raises(ValueError):
        write_directory({path: "x"}, tmp_path)
