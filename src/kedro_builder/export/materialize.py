# src/kedro_builder/export/materialize.py
"""
Materialização do mapa de arquivos.

- `write_zip`: arquivo zip em memória, com raiz `<projeto>/`, compressão
  DEFLATE e timestamps fixos (mesmo mapa, mesmos bytes)
- `write_directory`: grava o mapa sob um diretório alvo

Invariantes:
    - Nenhum caminho pode escapar da raiz (absoluto ou com `..`)
"""

from __future__ import annotations

import io
import zipfile
from pathlib import Path, PurePosixPath
from typing import List, Mapping, Union


# Menor data representável no formato zip
ZIP_TIMESTAMP = (1980, 1, 1, 0, 0, 0)


def _safe_relative(path: str) -> PurePosixPath:
    rel = PurePosixPath(path)
    if rel.is_absolute() or ".." in rel.parts or not rel.parts:
        raise ValueError(f"Unsafe path in file map: {path!r}")
    return rel


def write_zip(files: Mapping[str, str], project_name: str) -> bytes:
    """Empacota o mapa em um zip cujos arquivos ficam sob `<project_name>/`."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=6) as zf:
        for path, content in files.items():
            info = zipfile.ZipInfo(f"{project_name}/{_safe_relative(path)}", date_time=ZIP_TIMESTAMP)
            info.compress_type = zipfile.ZIP_DEFLATED
            info.external_attr = 0o644 << 16
            zf.writestr(info, content.encode("utf-8"))
    return buffer.getvalue()


def write_directory(files: Mapping[str, str], target: Union[str, Path]) -> List[Path]:
    """
    Grava cada arquivo do mapa sob `target`, criando os diretórios necessários.

    Returns:
        Caminhos gravados, na ordem do mapa.
    """
    root = Path(target)
    written: List[Path] = []
    for path, content in files.items():
        dest = root.joinpath(*_safe_relative(path).parts)
        dest.parent.mkdir(parents=True, exist_ok=True)
        with dest.open("w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        written.append(dest)
    return written
