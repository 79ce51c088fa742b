# src/kedro_builder/codegen/filepath.py
"""
Decomposição e reconstrução de caminhos de dataset no formato
`<base>/<camada>/<arquivo>` (ex.: `data/01_raw/companies.csv`).
"""

from __future__ import annotations

from dataclasses import dataclass


DEFAULT_BASE_LOCATION = "data"
DEFAULT_DATA_LAYER = "01_raw"


@dataclass(frozen=True)
class FilepathParts:
    base_location: str = DEFAULT_BASE_LOCATION
    data_layer: str = DEFAULT_DATA_LAYER
    file_name: str = ""


def parse_filepath(filepath: str) -> FilepathParts:
    """
    Separa um caminho em base, camada e arquivo, completando o que faltar.

        data/01_raw/companies.csv → (data, 01_raw, companies.csv)
        01_raw/companies.csv      → (data, 01_raw, companies.csv)
        companies.csv             → (data, 01_raw, companies.csv)
    """
    parts = [p for p in (filepath or "").strip().split("/") if p]

    if len(parts) >= 3:
        return FilepathParts(parts[0], parts[1], "/".join(parts[2:]))
    if len(parts) == 2:
        return FilepathParts(DEFAULT_BASE_LOCATION, parts[0], parts[1])
    if len(parts) == 1:
        return FilepathParts(DEFAULT_BASE_LOCATION, DEFAULT_DATA_LAYER, parts[0])
    return FilepathParts()


def build_filepath(base_location: str, data_layer: str, file_name: str) -> str:
    """Monta `base/camada/arquivo`; sem arquivo, devolve `""`."""
    base = (base_location or "").strip() or DEFAULT_BASE_LOCATION
    layer = (data_layer or "").strip()
    file = (file_name or "").strip()
    if not file:
        return ""
    return f"{base}/{layer}/{file}"
