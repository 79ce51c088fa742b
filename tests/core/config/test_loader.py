# tests/core/config/test_loader.py
"""
Testes do carregador de configuração (load_config).

Os testes asseguram que:
- o arquivo defaults é obrigatório
- o arquivo local é opcional e atua apenas como override
- formatos não suportados e raízes não-dict são rejeitados
- os defaults empacotados carregam sem arquivo externo

Invariantes:
    - A configuração final é sempre um dicionário
    - Nenhuma configuração parcial é retornada em caso de erro
"""

import json
import pytest
from pathlib import Path

try:
    from kedro_builder.core.config.loader import default_config_path, load_config, read_structured_file
    from kedro_builder.core.config.errors import (
        DefaultsNotFoundError,
        InvalidConfigRootTypeError,
        UnsupportedConfigFormatError,
    )
except Exception as e:  # noqa: BLE001
    load_config = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


DEFAULTS_YAML = """\
kedro:
  version: "1.0.0"
project:
  python_requires: ">=3.9"
  dependencies: ["kedro~=1.0.0", "kedro-viz>=6.7.0"]
pipeline:
  default_name: data_processing
"""

LOCAL_YAML = """\
project:
  dependencies: ["kedro~=1.0.0"]
pipeline:
  default_name: feature_engineering
"""


def _require_imports():
    """
    Falha imediatamente quando o loader ou suas exceções tipadas não podem
    ser importados, em vez de produzir erros indiretos nos testes.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing loader/errors modules. Implement:\n"
            "- src/kedro_builder/core/config/loader.py (load_config)\n"
            "- src/kedro_builder/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_missing_defaults_raises(tmp_path: Path):
    """A ausência do defaults é erro fatal (`DefaultsNotFoundError`)."""
    _require_imports()
    with pytest.raises(DefaultsNotFoundError):
        load_config(defaults_path=str(tmp_path / "defaults.yaml"), local_path=None)


def test_missing_local_is_ok(tmp_path: Path):
    """
    Verifica que a ausência do arquivo local não é tratada como erro.

    Decisões arquiteturais:
        - A configuração local é opcional
        - Defaults permanecem como fonte única quando o local não existe
    """
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(DEFAULTS_YAML, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(tmp_path / "local.yaml"))
    assert out["pipeline"]["default_name"] == "data_processing"
    assert out["project"]["dependencies"] == ["kedro~=1.0.0", "kedro-viz>=6.7.0"]


def test_load_defaults_and_local(tmp_path: Path):
    """
    Verifica o merge defaults + local.

    Invariantes:
        - Overrides locais têm precedência sobre defaults
        - Listas do local substituem as listas do defaults por inteiro
        - Chaves não sobrescritas permanecem inalteradas
    """
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yaml"
    defaults.write_text(DEFAULTS_YAML, encoding="utf-8")
    local.write_text(LOCAL_YAML, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(local))
    assert out["pipeline"]["default_name"] == "feature_engineering"
    assert out["project"]["dependencies"] == ["kedro~=1.0.0"]
    assert out["project"]["python_requires"] == ">=3.9"
    assert out["kedro"]["version"] == "1.0.0"


def test_json_local_override_is_supported(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.json"
    defaults.write_text(DEFAULTS_YAML, encoding="utf-8")
    local.write_text(json.dumps({"kedro": {"version": "1.1.0"}}), encoding="utf-8")

    out = load_config(defaults_path=defaults, local_path=local)
    assert out["kedro"]["version"] == "1.1.0"


def test_invalid_root_type_raises(tmp_path: Path):
    """Raiz lista ou escalar é erro estrutural (`InvalidConfigRootTypeError`)."""
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("- just\n- a\n- list\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_config(defaults_path=str(defaults), local_path=None)


def test_unsupported_extension_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.toml"
    defaults.write_text("kedro = { version = '1.0.0' }\n", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_config(defaults_path=str(defaults), local_path=None)


def test_empty_file_reads_as_empty_dict(tmp_path: Path):
    _require_imports()
    empty = tmp_path / "empty.yml"
    empty.write_text("", encoding="utf-8")
    assert read_structured_file(empty) == {}


def test_packaged_defaults_load_without_arguments():
    """
    Os defaults distribuídos com o pacote existem e contêm as seções
    consumidas pelas settings dos geradores.
    """
    _require_imports()
    assert default_config_path().exists()

    out = load_config()
    assert set(out) >= {"kedro", "project", "pipeline", "codegen"}
    assert out["pipeline"]["default_name"] == "data_processing"
    assert "kedro-viz>=6.7.0" in out["project"]["dependencies"]
