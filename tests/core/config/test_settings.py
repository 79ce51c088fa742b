# tests/core/config/test_settings.py
"""
Testes de `GeneratorSettings`: a ponte entre a configuração resolvida
e os geradores puros.

Invariantes:
    - Os defaults empacotados produzem settings válidas
    - Tipos inválidos levantam `ConfigError` com a chave ofensora
"""

import pytest

from kedro_builder.core.config import ConfigError, GeneratorSettings, load_config


def test_settings_from_packaged_defaults():
    settings = GeneratorSettings.from_config(load_config())

    assert settings.kedro_version == "1.0.0"
    assert settings.python_requires == ">=3.9"
    assert settings.default_pipeline_name == "data_processing"
    assert settings.type_hint == "Any"
    assert settings.indent == 4
    assert "kedro[jupyter]~=1.0.0" in settings.dependencies
    assert isinstance(settings.dependencies, tuple)


def test_builtin_defaults_match_packaged_defaults():
    """Settings sem configuração explícita equivalem aos defaults empacotados."""
    assert GeneratorSettings() == GeneratorSettings.load()


def test_local_override_reaches_settings(tmp_path):
    """Um override local altera apenas as chaves declaradas."""
    local = tmp_path / "local.yaml"
    local.write_text("codegen:\n  type_hint: pd.DataFrame\n", encoding="utf-8")

    settings = GeneratorSettings.load(local_path=str(local))
    assert settings.type_hint == "pd.DataFrame"
    assert settings.kedro_version == "1.0.0"


@pytest.mark.parametrize(
    "patch, key",
    [
        ({"kedro": "1.0.0"}, "kedro"),
        ({"project": {"python_requires": ">=3.9", "dependencies": "kedro"}}, "project.dependencies"),
        ({"codegen": {"type_hint": "Any", "indent": 0}}, "codegen.indent"),
        ({"pipeline": {"default_name": ""}}, "pipeline.default_name"),
    ],
)
def test_invalid_values_raise_config_error(patch, key):
    cfg = load_config()
    cfg.update(patch)
    with pytest.raises(ConfigError) as exc:
        GeneratorSettings.from_config(cfg)
    assert key.split(".")[0] in str(exc.value)
