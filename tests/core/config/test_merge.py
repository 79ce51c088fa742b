# tests/core/config/test_merge.py
"""
Testes da política de deep-merge da configuração.

Política:
    - dict + dict → merge recursivo
    - lista → substituição total
    - escalar → substituição
    - tipos incompatíveis → `ConfigTypeConflictError`
    - nenhuma entrada é mutada
"""

import pytest

try:
    from kedro_builder.core.config.merge import deep_merge
    from kedro_builder.core.config.errors import ConfigTypeConflictError
except Exception as e:  # noqa: BLE001
    deep_merge = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing merge/errors modules. Implement:\n"
            "- src/kedro_builder/core/config/merge.py (deep_merge)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_merge_simple_override():
    """Escalares do override vencem; entradas permanecem intactas."""
    _require_imports()
    base = {"a": 1, "b": 2}
    override = {"b": 99}
    out = deep_merge(base, override)

    assert out == {"a": 1, "b": 99}
    assert base == {"a": 1, "b": 2}
    assert override == {"b": 99}


def test_merge_nested_dict():
    _require_imports()
    base = {"codegen": {"type_hint": "Any", "indent": 4}}
    out = deep_merge(base, {"codegen": {"indent": 2}})
    assert out == {"codegen": {"type_hint": "Any", "indent": 2}}


def test_merge_list_override_total():
    """
    Listas não são mescladas elemento a elemento.

    Isso permite que um override local remova dependências padrão do
    projeto gerado.
    """
    _require_imports()
    base = {"project": {"dependencies": ["kedro", "kedro-viz", "notebook"]}}
    out = deep_merge(base, {"project": {"dependencies": ["kedro"]}})
    assert out == {"project": {"dependencies": ["kedro"]}}


def test_merge_none_base_accepts_any_type():
    _require_imports()
    out = deep_merge({"pipeline": None}, {"pipeline": {"default_name": "etl"}})
    assert out == {"pipeline": {"default_name": "etl"}}


@pytest.mark.parametrize(
    "base, override",
    [
        ({"project": {"version": "0.1"}}, {"project": ["0.1"]}),
        ({"codegen": {"indent": 4}}, {"codegen": {"indent": "four"}}),
        ({"project": {"dependencies": ["kedro"]}}, {"project": {"dependencies": "kedro"}}),
    ],
)
def test_merge_type_conflict_raises(base, override):
    """Conflitos estruturais nunca são resolvidos silenciosamente."""
    _require_imports()
    with pytest.raises(ConfigTypeConflictError):
        deep_merge(base, override)
