# tests/core/graph/test_dimension.py
"""
Testes da identidade de dimensões e da ordem de especificidade dos tipos.

Os testes asseguram que:
- a ordem ordinal vai de GLOBAL (menos específico) a LOCATION
- dimensões são objetos de valor (igualdade e hash estruturais)
- valores inválidos são rejeitados na construção
"""

import dataclasses

import pytest

try:
    from dimensional_config.core.graph import Dimension, DimensionType
except Exception as e:  # noqa: BLE001
    Dimension = None
    DimensionType = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing graph dimension module. Implement:\n"
            "- src/dimensional_config/core/graph/dimension.py (Dimension, DimensionType)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_ordinal_order_is_global_to_location():
    _require_imports()
    ordered = sorted(DimensionType, key=lambda t: t.ordinal)
    assert [t.name for t in ordered] == ["GLOBAL", "WORLD_TYPE", "WORLD", "REGION", "LOCATION"]
    assert DimensionType.GLOBAL.ordinal < DimensionType.LOCATION.ordinal


def test_names_are_exact_enum_names():
    _require_imports()
    assert DimensionType.names() == ["GLOBAL", "WORLD_TYPE", "WORLD", "REGION", "LOCATION"]


def test_structural_equality_and_hash():
    """
    Verifica que duas dimensões com o mesmo `(type, value)` são intercambiáveis.

    Invariantes:
        - Igualdade estrutural
        - Mesmo hash (utilizável como chave de dicionário)
        - Tipos diferentes com o mesmo valor são dimensões diferentes
    """
    _require_imports()
    a = Dimension(DimensionType.WORLD_TYPE, "FANTASY")
    b = Dimension(DimensionType.WORLD_TYPE, "FANTASY")
    c = Dimension(DimensionType.WORLD, "FANTASY")
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_string_form():
    _require_imports()
    assert str(Dimension(DimensionType.LOCATION, "bag-end")) == "LOCATION:bag-end"


def test_is_immutable():
    _require_imports()
    d = Dimension(DimensionType.REGION, "shire")
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.value = "mordor"  # type: ignore[misc]


@pytest.mark.parametrize("value", ["", "   ", None, 42])
def test_rejects_invalid_value(value):
    _require_imports()
    with pytest.raises(ValueError):
        Dimension(DimensionType.WORLD, value)


def test_rejects_plain_string_type():
    _require_imports()
    with pytest.raises(TypeError):
        Dimension("WORLD", "middle-earth")  # type: ignore[arg-type]
