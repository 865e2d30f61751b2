# tests/core/config/test_loader.py
"""
Testes do loader de configuração declarativa.

Os testes asseguram que:
- arquivos YAML e JSON são carregados
- defaults ausentes são erro explícito
- overrides locais ausentes são ignorados
- overrides locais são aplicados via deep-merge
- a base embutida é usada quando não há arquivo de defaults
- raiz não-dict e extensões desconhecidas são rejeitadas

Limites explícitos:
    - Não valida a semântica de thresholds (ver tests/thresholds/test_taxonomy.py)
"""

import json
from pathlib import Path

import pytest

try:
    from dimensional_config.core.config.loader import load_config, load_file
    from dimensional_config.core.config.errors import (
        DefaultsNotFoundError,
        InvalidConfigRootTypeError,
        UnsupportedConfigFormatError,
    )
except Exception as e:  # noqa: BLE001
    load_config = None
    load_file = None
    DefaultsNotFoundError = None
    InvalidConfigRootTypeError = None
    UnsupportedConfigFormatError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing config loader. Implement:\n"
            "- src/dimensional_config/core/config/loader.py (load_config, load_file)\n"
            "- src/dimensional_config/core/config/errors.py\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_missing_defaults_raises(tmp_path: Path):
    _require_imports()
    missing = tmp_path / "taxonomy.yaml"
    with pytest.raises(DefaultsNotFoundError):
        load_config(defaults_path=str(missing), local_path=None)


def test_missing_local_is_ok(tmp_path: Path, taxonomy_defaults_yaml):
    """
    Verifica que um arquivo local inexistente não altera os defaults.
    """
    _require_imports()
    defaults = tmp_path / "taxonomy.yaml"
    defaults.write_text(taxonomy_defaults_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(tmp_path / "taxonomy.local.yaml"))

    assert out["global"]["maxCharactersPerScene"] == 10
    assert out["world_types"]["FANTASY"]["maxCharactersPerScene"] == 15


def test_load_defaults_and_local(tmp_path: Path, taxonomy_defaults_yaml, taxonomy_local_yaml):
    """
    Verifica a resolução defaults + overrides locais.

    Invariantes:
        - Chaves sobrescritas assumem o valor local
        - Chaves não sobrescritas permanecem
        - Novos tipos de mundo aparecem no resultado
    """
    _require_imports()
    defaults = tmp_path / "taxonomy.yaml"
    local = tmp_path / "taxonomy.local.yaml"
    defaults.write_text(taxonomy_defaults_yaml, encoding="utf-8")
    local.write_text(taxonomy_local_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(local))

    assert out["world_types"]["FANTASY"]["maxCharactersPerScene"] == 12
    assert out["world_types"]["FANTASY"]["dangerLevel"] == "MEDIUM"
    assert out["world_types"]["WESTERN"]["contentModerationLevel"] == "RELAXED"
    assert out["global"]["minConfidence"] == 0.7


def test_base_used_without_defaults_file(tmp_path: Path, taxonomy_local_yaml):
    _require_imports()
    base = {"world_types": {"FANTASY": {"maxCharactersPerScene": 15}}}
    local = tmp_path / "taxonomy.local.yaml"
    local.write_text(taxonomy_local_yaml, encoding="utf-8")

    out = load_config(local_path=str(local), base=base)

    assert out["world_types"]["FANTASY"]["maxCharactersPerScene"] == 12
    assert base == {"world_types": {"FANTASY": {"maxCharactersPerScene": 15}}}


def test_no_inputs_yields_empty_dict():
    _require_imports()
    assert load_config() == {}


def test_json_is_supported(tmp_path: Path):
    _require_imports()
    path = tmp_path / "taxonomy.json"
    path.write_text(json.dumps({"global": {"minConfidence": 0.6}}), encoding="utf-8")
    assert load_file(path) == {"global": {"minConfidence": 0.6}}


def test_empty_file_is_empty_dict(tmp_path: Path):
    _require_imports()
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_file(path) == {}


def test_invalid_root_type_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "taxonomy.yaml"
    defaults.write_text("- just\n- a\n- list\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_config(defaults_path=str(defaults), local_path=None)


def test_unsupported_extension_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "taxonomy.toml"
    defaults.write_text("[global]\nminConfidence = 0.7\n", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_config(defaults_path=str(defaults), local_path=None)
