# tests/core/config/test_loader.py
"""
Testes do carregador de configuração (load_config).

Os testes asseguram que:
- o arquivo defaults é obrigatório
- o arquivo local é opcional
- formatos não suportados são rejeitados
- estruturas inválidas são detectadas precocemente
- a configuração final é corretamente resolvida (defaults + local)

Invariantes:
    - O resultado é sempre um dict
    - O override local tem precedência sobre defaults
"""

import json
from pathlib import Path

import pytest

try:
    from learnet.core.config.loader import load_config
    from learnet.core.config.errors import (
        DefaultsNotFoundError,
        InvalidConfigRootTypeError,
        UnsupportedConfigFormatError,
    )
except Exception as e:  # noqa: BLE001
    load_config = None
    DefaultsNotFoundError = None
    InvalidConfigRootTypeError = None
    UnsupportedConfigFormatError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """Falha imediatamente quando o loader ou suas exceções tipadas não importam."""
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing loader/errors modules. Implement:\n"
            "- src/learnet/core/config/loader.py (load_config)\n"
            "- src/learnet/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_missing_defaults_raises(tmp_path: Path):
    _require_imports()
    missing = tmp_path / "defaults.yaml"
    with pytest.raises(DefaultsNotFoundError):
        load_config(defaults_path=str(missing), local_path=None)


def test_missing_local_is_ok(tmp_path: Path, training_config_defaults_yaml):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(training_config_defaults_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(tmp_path / "local.yaml"))
    assert out["training"] == {"verbosity": 1, "rows": None}


def test_load_defaults_and_local(tmp_path: Path, training_config_defaults_yaml, training_config_local_yaml):
    """
    Verifica o merge defaults + local.

    O resultado deve refletir:
        - escalares sobrescritos pelo local (verbosity)
        - None nos defaults substituído por lista no local (rows)
        - listas sobrescritas por completo (tags)
        - chaves ausentes no local preservadas (network.name)
    """
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yaml"
    defaults.write_text(training_config_defaults_yaml, encoding="utf-8")
    local.write_text(training_config_local_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(local))
    assert out["training"] == {"verbosity": 2, "rows": [0, 1, 2]}
    assert out["network"] == {"name": "default", "tags": ["local"]}


def test_json_is_supported(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.json"
    defaults.write_text(json.dumps({"training": {"verbosity": 0}}), encoding="utf-8")
    assert load_config(defaults_path=str(defaults))["training"]["verbosity"] == 0


def test_empty_file_is_empty_dict(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("", encoding="utf-8")
    assert load_config(defaults_path=str(defaults)) == {}


def test_unsupported_format_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.toml"
    defaults.write_text("a = 1", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_config(defaults_path=str(defaults))


def test_non_dict_root_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_config(defaults_path=str(defaults))
