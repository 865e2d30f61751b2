# src/dimensional_config/core/config/loader.py
"""
Loader de configuração declarativa (defaults + overrides locais).

A configuração é resolvida a partir de:
    - uma base: arquivo de defaults (obrigatório quando informado) ou um
      dicionário embutido no código
    - um arquivo local de overrides (opcional; ausente → ignorado)

Responsabilidades do módulo:
    - Carregar arquivos YAML ou JSON
    - Validar o tipo raiz (`dict`)
    - Resolver a configuração final via `deep_merge`

Invariantes:
    - O resultado é sempre um dicionário novo
    - Overrides nunca mutam a base

Limites explícitos:
    - Não valida semântica de thresholds (ver `thresholds.taxonomy`)
    - Não constrói grafos
"""

from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


def load_file(path: Path) -> Dict[str, Any]:
    """
    Lê um arquivo de configuração e valida o tipo raiz.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        InvalidConfigRootTypeError: Se a raiz não for um dicionário.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_config(
    *,
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
    base: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva.

    Política de resolução:
        - `defaults_path`, quando informado, substitui `base` e é obrigatório
        - sem `defaults_path`, parte de uma cópia de `base` (ou `{}`)
        - `local_path` existente é aplicado por último via `deep_merge`

    Args:
        defaults_path (Optional[str]): Caminho para o arquivo de defaults.
        local_path (Optional[str]): Caminho opcional para overrides locais.
        base (Optional[Dict[str, Any]]): Defaults embutidos no código.

    Returns:
        Dict[str, Any]: Configuração final resolvida.

    Raises:
        DefaultsNotFoundError: Se `defaults_path` não existir.
        UnsupportedConfigFormatError: Se o formato não for suportado.
        InvalidConfigRootTypeError: Se a raiz não for um dicionário.
        ConfigTypeConflictError: Se houver conflito estrutural no merge.
    """
    if defaults_path is not None:
        effective = load_file(Path(defaults_path))
    else:
        effective = deepcopy(base) if base is not None else {}

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, load_file(local_file))

    return effective
