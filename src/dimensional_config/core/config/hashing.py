# src/dimensional_config/core/config/hashing.py
"""
Hash canônico de configurações.

Gera a identidade estrutural (SHA-256 sobre JSON canônico) de uma
taxonomia carregada ou de uma configuração efetiva já convertida para
primitivos. O mesmo conteúdo produz sempre o mesmo hash,
independentemente da ordem original das chaves.
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Retorna o hash SHA-256 hexadecimal (64 caracteres) de `config`.

    Política (v1): `sort_keys=True`, separadores compactos, UTF-8.

    Raises:
        TypeError: Se `config` não for um dicionário ou não for serializável.
    """
    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
