# src/dimensional_config/core/config/__init__.py
"""
Camada de configuração declarativa do Dimensional Config.

Responsabilidades do pacote:
    - Carregamento de arquivos de taxonomia (defaults + overrides locais)
    - Deep-merge determinístico
    - Hash canônico para identificação de taxonomias e snapshots

Limites explícitos:
    - Não valida semântica de thresholds
    - Não interage com o grafo diretamente
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidTaxonomyError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import load_config, load_file
from .merge import deep_merge

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidTaxonomyError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "deep_merge",
    "load_config",
    "load_file",
]
