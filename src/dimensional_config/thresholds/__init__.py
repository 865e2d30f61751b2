# src/dimensional_config/thresholds/__init__.py
"""
Thresholds do motor narrativo sobre o grafo dimensional.

Componentes principais:
    - types    → enums de domínio, chaves canônicas, defaults e `ThresholdConfig`
    - coercion → conversão de primitivos de fronteira em `ConfigValue`
    - taxonomy → taxonomia semeada (GLOBAL + WORLD_TYPE) e inicialização do grafo
    - service  → `ThresholdService` (registro, escrita, resolução e predicados)
    - adapter  → `ThresholdAdapter` (primitivos → dicionários serializáveis)
"""

from typing import Optional

from .adapter import ThresholdAdapter, to_error_payload
from .coercion import parse_dimension_type, parse_identifier, parse_threshold_value
from .service import ThresholdService
from .taxonomy import (
    DEFAULT_TAXONOMY,
    Taxonomy,
    build_threshold_graph,
    load_taxonomy,
    validate_taxonomy,
)
from .types import DangerLevel, ModerationLevel, ThresholdConfig


def build_threshold_service(taxonomy: Optional[Taxonomy] = None) -> ThresholdService:
    """Cria um serviço novo e independente, semeado com `taxonomy` (ou os defaults)."""
    return ThresholdService(taxonomy=taxonomy)


__all__ = [
    "DEFAULT_TAXONOMY",
    "DangerLevel",
    "ModerationLevel",
    "Taxonomy",
    "ThresholdAdapter",
    "ThresholdConfig",
    "ThresholdService",
    "build_threshold_graph",
    "build_threshold_service",
    "load_taxonomy",
    "parse_dimension_type",
    "parse_identifier",
    "parse_threshold_value",
    "to_error_payload",
    "validate_taxonomy",
]
