# src/dimensional_config/__init__.py
"""
Dimensional Config — resolução hierárquica de configuração sobre um DAG.

Dimensões nomeadas (GLOBAL → WORLD_TYPE → WORLD → REGION → LOCATION)
formam um grafo acíclico; valores definidos em um ancestral são herdados
pelos descendentes, a menos que sobrescritos mais perto da folha.

Arquitetura em alto nível:
    - core.graph   → DAG, valores tipados e resolução por especificidade
    - core.config  → carregamento, merge e hashing de taxonomias declarativas
    - core.events  → log estruturado de eventos
    - thresholds   → serviço de thresholds do motor narrativo e adapter

Limites explícitos:
    - Não expõe HTTP, persistência, mensageria ou orquestração
    - Não é um banco de grafos nem um config store distribuído
"""
from .core.graph import ConfigGraph, ConfigValue, Dimension, DimensionType, ValueKind
from .thresholds import ThresholdService, build_threshold_service

__all__ = [
    "ConfigGraph",
    "ConfigValue",
    "Dimension",
    "DimensionType",
    "ThresholdService",
    "ValueKind",
    "build_threshold_service",
]
