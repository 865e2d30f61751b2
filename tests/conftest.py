"""
Fixtures compartilhados para testes do Dimensional Config.

Este módulo define fixtures reutilizáveis que fornecem:
- grafos vazios e cadeias completas GLOBAL → LOCATION
- serviços de thresholds independentes, já semeados
- taxonomias YAML mínimas para testes do loader

Decisões arquiteturais:
    - Cada fixture constrói instâncias novas (sem estado global)
    - Imports do pacote são feitos de forma lazy, dentro das fixtures,
      para que falhas de import apareçam no teste que as usa

Invariantes:
    - Nenhuma fixture realiza I/O fora de `tmp_path`
    - Todas as fixtures são seguras para execução em paralelo
"""

import pytest


# =====================================================
# Grafo
# =====================================================

@pytest.fixture
def graph():
    from dimensional_config.core.graph import ConfigGraph

    return ConfigGraph()


@pytest.fixture
def chain(graph):
    """
    Cadeia linear GLOBAL → WORLD_TYPE → WORLD → REGION → LOCATION.

    Returns:
        dict: nome curto → Dimension, além de `graph` com o grafo montado.
    """
    from dimensional_config.core.graph import Dimension, DimensionType

    dims = {
        "global": Dimension(DimensionType.GLOBAL, "default"),
        "fantasy": Dimension(DimensionType.WORLD_TYPE, "FANTASY"),
        "world": Dimension(DimensionType.WORLD, "middle-earth"),
        "region": Dimension(DimensionType.REGION, "shire"),
        "location": Dimension(DimensionType.LOCATION, "bag-end"),
    }
    graph.add_hierarchy(dims["global"], dims["fantasy"])
    graph.add_hierarchy(dims["fantasy"], dims["world"])
    graph.add_hierarchy(dims["world"], dims["region"])
    graph.add_hierarchy(dims["region"], dims["location"])
    dims["graph"] = graph
    return dims


# =====================================================
# Thresholds
# =====================================================

@pytest.fixture
def service():
    from dimensional_config.thresholds import ThresholdService

    return ThresholdService()


@pytest.fixture
def middle_earth(service):
    """Serviço com middle-earth (FANTASY) → shire → bag-end registrados."""
    service.register_world("middle-earth", "FANTASY")
    service.register_region("middle-earth", "shire")
    service.register_location("shire", "bag-end")
    return service


@pytest.fixture
def taxonomy_defaults_yaml() -> str:
    """Taxonomia completa em YAML, equivalente aos defaults embutidos."""
    return """\
global:
  minConfidence: 0.7
  maxCharactersPerScene: 10
  interactionCooldownMs: 5000
  eventTriggerProbability: 0.1
  dangerLevel: LOW
  contentModerationLevel: STANDARD
world_types:
  FANTASY:
    maxCharactersPerScene: 15
    eventTriggerProbability: 0.15
    dangerLevel: MEDIUM
  HORROR:
    minConfidence: 0.8
    dangerLevel: HIGH
    eventTriggerProbability: 0.25
"""


@pytest.fixture
def taxonomy_local_yaml() -> str:
    """Overrides locais: ajusta FANTASY e adiciona o tipo WESTERN."""
    return """\
world_types:
  FANTASY:
    maxCharactersPerScene: 12
  WESTERN:
    dangerLevel: HIGH
    contentModerationLevel: RELAXED
"""
