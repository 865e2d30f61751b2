# src/dimensional_config/thresholds/taxonomy.py
"""
Taxonomia semeada de thresholds (GLOBAL + WORLD_TYPE).

A taxonomia é um dado declarativo com o formato:

    global:
      minConfidence: 0.7
      maxCharactersPerScene: 10
      ...
    world_types:
      FANTASY:
        maxCharactersPerScene: 15
      ...

Ela pode vir dos defaults embutidos (`DEFAULT_TAXONOMY`), de um arquivo de
defaults (YAML/JSON) e de um arquivo local de overrides, resolvidos pelo
loader canônico com deep-merge.

Decisões arquiteturais:
    - A taxonomia inteira é validada e convertida para `ConfigValue` antes
      de qualquer grafo ser construído; um único valor inválido rejeita o
      arquivo todo
    - `build_threshold_graph` é a função explícita de inicialização: cada
      chamada produz um grafo novo e independente
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..core.config import InvalidTaxonomyError, compute_config_hash, load_config
from ..core.events import EventLog, LEVEL_INFO
from ..core.exceptions import InvalidThresholdValueError
from ..core.graph import ConfigGraph, ConfigValue, Dimension, DimensionType
from .coercion import parse_threshold_value
from .types import (
    CONTENT_MODERATION_LEVEL,
    DANGER_LEVEL,
    DEFAULT_CONTENT_MODERATION_LEVEL,
    DEFAULT_DANGER_LEVEL,
    DEFAULT_EVENT_TRIGGER_PROBABILITY,
    DEFAULT_INTERACTION_COOLDOWN_MS,
    DEFAULT_MAX_CHARACTERS_PER_SCENE,
    DEFAULT_MIN_CONFIDENCE,
    EVENT_TRIGGER_PROBABILITY,
    GLOBAL_DIMENSION_ID,
    INTERACTION_COOLDOWN_MS,
    MAX_CHARACTERS_PER_SCENE,
    MIN_CONFIDENCE,
)


EVENT_SOURCE = "taxonomy"

GLOBAL_SECTION = "global"
WORLD_TYPES_SECTION = "world_types"

DEFAULT_TAXONOMY: Dict[str, Any] = {
    GLOBAL_SECTION: {
        MIN_CONFIDENCE: DEFAULT_MIN_CONFIDENCE,
        MAX_CHARACTERS_PER_SCENE: DEFAULT_MAX_CHARACTERS_PER_SCENE,
        INTERACTION_COOLDOWN_MS: DEFAULT_INTERACTION_COOLDOWN_MS,
        EVENT_TRIGGER_PROBABILITY: DEFAULT_EVENT_TRIGGER_PROBABILITY,
        DANGER_LEVEL: DEFAULT_DANGER_LEVEL.name,
        CONTENT_MODERATION_LEVEL: DEFAULT_CONTENT_MODERATION_LEVEL.name,
    },
    WORLD_TYPES_SECTION: {
        "FANTASY": {
            MAX_CHARACTERS_PER_SCENE: 15,
            EVENT_TRIGGER_PROBABILITY: 0.15,
            DANGER_LEVEL: "MEDIUM",
        },
        "HORROR": {
            MIN_CONFIDENCE: 0.8,
            DANGER_LEVEL: "HIGH",
            EVENT_TRIGGER_PROBABILITY: 0.25,
        },
        "SCI_FI": {
            MAX_CHARACTERS_PER_SCENE: 20,
            INTERACTION_COOLDOWN_MS: 3000,
        },
    },
}


@dataclass(frozen=True)
class Taxonomy:
    """Taxonomia validada, pronta para semear um grafo."""

    global_thresholds: Dict[str, ConfigValue] = field(default_factory=dict)
    world_types: Dict[str, Dict[str, ConfigValue]] = field(default_factory=dict)
    config_hash: str = ""

    def to_primitive(self) -> Dict[str, Any]:
        return {
            GLOBAL_SECTION: {k: v.to_primitive() for k, v in self.global_thresholds.items()},
            WORLD_TYPES_SECTION: {
                name: {k: v.to_primitive() for k, v in values.items()}
                for name, values in self.world_types.items()
            },
        }


def _coerce_section(section: Any, path: str) -> Dict[str, ConfigValue]:
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise InvalidTaxonomyError(f"'{path}' deve ser um mapa, recebido: {type(section).__name__}")

    out: Dict[str, ConfigValue] = {}
    for key, raw in section.items():
        if not isinstance(key, str) or not key:
            raise InvalidTaxonomyError(f"Chave inválida em '{path}': {key!r}")
        try:
            out[key] = parse_threshold_value(key, raw)
        except InvalidThresholdValueError as exc:
            raise InvalidTaxonomyError(f"Valor inválido em '{path}.{key}': {exc}") from exc
    return out


def validate_taxonomy(raw: Mapping[str, Any]) -> Taxonomy:
    """
    Valida o formato e converte todos os valores da taxonomia.

    Raises:
        InvalidTaxonomyError: Se o formato ou algum valor for inválido.
    """
    if not isinstance(raw, Mapping):
        raise InvalidTaxonomyError(f"Taxonomia deve ser um mapa, recebido: {type(raw).__name__}")

    unknown = sorted(set(raw) - {GLOBAL_SECTION, WORLD_TYPES_SECTION})
    if unknown:
        raise InvalidTaxonomyError(f"Seções desconhecidas na taxonomia: {unknown}")

    global_thresholds = _coerce_section(raw.get(GLOBAL_SECTION), GLOBAL_SECTION)

    world_types_raw = raw.get(WORLD_TYPES_SECTION) or {}
    if not isinstance(world_types_raw, Mapping):
        raise InvalidTaxonomyError(
            f"'{WORLD_TYPES_SECTION}' deve ser um mapa, recebido: {type(world_types_raw).__name__}"
        )

    world_types: Dict[str, Dict[str, ConfigValue]] = {}
    for name, section in world_types_raw.items():
        if not isinstance(name, str) or not name.strip():
            raise InvalidTaxonomyError(f"Nome de tipo de mundo inválido: {name!r}")
        world_types[name] = _coerce_section(section, f"{WORLD_TYPES_SECTION}.{name}")

    taxonomy = Taxonomy(global_thresholds=global_thresholds, world_types=world_types)
    return Taxonomy(
        global_thresholds=global_thresholds,
        world_types=world_types,
        config_hash=compute_config_hash(taxonomy.to_primitive()),
    )


def load_taxonomy(
    *,
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> Taxonomy:
    """
    Carrega a taxonomia: defaults (arquivo ou embutidos) + overrides locais.

    Raises:
        ConfigError: Qualquer falha de carregamento, merge ou validação.
    """
    raw = load_config(defaults_path=defaults_path, local_path=local_path, base=DEFAULT_TAXONOMY)
    return validate_taxonomy(raw)


def build_threshold_graph(
    taxonomy: Optional[Taxonomy] = None,
    *,
    events: Optional[EventLog] = None,
) -> ConfigGraph:
    """
    Constrói um grafo novo semeado com a taxonomia.

    GLOBAL (`GLOBAL:default`) recebe os thresholds globais e cada tipo de
    mundo vira uma dimensão WORLD_TYPE filha de GLOBAL com seus overrides.
    """
    if taxonomy is None:
        taxonomy = validate_taxonomy(DEFAULT_TAXONOMY)

    graph = ConfigGraph(events=events)
    global_dimension = Dimension(DimensionType.GLOBAL, GLOBAL_DIMENSION_ID)
    graph.add_dimension(global_dimension)

    for key, value in taxonomy.global_thresholds.items():
        graph.set_configuration(global_dimension, key, value)

    for name, values in taxonomy.world_types.items():
        world_type = Dimension(DimensionType.WORLD_TYPE, name)
        graph.add_hierarchy(global_dimension, world_type)
        for key, value in values.items():
            graph.set_configuration(world_type, key, value)

    graph.events.log(
        source=EVENT_SOURCE,
        level=LEVEL_INFO,
        message="taxonomy seeded",
        config_hash=taxonomy.config_hash,
        world_types=sorted(taxonomy.world_types),
    )
    return graph
