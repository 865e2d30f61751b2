# src/dimensional_config/thresholds/service.py
"""
Serviço de thresholds do motor narrativo.

Este módulo define o `ThresholdService`, uma fachada tipada sobre o
`ConfigGraph` com taxonomia fixa:

    GLOBAL:default
      └─ WORLD_TYPE:{FANTASY, HORROR, SCI_FI}
           └─ WORLD → REGION → LOCATION (registrados em runtime)

Responsabilidades do módulo:
    - Registrar mundos, regiões e localizações na hierarquia
    - Gravar thresholds em qualquer nível dimensional (com coerção)
    - Resolver thresholds por localização
    - Expor predicados de decisão (confiança, limite de personagens, eventos)

Decisões arquiteturais:
    - Registro estrito: tipo de mundo, mundo e região pai precisam existir
    - O fallback para os literais de default existe apenas nesta fachada,
      nunca dentro do grafo; cada fallback de predicado gera um warning
    - A ausência (`None`) é distinta de zero, falso ou string vazia
    - Os predicados são funções puras sobre o threshold já resolvido
      (`meets_confidence`, `has_room_for_character`, `triggers_event`),
      reutilizadas pelo adapter para decidir e reportar o mesmo valor

Limites explícitos:
    - Não expõe HTTP nem serialização (ver `thresholds.adapter`)
    - Não persiste estado
"""

from __future__ import annotations

from typing import Any, List, Optional

from ..core.errors import unknown_dimension, unknown_world_type
from ..core.events import EventLog, LEVEL_INFO
from ..core.exceptions import UnknownDimensionError, UnknownWorldTypeError
from ..core.graph import ConfigGraph, ConfigValue, Dimension, DimensionType, ValueKind
from .coercion import parse_dimension_type, parse_identifier, parse_threshold_value
from .taxonomy import Taxonomy, build_threshold_graph, load_taxonomy
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
    INTERACTION_COOLDOWN_MS,
    MAX_CHARACTERS_PER_SCENE,
    MIN_CONFIDENCE,
    DangerLevel,
    ModerationLevel,
    ThresholdConfig,
)


EVENT_SOURCE = "thresholds"


def meets_confidence(confidence: float, threshold: float) -> bool:
    return confidence >= threshold


def has_room_for_character(current_count: int, max_allowed: int) -> bool:
    return current_count < max_allowed


def triggers_event(random_value: float, probability: float) -> bool:
    return random_value < probability


def _typed(value: Optional[ConfigValue], kinds: tuple, default: Any, enum_cls: Any = None) -> Any:
    if value is None or value.kind not in kinds:
        return default
    if enum_cls is not None and not isinstance(value.value, enum_cls):
        return default
    return value.value


def _dimension(dimension_type: DimensionType, identifier: Any, field: str) -> Dimension:
    return Dimension(dimension_type, parse_identifier(identifier, field=field))


def _location(location_id: Any) -> Dimension:
    return _dimension(DimensionType.LOCATION, location_id, "location_id")


class ThresholdService:
    """Fachada tipada de thresholds sobre um `ConfigGraph` semeado."""

    def __init__(self, *, graph: Optional[ConfigGraph] = None, taxonomy: Optional[Taxonomy] = None):
        if graph is not None and taxonomy is not None:
            raise ValueError("pass either graph or taxonomy, not both")
        self.graph: ConfigGraph = graph if graph is not None else build_threshold_graph(taxonomy)

    @property
    def events(self) -> EventLog:
        return self.graph.events

    @classmethod
    def from_files(cls, *, defaults_path: Optional[str] = None, local_path: Optional[str] = None) -> "ThresholdService":
        return cls(taxonomy=load_taxonomy(defaults_path=defaults_path, local_path=local_path))

    # ------------------------------------------------------------------
    # Registro
    # ------------------------------------------------------------------

    def world_types(self) -> List[str]:
        return [d.value for d in self.graph.dimensions() if d.type is DimensionType.WORLD_TYPE]

    def register_world(self, world_id: str, world_type: str) -> None:
        type_dimension = _dimension(DimensionType.WORLD_TYPE, world_type, "world_type")
        world = _dimension(DimensionType.WORLD, world_id, "world_id")
        if not self.graph.has_dimension(type_dimension):
            raise UnknownWorldTypeError.from_payload(
                unknown_world_type(world_type=world_type, known_world_types=self.world_types())
            )
        self.graph.add_hierarchy(type_dimension, world)
        self.events.log(
            source=EVENT_SOURCE, level=LEVEL_INFO, message="world registered",
            world_id=world_id, world_type=world_type,
        )

    def register_region(self, world_id: str, region_id: str) -> None:
        world = self._require(_dimension(DimensionType.WORLD, world_id, "world_id"), "register_region")
        region = _dimension(DimensionType.REGION, region_id, "region_id")
        self.graph.add_hierarchy(world, region)
        self.events.log(
            source=EVENT_SOURCE, level=LEVEL_INFO, message="region registered",
            world_id=world_id, region_id=region_id,
        )

    def register_location(self, region_id: str, location_id: str) -> None:
        region = self._require(_dimension(DimensionType.REGION, region_id, "region_id"), "register_location")
        location = _dimension(DimensionType.LOCATION, location_id, "location_id")
        self.graph.add_hierarchy(region, location)
        self.events.log(
            source=EVENT_SOURCE, level=LEVEL_INFO, message="location registered",
            region_id=region_id, location_id=location_id,
        )

    # ------------------------------------------------------------------
    # Escrita / leitura
    # ------------------------------------------------------------------

    def set_threshold(self, dimension_type: Any, dimension_id: str, key: str, value: Any) -> None:
        """
        Grava um threshold em qualquer nível dimensional.

        `dimension_type` aceita `DimensionType` ou o nome exato do tipo.
        `value` é validado por `parse_threshold_value` antes da escrita.

        Raises:
            UnknownDimensionTypeError: Tipo de dimensão fora da enumeração.
            InvalidIdentifierError: `dimension_id` ou `key` vazio.
            InvalidThresholdValueError: Valor não coercível para a chave.
        """
        dimension = _dimension(parse_dimension_type(dimension_type), dimension_id, "dimension_id")
        key = parse_identifier(key, field="key")
        typed = parse_threshold_value(key, value)
        self.graph.set_configuration(dimension, key, typed)
        self.events.log(
            source=EVENT_SOURCE, level=LEVEL_INFO, message="threshold set",
            dimension=str(dimension), key=key, value=typed.to_primitive(),
        )

    def get_threshold(self, location_id: str, key: str) -> Optional[Any]:
        """Valor tipado resolvido para a localização, ou `None` se indefinido."""
        resolved = self.graph.resolve(_location(location_id), parse_identifier(key, field="key"))
        return resolved.value if resolved is not None else None

    def get_effective_thresholds(self, location_id: str) -> ThresholdConfig:
        config = self.graph.get_effective_configuration(_location(location_id))
        return ThresholdConfig(
            min_confidence=_typed(config.get(MIN_CONFIDENCE), (ValueKind.FLOAT,), DEFAULT_MIN_CONFIDENCE),
            max_characters_per_scene=_typed(
                config.get(MAX_CHARACTERS_PER_SCENE), (ValueKind.INT,), DEFAULT_MAX_CHARACTERS_PER_SCENE
            ),
            interaction_cooldown_ms=_typed(
                config.get(INTERACTION_COOLDOWN_MS), (ValueKind.INT64, ValueKind.INT), DEFAULT_INTERACTION_COOLDOWN_MS
            ),
            event_trigger_probability=_typed(
                config.get(EVENT_TRIGGER_PROBABILITY), (ValueKind.FLOAT,), DEFAULT_EVENT_TRIGGER_PROBABILITY
            ),
            danger_level=_typed(config.get(DANGER_LEVEL), (ValueKind.ENUM,), DEFAULT_DANGER_LEVEL, DangerLevel),
            content_moderation_level=_typed(
                config.get(CONTENT_MODERATION_LEVEL), (ValueKind.ENUM,), DEFAULT_CONTENT_MODERATION_LEVEL, ModerationLevel
            ),
        )

    # ------------------------------------------------------------------
    # Thresholds resolvidos com default
    # ------------------------------------------------------------------

    def confidence_threshold(self, location_id: str) -> float:
        return self._resolve_or_default(location_id, MIN_CONFIDENCE, (ValueKind.FLOAT,), DEFAULT_MIN_CONFIDENCE)

    def max_characters_per_scene(self, location_id: str) -> int:
        return self._resolve_or_default(
            location_id, MAX_CHARACTERS_PER_SCENE, (ValueKind.INT,), DEFAULT_MAX_CHARACTERS_PER_SCENE
        )

    def event_trigger_probability(self, location_id: str) -> float:
        return self._resolve_or_default(
            location_id, EVENT_TRIGGER_PROBABILITY, (ValueKind.FLOAT,), DEFAULT_EVENT_TRIGGER_PROBABILITY
        )

    # ------------------------------------------------------------------
    # Predicados
    # ------------------------------------------------------------------

    def meets_confidence_threshold(self, location_id: str, confidence: float) -> bool:
        return meets_confidence(confidence, self.confidence_threshold(location_id))

    def can_add_character_to_scene(self, location_id: str, current_count: int) -> bool:
        return has_room_for_character(current_count, self.max_characters_per_scene(location_id))

    def should_trigger_event(self, location_id: str, random_value: float) -> bool:
        return triggers_event(random_value, self.event_trigger_probability(location_id))

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------

    def _require(self, dimension: Dimension, required_by: str) -> Dimension:
        if not self.graph.has_dimension(dimension):
            raise UnknownDimensionError.from_payload(
                unknown_dimension(dimension=str(dimension), required_by=required_by)
            )
        return dimension

    def _resolve_or_default(self, location_id: str, key: str, kinds: tuple, default: Any) -> Any:
        resolved = self.graph.resolve(_location(location_id), key)
        value = _typed(resolved, kinds, None)
        if value is None:
            self.events.add_warning(
                source=EVENT_SOURCE,
                message=f"threshold '{key}' undefined for location '{location_id}', using default",
                key=key,
                location_id=location_id,
                default=default,
            )
            return default
        return value
