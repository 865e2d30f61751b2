# src/dimensional_config/thresholds/types.py
"""
Tipos canônicos de thresholds do motor narrativo.

Componentes principais:
    - DangerLevel      → nível de ameaça (afeta mecânicas de combate)
    - ModerationLevel  → nível de moderação de conteúdo
    - ThresholdConfig  → registro imutável com os seis thresholds conhecidos
    - chaves canônicas e defaults documentados

Invariantes:
    - Os defaults aqui declarados são os literais de segurança usados pela
      fachada quando um threshold não está definido em nenhum ancestral
    - Os nomes de chave são exatamente os usados no grafo e na fronteira
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class DangerLevel(str, Enum):
    SAFE = "SAFE"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    EXTREME = "EXTREME"


class ModerationLevel(str, Enum):
    STRICT = "STRICT"
    STANDARD = "STANDARD"
    RELAXED = "RELAXED"


# Chaves canônicas
MIN_CONFIDENCE = "minConfidence"
MAX_CHARACTERS_PER_SCENE = "maxCharactersPerScene"
INTERACTION_COOLDOWN_MS = "interactionCooldownMs"
EVENT_TRIGGER_PROBABILITY = "eventTriggerProbability"
DANGER_LEVEL = "dangerLevel"
CONTENT_MODERATION_LEVEL = "contentModerationLevel"

# Defaults de segurança (duplicam a semente GLOBAL)
DEFAULT_MIN_CONFIDENCE = 0.7
DEFAULT_MAX_CHARACTERS_PER_SCENE = 10
DEFAULT_INTERACTION_COOLDOWN_MS = 5000
DEFAULT_EVENT_TRIGGER_PROBABILITY = 0.1
DEFAULT_DANGER_LEVEL = DangerLevel.LOW
DEFAULT_CONTENT_MODERATION_LEVEL = ModerationLevel.STANDARD

# Identificador da dimensão GLOBAL semeada
GLOBAL_DIMENSION_ID = "default"


@dataclass(frozen=True)
class ThresholdConfig:
    """
    Thresholds efetivos de uma localização, com defaults aplicados.

    Campos:
        - min_confidence: confiança mínima para aceitar uma resposta de IA
        - max_characters_per_scene: máximo de NPCs em uma cena
        - interaction_cooldown_ms: intervalo entre interações de personagens
        - event_trigger_probability: probabilidade de eventos aleatórios
        - danger_level: nível de ameaça
        - content_moderation_level: nível de moderação
    """

    min_confidence: float = DEFAULT_MIN_CONFIDENCE
    max_characters_per_scene: int = DEFAULT_MAX_CHARACTERS_PER_SCENE
    interaction_cooldown_ms: int = DEFAULT_INTERACTION_COOLDOWN_MS
    event_trigger_probability: float = DEFAULT_EVENT_TRIGGER_PROBABILITY
    danger_level: DangerLevel = DEFAULT_DANGER_LEVEL
    content_moderation_level: ModerationLevel = DEFAULT_CONTENT_MODERATION_LEVEL

    def to_dict(self) -> Dict[str, Any]:
        """Forma serializável, com as chaves canônicas e enums pelo nome."""
        return {
            MIN_CONFIDENCE: self.min_confidence,
            MAX_CHARACTERS_PER_SCENE: self.max_characters_per_scene,
            INTERACTION_COOLDOWN_MS: self.interaction_cooldown_ms,
            EVENT_TRIGGER_PROBABILITY: self.event_trigger_probability,
            DANGER_LEVEL: self.danger_level.name,
            CONTENT_MODERATION_LEVEL: self.content_moderation_level.name,
        }
