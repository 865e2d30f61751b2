# src/dimensional_config/thresholds/adapter.py
"""
Adapter de fronteira (in-process) para o serviço de thresholds.

Recebe apenas primitivos já extraídos de requisições (strings, números,
booleanos) e devolve dicionários simples, prontos para serialização por
qualquer camada de transporte externa.

Regras:
- Exceções `DimensionalException` viram `{"error": ErrorPayload}`; nenhuma
  stack trace é exposta.
- Demais exceções propagam (são defeitos, não erros de contrato).
- Respostas de validação incluem o threshold efetivamente usado na decisão.
  O threshold é resolvido uma única vez por chamada.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict

from ..core.config import compute_config_hash
from ..core.exceptions import DimensionalException
from .coercion import parse_dimension_type, parse_identifier, parse_threshold_value
from .service import ThresholdService, has_room_for_character, meets_confidence, triggers_event


def to_error_payload(exc: DimensionalException) -> Dict[str, Any]:
    return {"error": exc.to_payload().to_dict()}


class ThresholdAdapter:
    """Traduz chamadas primitivas em operações do `ThresholdService`."""

    def __init__(self, service: ThresholdService):
        self.service = service

    def _guard(self, fn: Callable[[], Dict[str, Any]]) -> Dict[str, Any]:
        try:
            return fn()
        except DimensionalException as exc:
            return to_error_payload(exc)

    # -----------------------------
    # Registro
    # -----------------------------
    def register_world(self, world_id: str, world_type: str) -> Dict[str, Any]:
        def run() -> Dict[str, Any]:
            self.service.register_world(world_id, world_type)
            return {"status": "created", "worldId": world_id, "worldType": world_type}
        return self._guard(run)

    def register_region(self, world_id: str, region_id: str) -> Dict[str, Any]:
        def run() -> Dict[str, Any]:
            self.service.register_region(world_id, region_id)
            return {"status": "created", "regionId": region_id, "worldId": world_id}
        return self._guard(run)

    def register_location(self, region_id: str, location_id: str) -> Dict[str, Any]:
        def run() -> Dict[str, Any]:
            self.service.register_location(region_id, location_id)
            return {"status": "created", "locationId": location_id, "regionId": region_id}
        return self._guard(run)

    # -----------------------------
    # Configuração
    # -----------------------------
    def set_threshold(self, dimension_type: str, dimension_id: str, key: str, value: str) -> Dict[str, Any]:
        def run() -> Dict[str, Any]:
            # valida tudo antes de tocar no grafo
            parsed_type = parse_dimension_type(dimension_type)
            parse_identifier(dimension_id, field="dimension_id")
            parse_identifier(key, field="key")
            parsed_value = parse_threshold_value(key, value)
            self.service.set_threshold(parsed_type, dimension_id, key, parsed_value)
            return {
                "status": "updated",
                "dimensionType": parsed_type.name,
                "dimensionId": dimension_id,
                "key": key,
                "value": value,
            }
        return self._guard(run)

    def get_effective_thresholds(self, location_id: str) -> Dict[str, Any]:
        def run() -> Dict[str, Any]:
            thresholds = self.service.get_effective_thresholds(location_id).to_dict()
            return {
                "locationId": location_id,
                **thresholds,
                "configHash": compute_config_hash(thresholds),
            }
        return self._guard(run)

    def get_threshold(self, location_id: str, key: str) -> Dict[str, Any]:
        def run() -> Dict[str, Any]:
            value = self.service.get_threshold(location_id, key)
            if value is not None:
                value = value.name if isinstance(value, Enum) else str(value)
            return {"locationId": location_id, "key": key, "value": value}
        return self._guard(run)

    # -----------------------------
    # Validações
    # -----------------------------
    def check_confidence(self, location_id: str, confidence: float) -> Dict[str, Any]:
        def run() -> Dict[str, Any]:
            threshold = self.service.confidence_threshold(location_id)
            return {
                "meetsThreshold": meets_confidence(confidence, threshold),
                "confidence": confidence,
                "threshold": threshold,
            }
        return self._guard(run)

    def check_character_limit(self, location_id: str, current_count: int) -> Dict[str, Any]:
        def run() -> Dict[str, Any]:
            max_allowed = self.service.max_characters_per_scene(location_id)
            return {
                "canAddCharacter": has_room_for_character(current_count, max_allowed),
                "currentCount": current_count,
                "maxAllowed": max_allowed,
            }
        return self._guard(run)

    def check_event_trigger(self, location_id: str, random_value: float) -> Dict[str, Any]:
        def run() -> Dict[str, Any]:
            probability = self.service.event_trigger_probability(location_id)
            return {
                "shouldTrigger": triggers_event(random_value, probability),
                "randomValue": random_value,
                "probability": probability,
            }
        return self._guard(run)
