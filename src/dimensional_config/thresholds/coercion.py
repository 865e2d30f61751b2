# src/dimensional_config/thresholds/coercion.py
"""
Coerção de entradas primitivas na fronteira de thresholds.

Regras de coerção (v1):
    - dangerLevel / contentModerationLevel → enum pelo nome exato do membro
    - minConfidence / eventTriggerProbability → FLOAT (finito)
    - maxCharactersPerScene → INT (32 bits)
    - interactionCooldownMs → INT64
    - demais chaves → STRING quando a entrada é texto; valores Python já
      tipados têm a variante deduzida

Decisões arquiteturais:
    - Toda falha é reportada com `InvalidThresholdValueError` antes de
      qualquer escrita no grafo
    - Valores já tipados (ex.: `0.8`, `DangerLevel.HIGH`) são aceitos e
      validados contra a variante esperada
    - `bool` nunca é aceito como numérico
    - Identificadores vazios viram `InvalidIdentifierError` (nunca `ValueError`)
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Dict, Type

from ..core.errors import invalid_identifier, invalid_threshold_value, unknown_dimension_type
from ..core.exceptions import (
    ConfigValueTypeError,
    InvalidIdentifierError,
    InvalidThresholdValueError,
    UnknownDimensionTypeError,
)
from ..core.graph import ConfigValue, DimensionType, ValueKind
from .types import (
    CONTENT_MODERATION_LEVEL,
    DANGER_LEVEL,
    EVENT_TRIGGER_PROBABILITY,
    INTERACTION_COOLDOWN_MS,
    MAX_CHARACTERS_PER_SCENE,
    MIN_CONFIDENCE,
    DangerLevel,
    ModerationLevel,
)


THRESHOLD_KINDS: Dict[str, ValueKind] = {
    MIN_CONFIDENCE: ValueKind.FLOAT,
    MAX_CHARACTERS_PER_SCENE: ValueKind.INT,
    INTERACTION_COOLDOWN_MS: ValueKind.INT64,
    EVENT_TRIGGER_PROBABILITY: ValueKind.FLOAT,
    DANGER_LEVEL: ValueKind.ENUM,
    CONTENT_MODERATION_LEVEL: ValueKind.ENUM,
}

ENUM_TYPES: Dict[str, Type[Enum]] = {
    DANGER_LEVEL: DangerLevel,
    CONTENT_MODERATION_LEVEL: ModerationLevel,
}


def parse_dimension_type(name: Any) -> DimensionType:
    """Converte o nome exato (case-sensitive) de um tipo de dimensão."""
    if isinstance(name, DimensionType):
        return name
    if isinstance(name, str) and name in DimensionType.__members__:
        return DimensionType[name]
    raise UnknownDimensionTypeError.from_payload(
        unknown_dimension_type(dimension_type=str(name), allowed=DimensionType.names())
    )


def parse_identifier(value: Any, *, field: str) -> str:
    """Valida um identificador de dimensão ou chave (texto não vazio)."""
    if isinstance(value, str) and value.strip():
        return value
    raise InvalidIdentifierError.from_payload(invalid_identifier(field=field, value_repr=repr(value)))


def _expected_label(key: str) -> str:
    enum_cls = ENUM_TYPES.get(key)
    if enum_cls is not None:
        return f"{enum_cls.__name__}{{{'|'.join(m.name for m in enum_cls)}}}"
    kind = THRESHOLD_KINDS.get(key)
    return kind.value if kind is not None else ValueKind.STRING.value


def _parse_float(raw: Any) -> float:
    if isinstance(raw, bool):
        raise ValueError("bool is not a number")
    if isinstance(raw, str):
        value = float(raw.strip())
    elif isinstance(raw, (int, float)):
        value = float(raw)
    else:
        raise ValueError(f"unsupported type {type(raw).__name__}")
    if not math.isfinite(value):
        raise ValueError("value must be finite")
    return value


def _parse_int(raw: Any) -> int:
    if isinstance(raw, bool):
        raise ValueError("bool is not an integer")
    if isinstance(raw, str):
        return int(raw.strip(), 10)
    if isinstance(raw, int):
        return raw
    raise ValueError(f"unsupported type {type(raw).__name__}")


def _parse_enum(enum_cls: Type[Enum], raw: Any) -> Enum:
    if isinstance(raw, enum_cls):
        return raw
    if isinstance(raw, str) and not isinstance(raw, Enum):
        return enum_cls[raw]
    raise ValueError(f"expected {enum_cls.__name__}, got {type(raw).__name__}")


def parse_threshold_value(key: str, raw: Any) -> ConfigValue:
    """
    Converte `raw` no `ConfigValue` esperado para `key`.

    Raises:
        InvalidThresholdValueError: Se `raw` não for coercível.
    """
    if isinstance(raw, ConfigValue):
        raw = raw.value

    expected = THRESHOLD_KINDS.get(key)
    try:
        if expected is None:
            if isinstance(raw, str) and not isinstance(raw, Enum):
                return ConfigValue.of_string(raw)
            return ConfigValue.infer(raw)
        if expected is ValueKind.ENUM:
            return ConfigValue.of_enum(_parse_enum(ENUM_TYPES[key], raw))
        if expected is ValueKind.FLOAT:
            return ConfigValue.of_float(_parse_float(raw))
        if expected is ValueKind.INT:
            return ConfigValue.of_int(_parse_int(raw))
        return ConfigValue.of_int64(_parse_int(raw))
    except (ValueError, KeyError, ConfigValueTypeError) as exc:
        raise InvalidThresholdValueError.from_payload(
            invalid_threshold_value(key=key, value_repr=repr(raw), expected=_expected_label(key))
        ) from exc
