"""
Dimensional Config — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do Dimensional Config.
Erros fazem parte do contrato operacional da camada de fronteira e devem ser:

- explícitos
- serializáveis
- acionáveis

A ausência de valor em uma resolução **não** é erro e nunca produz payload.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do Dimensional Config.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao chamador
    - decision_required: indica que a operação só pode ser refeita após decisão
      explícita do chamador (sem auto-correção, sem fallback silencioso)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    decision_required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Grafo
CYCLE_DETECTED = "CYCLE_DETECTED"
UNKNOWN_DIMENSION = "UNKNOWN_DIMENSION"
CONFIG_VALUE_TYPE_MISMATCH = "CONFIG_VALUE_TYPE_MISMATCH"

# Fronteira / Thresholds
UNKNOWN_WORLD_TYPE = "UNKNOWN_WORLD_TYPE"
UNKNOWN_DIMENSION_TYPE = "UNKNOWN_DIMENSION_TYPE"
INVALID_THRESHOLD_VALUE = "INVALID_THRESHOLD_VALUE"
INVALID_IDENTIFIER = "INVALID_IDENTIFIER"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def cycle_detected(
    *,
    parent: str,
    child: str,
    hint: str = "Revise a hierarquia: o filho já é ancestral do pai informado.",
) -> ErrorPayload:
    return ErrorPayload(
        type=CYCLE_DETECTED,
        message=f"A aresta {parent} -> {child} criaria um ciclo na hierarquia",
        details={"parent": parent, "child": child},
        hint=hint,
        decision_required=True,
    )


def unknown_dimension(
    *,
    dimension: str,
    required_by: Optional[str] = None,
    hint: str = "Registre a dimensão pai antes de registrar seus filhos.",
) -> ErrorPayload:
    return ErrorPayload(
        type=UNKNOWN_DIMENSION,
        message=f"Dimensão não registrada: {dimension}",
        details={"dimension": dimension, "required_by": required_by},
        hint=hint,
        decision_required=False,
    )


def config_value_type_mismatch(
    *,
    expected_kind: str,
    actual_type: str,
    value_repr: str,
    hint: str = "Converta o valor para o tipo declarado antes de atribuí-lo.",
) -> ErrorPayload:
    return ErrorPayload(
        type=CONFIG_VALUE_TYPE_MISMATCH,
        message=f"Valor incompatível com o tipo {expected_kind}",
        details={
            "expected_kind": expected_kind,
            "actual_type": actual_type,
            "value": value_repr,
        },
        hint=hint,
        decision_required=False,
    )


def unknown_world_type(
    *,
    world_type: str,
    known_world_types: List[str],
    hint: str = "Use um dos tipos de mundo semeados ou declare o novo tipo na taxonomia.",
) -> ErrorPayload:
    return ErrorPayload(
        type=UNKNOWN_WORLD_TYPE,
        message=f"Tipo de mundo desconhecido: {world_type}",
        details={"world_type": world_type, "known_world_types": known_world_types},
        hint=hint,
        decision_required=False,
    )


def unknown_dimension_type(
    *,
    dimension_type: str,
    allowed: List[str],
    hint: str = "Informe exatamente um dos nomes de tipo de dimensão (case-sensitive).",
) -> ErrorPayload:
    return ErrorPayload(
        type=UNKNOWN_DIMENSION_TYPE,
        message=f"Tipo de dimensão inválido: {dimension_type}",
        details={"dimension_type": dimension_type, "allowed": allowed},
        hint=hint,
        decision_required=False,
    )


def invalid_threshold_value(
    *,
    key: str,
    value_repr: str,
    expected: str,
    hint: str = "Corrija o valor informado; nenhuma escrita foi realizada.",
) -> ErrorPayload:
    return ErrorPayload(
        type=INVALID_THRESHOLD_VALUE,
        message=f"Valor inválido para o threshold '{key}'",
        details={"key": key, "value": value_repr, "expected": expected},
        hint=hint,
        decision_required=False,
    )


def invalid_identifier(
    *,
    field: str,
    value_repr: str,
    hint: str = "Informe um identificador de texto não vazio.",
) -> ErrorPayload:
    return ErrorPayload(
        type=INVALID_IDENTIFIER,
        message=f"Identificador inválido em '{field}'",
        details={"field": field, "value": value_repr},
        hint=hint,
        decision_required=False,
    )
