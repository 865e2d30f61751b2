"""
Dimensional Config — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do Dimensional Config.

Objetivo:
- Permitir que grafo e serviços levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para ErrorPayload
- Evitar ValueError/RuntimeError genéricos nas falhas de contrato

Regras:
- Exceções carregam apenas dados estruturados (serializáveis).
- Falhas de contrato são levantadas via `from_payload` com um ErrorPayload do catálogo.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .errors import ErrorPayload


@dataclass(eq=False)
class DimensionalException(Exception):
    """Base class para exceções internas do Dimensional Config.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    - `code` é o tipo estável do catálogo em `core.errors`
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None
    decision_required: bool = False
    code: str = ""

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_payload(cls, payload: ErrorPayload) -> "DimensionalException":
        return cls(
            message=payload.message,
            details=dict(payload.details),
            hint=payload.hint,
            decision_required=payload.decision_required,
            code=payload.type,
        )

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(
            type=self.code or self.__class__.__name__,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
            decision_required=self.decision_required,
        )


# ---------------------------------------------------------------------------
# Grafo
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class CycleError(DimensionalException):
    """A aresta pedida criaria um caminho de volta ao pai."""


@dataclass(eq=False)
class UnknownDimensionError(DimensionalException):
    """Dimensão exigida por um registro não existe no grafo."""


@dataclass(eq=False)
class ConfigValueTypeError(DimensionalException):
    """Payload não corresponde à variante declarada do ConfigValue."""


# ---------------------------------------------------------------------------
# Fronteira / Thresholds
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class UnknownWorldTypeError(DimensionalException):
    """Tipo de mundo sem dimensão WORLD_TYPE semeada."""


@dataclass(eq=False)
class UnknownDimensionTypeError(DimensionalException):
    """Nome de tipo de dimensão fora da enumeração canônica."""


@dataclass(eq=False)
class InvalidThresholdValueError(DimensionalException):
    """Valor não coercível para o tipo esperado do threshold."""


@dataclass(eq=False)
class InvalidIdentifierError(DimensionalException):
    """Identificador de dimensão ou chave vazio ou não textual."""
