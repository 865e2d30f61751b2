# src/dimensional_config/core/graph/dimension.py
"""
Identidade de dimensões da hierarquia de configuração.

Uma dimensão é um nó do DAG de configuração, identificado pelo par
`(type, value)`. O tipo pertence a uma enumeração ordenada cuja posição
(ordinal) define a especificidade: GLOBAL é o menos específico e
LOCATION o mais específico.

Invariantes:
    - Dimensões são objetos de valor imutáveis
    - Igualdade e hash são estruturais sobre `(type, value)`
    - `value` é uma string não vazia, única dentro do seu tipo
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


class DimensionType(str, Enum):
    """
    Tipos de dimensão em ordem crescente de especificidade.

    O valor textual de cada membro é exatamente o seu nome, que é também
    a forma aceita na fronteira (case-sensitive).
    """
    GLOBAL = "GLOBAL"
    WORLD_TYPE = "WORLD_TYPE"
    WORLD = "WORLD"
    REGION = "REGION"
    LOCATION = "LOCATION"

    @property
    def ordinal(self) -> int:
        return _ORDINALS[self]

    @classmethod
    def names(cls) -> List[str]:
        return [member.name for member in cls]


_ORDINALS: Dict[DimensionType, int] = {member: idx for idx, member in enumerate(DimensionType)}


@dataclass(frozen=True)
class Dimension:
    """Nó do DAG de configuração (ex.: `WORLD_TYPE:FANTASY`, `LOCATION:bag-end`)."""

    type: DimensionType
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.type, DimensionType):
            raise TypeError(f"dimension.type must be a DimensionType, got {type(self.type).__name__}")
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("dimension.value must be a non-empty string")

    @property
    def ordinal(self) -> int:
        return self.type.ordinal

    def __str__(self) -> str:
        return f"{self.type.name}:{self.value}"
