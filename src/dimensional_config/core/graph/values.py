# src/dimensional_config/core/graph/values.py
"""
Valores tipados de configuração (variante etiquetada).

Cada entrada do grafo armazena um `ConfigValue`: um par `(kind, value)`
em que `kind` declara explicitamente a variante do payload. A validação
acontece na construção, de modo que um valor incompatível é rejeitado no
momento da atribuição e nunca mascarado por um fallback na leitura.

Variantes (v1):
    - FLOAT  → float
    - INT    → inteiro de 32 bits com sinal
    - INT64  → inteiro de 64 bits com sinal
    - BOOL   → bool
    - STRING → str (membros de Enum são rejeitados; use ENUM)
    - ENUM   → membro de qualquer `enum.Enum`

Decisões arquiteturais:
    - `int` nunca é aceito onde se declara BOOL, e `bool` nunca onde se declara
      um numérico (bool é subclasse de int em Python)
    - `of_float` aceita inteiros e os converte; o construtor direto não converte

Limites explícitos:
    - Não conhece chaves de threshold nem regras de domínio
    - Não realiza parsing de strings (responsabilidade da fronteira)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..errors import config_value_type_mismatch
from ..exceptions import ConfigValueTypeError


INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class ValueKind(str, Enum):
    FLOAT = "float"
    INT = "int"
    INT64 = "int64"
    BOOL = "bool"
    STRING = "string"
    ENUM = "enum"


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _matches(kind: ValueKind, value: Any) -> bool:
    if kind is ValueKind.FLOAT:
        return isinstance(value, float)
    if kind is ValueKind.INT:
        return _is_plain_int(value) and INT32_MIN <= value <= INT32_MAX
    if kind is ValueKind.INT64:
        return _is_plain_int(value) and INT64_MIN <= value <= INT64_MAX
    if kind is ValueKind.BOOL:
        return isinstance(value, bool)
    if kind is ValueKind.STRING:
        return isinstance(value, str) and not isinstance(value, Enum)
    if kind is ValueKind.ENUM:
        return isinstance(value, Enum)
    return False


@dataclass(frozen=True)
class ConfigValue:
    """Payload de configuração com variante explícita."""

    kind: ValueKind
    value: Any

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ValueKind):
            raise TypeError(f"ConfigValue.kind must be a ValueKind, got {type(self.kind).__name__}")
        if not _matches(self.kind, self.value):
            raise ConfigValueTypeError.from_payload(
                config_value_type_mismatch(
                    expected_kind=self.kind.value,
                    actual_type=type(self.value).__name__,
                    value_repr=repr(self.value),
                )
            )

    # -----------------------------
    # Construtores por variante
    # -----------------------------
    @classmethod
    def of_float(cls, value: Any) -> "ConfigValue":
        if _is_plain_int(value):
            value = float(value)
        return cls(ValueKind.FLOAT, value)

    @classmethod
    def of_int(cls, value: Any) -> "ConfigValue":
        return cls(ValueKind.INT, value)

    @classmethod
    def of_int64(cls, value: Any) -> "ConfigValue":
        return cls(ValueKind.INT64, value)

    @classmethod
    def of_bool(cls, value: Any) -> "ConfigValue":
        return cls(ValueKind.BOOL, value)

    @classmethod
    def of_string(cls, value: Any) -> "ConfigValue":
        return cls(ValueKind.STRING, value)

    @classmethod
    def of_enum(cls, value: Any) -> "ConfigValue":
        return cls(ValueKind.ENUM, value)

    @classmethod
    def infer(cls, value: Any) -> "ConfigValue":
        """Deduz a variante a partir do tipo Python do valor.

        Ordem de checagem: ConfigValue, bool, Enum, int (INT se couber em 32
        bits, senão INT64), float, str.
        """
        if isinstance(value, ConfigValue):
            return value
        if isinstance(value, bool):
            return cls.of_bool(value)
        if isinstance(value, Enum):
            return cls.of_enum(value)
        if _is_plain_int(value):
            if INT32_MIN <= value <= INT32_MAX:
                return cls.of_int(value)
            return cls.of_int64(value)
        if isinstance(value, float):
            return cls.of_float(value)
        if isinstance(value, str):
            return cls.of_string(value)
        raise ConfigValueTypeError.from_payload(
            config_value_type_mismatch(
                expected_kind="|".join(k.value for k in ValueKind),
                actual_type=type(value).__name__,
                value_repr=repr(value),
            )
        )

    def to_primitive(self) -> Any:
        """Representação serializável: enums viram o nome do membro."""
        if self.kind is ValueKind.ENUM:
            return self.value.name
        return self.value

    def __str__(self) -> str:
        return str(self.to_primitive())
