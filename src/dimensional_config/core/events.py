# src/dimensional_config/core/events.py
"""
Log estruturado de eventos do Dimensional Config.

Este módulo define o `EventLog`, a estrutura canônica de observabilidade
compartilhada pelo grafo de configuração e pelos serviços construídos
sobre ele.

Princípios fundamentais:
    - Logs não são strings livres, mas eventos estruturados
    - Warnings são sinais não fatais e não interrompem operações
    - Cada instância de grafo/serviço possui seu próprio log (sem estado global)

Invariantes:
    - Todo evento inclui `source`, `level`, `message` e `timestamp` (UTC, ISO 8601)
    - A ordem de `events` reflete a ordem de chamada
    - Warnings são agrupados por `source`
    - O log é limitado: `events` guarda no máximo `max_events` entradas e
      cada lista de warnings no máximo `max_warnings_per_source`; as mais
      antigas são descartadas primeiro
    - Escritas concorrentes são serializadas por um lock próprio

Limites explícitos:
    - Não persiste eventos
    - Não filtra por nível no momento do registro
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


LEVEL_DEBUG = "DEBUG"
LEVEL_INFO = "INFO"
LEVEL_WARNING = "WARNING"
LEVEL_ERROR = "ERROR"

DEFAULT_MAX_EVENTS = 1000
DEFAULT_MAX_WARNINGS_PER_SOURCE = 100


def _trim(items: List[Any], limit: int) -> None:
    overflow = len(items) - limit
    if overflow > 0:
        del items[:overflow]


@dataclass
class EventLog:
    """Coletor limitado de eventos estruturados e warnings por origem."""

    events: List[Dict[str, Any]] = field(default_factory=list)
    warnings: Dict[str, List[str]] = field(default_factory=dict)
    max_events: int = DEFAULT_MAX_EVENTS
    max_warnings_per_source: int = DEFAULT_MAX_WARNINGS_PER_SOURCE
    _lock: Any = field(default_factory=threading.Lock, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.max_events < 1 or self.max_warnings_per_source < 1:
            raise ValueError("EventLog limits must be >= 1")

    def log(self, *, source: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "source": source,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        with self._lock:
            self.events.append(event)
            _trim(self.events, self.max_events)

    def add_warning(self, *, source: str, message: str, **extra: Any) -> None:
        with self._lock:
            bucket = self.warnings.setdefault(source, [])
            bucket.append(message)
            _trim(bucket, self.max_warnings_per_source)
        self.log(source=source, level=LEVEL_WARNING, message=message, **extra)

    def filter(self, *, source: Optional[str] = None, level: Optional[str] = None) -> List[Dict[str, Any]]:
        with self._lock:
            snapshot = list(self.events)
        return [
            ev
            for ev in snapshot
            if (source is None or ev["source"] == source)
            and (level is None or ev["level"] == level)
        ]
