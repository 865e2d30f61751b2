# src/dimensional_config/core/graph/config_graph.py
"""
Grafo de configuração dimensional (DAG).

Este módulo define o `ConfigGraph`, responsável por manter a hierarquia de
dimensões e responder consultas de configuração herdada.

Modelo:
    - Nós são `Dimension` armazenadas em uma arena (lista + índice)
    - Arestas `pai -> filho` são listas de índices de pais por nó
    - Cada nó possui um mapa `chave -> _Entry(ConfigValue, priority)`

Resolução (`resolve`):
    1. Se a própria dimensão define a chave, ela vence imediatamente
    2. Caso contrário, coleta todos os ancestrais transitivos
    3. Entre os ancestrais que definem a chave, vence o mais específico
       (ordinal do tipo; empate → priority; empate → registro mais antigo)
    4. Nenhum definidor → `None` (ausência não é erro)

Configuração efetiva (`get_effective_configuration`):
    - Para cada chave visível, o valor do definidor mais específico,
      com a própria dimensão aplicada por último.
    - Equivale a chamar `resolve` para cada chave.

Decisões arquiteturais:
    - Toda mutação e toda travessia ocorrem sob um único `threading.RLock`
    - Listas de ancestrais são memorizadas por nó; o cache inteiro é
      descartado a cada nova aresta
    - Arestas que criariam ciclo são rejeitadas com `CycleError` antes de
      qualquer mutação

Invariantes:
    - O grafo é acíclico em todo momento
    - Não existe remoção de valores, nós ou arestas
    - A mesma sequência de escritas produz sempre as mesmas resoluções

Limites explícitos:
    - Não persiste estado
    - Não conhece chaves de domínio (thresholds) nem defaults
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..errors import cycle_detected
from ..events import EventLog, LEVEL_DEBUG, LEVEL_ERROR, LEVEL_INFO
from ..exceptions import CycleError
from .ancestry import collect_ancestors, is_ancestor, specificity_key
from .dimension import Dimension
from .values import ConfigValue


EVENT_SOURCE = "graph"


@dataclass(frozen=True)
class _Entry:
    value: ConfigValue
    priority: int = 0


class ConfigGraph:
    """DAG de dimensões com armazenamento chave/valor por dimensão."""

    def __init__(self, *, events: Optional[EventLog] = None):
        self.events: EventLog = events if events is not None else EventLog()
        self._lock = threading.RLock()

        self._nodes: List[Dimension] = []
        self._index: Dict[Dimension, int] = {}
        self._parents: List[List[int]] = []
        self._children: List[List[int]] = []
        self._entries: List[Dict[str, _Entry]] = []

        self._ancestor_cache: Dict[int, List[int]] = {}

    # ------------------------------------------------------------------
    # Escrita
    # ------------------------------------------------------------------

    def add_dimension(self, dimension: Dimension) -> None:
        with self._lock:
            self._ensure_node(dimension)

    def add_hierarchy(self, parent: Dimension, child: Dimension) -> None:
        """
        Registra a aresta `parent -> child`, criando os nós ausentes.

        Raises:
            CycleError: Se `child` já alcança `parent` (inclui `parent == child`).
                O grafo permanece inalterado.
        """
        with self._lock:
            if parent == child or (
                parent in self._index
                and child in self._index
                and is_ancestor(self._index[child], self._index[parent], self._parents)
            ):
                self.events.log(
                    source=EVENT_SOURCE,
                    level=LEVEL_ERROR,
                    message="cycle rejected",
                    parent=str(parent),
                    child=str(child),
                )
                raise CycleError.from_payload(cycle_detected(parent=str(parent), child=str(child)))

            p = self._ensure_node(parent)
            c = self._ensure_node(child)
            if p in self._parents[c]:
                return

            self._parents[c].append(p)
            self._children[p].append(c)
            self._ancestor_cache.clear()
            self.events.log(
                source=EVENT_SOURCE,
                level=LEVEL_INFO,
                message="hierarchy added",
                parent=str(parent),
                child=str(child),
            )

    def set_configuration(self, dimension: Dimension, key: str, value: Any, priority: int = 0) -> None:
        """
        Insere ou substitui a entrada `(dimension, key)`.

        `value` pode ser um `ConfigValue` ou um valor Python simples, cuja
        variante é deduzida por `ConfigValue.infer`. A validação ocorre antes
        de qualquer mutação.
        """
        if not isinstance(key, str) or not key:
            raise ValueError("configuration key must be a non-empty string")
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise TypeError("priority must be an int")
        typed = ConfigValue.infer(value)

        with self._lock:
            idx = self._ensure_node(dimension)
            self._entries[idx][key] = _Entry(typed, priority)
            self.events.log(
                source=EVENT_SOURCE,
                level=LEVEL_DEBUG,
                message="configuration set",
                dimension=str(dimension),
                key=key,
                kind=typed.kind.value,
                priority=priority,
            )

    # ------------------------------------------------------------------
    # Leitura
    # ------------------------------------------------------------------

    def has_dimension(self, dimension: Dimension) -> bool:
        with self._lock:
            return dimension in self._index

    def dimensions(self) -> List[Dimension]:
        """Dimensões na ordem de registro."""
        with self._lock:
            return list(self._nodes)

    def parents(self, dimension: Dimension) -> List[Dimension]:
        with self._lock:
            idx = self._index.get(dimension)
            if idx is None:
                return []
            return [self._nodes[p] for p in self._parents[idx]]

    def children(self, dimension: Dimension) -> List[Dimension]:
        with self._lock:
            idx = self._index.get(dimension)
            if idx is None:
                return []
            return [self._nodes[c] for c in self._children[idx]]

    def ancestors(self, dimension: Dimension) -> List[Dimension]:
        """Ancestrais transitivos, do mais específico para o menos específico."""
        with self._lock:
            idx = self._index.get(dimension)
            if idx is None:
                return []
            return [self._nodes[a] for a in self._ancestors_of(idx)]

    def get_configuration(self, dimension: Dimension, key: str) -> Optional[ConfigValue]:
        """Valor definido na própria dimensão, sem herança."""
        with self._lock:
            idx = self._index.get(dimension)
            if idx is None:
                return None
            entry = self._entries[idx].get(key)
            return entry.value if entry is not None else None

    def resolve(self, dimension: Dimension, key: str) -> Optional[ConfigValue]:
        with self._lock:
            idx = self._index.get(dimension)
            if idx is None:
                return None

            own = self._entries[idx].get(key)
            if own is not None:
                return own.value

            best: Optional[Tuple[Tuple[int, int, int], ConfigValue]] = None
            for a in self._ancestors_of(idx):
                entry = self._entries[a].get(key)
                if entry is None:
                    continue
                rank = specificity_key(self._nodes[a].ordinal, entry.priority, a)
                if best is None or rank > best[0]:
                    best = (rank, entry.value)

            return best[1] if best is not None else None

    def get_effective_configuration(self, dimension: Dimension) -> Dict[str, ConfigValue]:
        with self._lock:
            idx = self._index.get(dimension)
            if idx is None:
                return {}

            ranked: Dict[str, Tuple[Tuple[int, int, int], ConfigValue]] = {}
            # menos específico primeiro; o mais específico sobrescreve
            for a in reversed(self._ancestors_of(idx)):
                for key, entry in self._entries[a].items():
                    rank = specificity_key(self._nodes[a].ordinal, entry.priority, a)
                    current = ranked.get(key)
                    if current is None or rank > current[0]:
                        ranked[key] = (rank, entry.value)

            result: Dict[str, ConfigValue] = {key: value for key, (_, value) in ranked.items()}
            for key, entry in self._entries[idx].items():
                result[key] = entry.value
            return result

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------

    def _ensure_node(self, dimension: Dimension) -> int:
        if not isinstance(dimension, Dimension):
            raise TypeError(f"expected Dimension, got {type(dimension).__name__}")
        idx = self._index.get(dimension)
        if idx is not None:
            return idx

        idx = len(self._nodes)
        self._nodes.append(dimension)
        self._index[dimension] = idx
        self._parents.append([])
        self._children.append([])
        self._entries.append({})
        self.events.log(
            source=EVENT_SOURCE,
            level=LEVEL_DEBUG,
            message="dimension added",
            dimension=str(dimension),
        )
        return idx

    def _ancestors_of(self, idx: int) -> List[int]:
        cached = self._ancestor_cache.get(idx)
        if cached is not None:
            return cached

        found = collect_ancestors(idx, self._parents)
        ordered = sorted(found, key=lambda a: (-self._nodes[a].ordinal, a))
        self._ancestor_cache[idx] = ordered
        return ordered
