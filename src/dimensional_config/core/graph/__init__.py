# src/dimensional_config/core/graph/__init__.py
"""
Grafo de configuração dimensional.

Componentes principais:
    - dimension    → `DimensionType` (ordenado) e `Dimension` (objeto de valor)
    - values       → `ConfigValue`, variante etiquetada validada na atribuição
    - ancestry     → travessia de ancestrais e chave de especificidade
    - config_graph → `ConfigGraph` (DAG + armazenamento chave/valor + resolução)

Invariantes:
    - O grafo é acíclico em todo momento
    - A própria dimensão sempre vence seus ancestrais
    - Ausência de valor é um resultado válido (`None` / `{}`), não um erro
"""

from .config_graph import ConfigGraph
from .dimension import Dimension, DimensionType
from .values import ConfigValue, ValueKind

__all__ = [
    "ConfigGraph",
    "ConfigValue",
    "Dimension",
    "DimensionType",
    "ValueKind",
]
