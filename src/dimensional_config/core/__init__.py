# src/dimensional_config/core/__init__.py
"""
Core do Dimensional Config.

Este pacote contém o motor de resolução hierárquica, independente de
qualquer domínio específico:

    - core.graph   → DAG de dimensões, valores tipados e resolução
    - core.config  → carregamento, merge e hashing de configuração declarativa
    - core.events  → log estruturado de eventos
    - core.errors / core.exceptions → catálogo de erros e exceções tipadas

Princípios fundamentais:
    - Estrutura em memória, processo único, escrita exclusiva e leitura frequente
    - Resolução determinística
    - Nenhum estado global: cada grafo é uma instância independente

Limites explícitos:
    - Não conhece thresholds nem defaults de domínio
    - Não expõe HTTP, persistência ou mensageria
"""
