# src/dimensional_config/core/graph/ancestry.py
"""
Travessia de ancestrais e ordenação por especificidade.

Este módulo opera exclusivamente sobre índices inteiros (arena): cada
dimensão registrada no grafo recebe um índice estável, e as arestas são
listas de índices de pais por nó.

Decisões arquiteturais:
    - A travessia é iterativa (pilha explícita) com conjunto de visitados,
      de modo que ancestrais compartilhados (losangos) são visitados uma vez
    - A especificidade é decidida pelo ordinal do tipo, não pela distância
      em arestas
    - Empates no mesmo ordinal: maior `priority` vence; persistindo o empate,
      vence a dimensão registrada primeiro (menor índice)

Limites explícitos:
    - Não conhece valores de configuração além da prioridade informada
    - Não aplica locks (responsabilidade do ConfigGraph)
"""

from __future__ import annotations

from typing import List, Sequence, Set, Tuple


def collect_ancestors(start: int, parents: Sequence[Sequence[int]]) -> List[int]:
    """
    Retorna todos os ancestrais transitivos de `start`, sem o próprio nó.

    A ordem do retorno é a ordem de descoberta (DFS sobre pais, respeitando
    a ordem de inserção das arestas); quem precisa de ordem por
    especificidade deve ordenar o resultado.
    """
    visited: Set[int] = {start}
    found: List[int] = []
    stack: List[int] = list(reversed(parents[start]))

    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        found.append(node)
        stack.extend(reversed(parents[node]))

    return found


def is_ancestor(candidate: int, of: int, parents: Sequence[Sequence[int]]) -> bool:
    """Indica se `candidate` é alcançável a partir de `of` subindo por pais."""
    if candidate == of:
        return True
    visited: Set[int] = {of}
    stack: List[int] = list(parents[of])
    while stack:
        node = stack.pop()
        if node == candidate:
            return True
        if node in visited:
            continue
        visited.add(node)
        stack.extend(parents[node])
    return False


def specificity_key(ordinal: int, priority: int, index: int) -> Tuple[int, int, int]:
    """Chave de ordenação: maior é mais específico."""
    return (ordinal, priority, -index)
