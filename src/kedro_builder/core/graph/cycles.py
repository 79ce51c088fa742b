# src/kedro_builder/core/graph/cycles.py
"""
Detecção de ciclos no grafo de dependências entre nodes.

Algoritmo:
    DFS iterativa (pilha explícita) com conjunto `visited` e conjunto
    "na pilha". A busca parte de cada node ainda não visitado, em ordem de
    declaração. Ao encontrar um vizinho que está na pilha, o caminho
    acumulado desde a raiz, mais o próprio vizinho, é o ciclo reportado e a
    busca a partir dessa raiz termina. Nodes ainda não visitados seguem como
    raízes seguintes.

Decisões arquiteturais:
    - Sem recursão: cadeias longas não esgotam a pilha do interpretador
    - Vizinhos são visitados em ordem de declaração dos nodes, de modo que
      o relatório é determinístico
    - Ciclos são deduplicados pelo conjunto ordenado de ids membros

Invariantes:
    - Após uma execução completa todo node aparece em `visited`
    - No máximo um ciclo por raiz da DFS
    - Ciclos com o mesmo conjunto de membros geram um único finding
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterator, List, Optional, Set, Tuple

from kedro_builder.core.model.entities import Snapshot
from kedro_builder.core.validation.findings import ComponentType, Finding, error

from .builder import DependencyGraph, build_dependency_graph


CYCLE_SUGGESTION = "Remove one connection to break the cycle"


@dataclass(frozen=True)
class CycleReport:
    """Ciclos encontrados (como caminhos fechados de ids) e nodes visitados."""

    cycles: Tuple[Tuple[str, ...], ...] = ()
    visited: FrozenSet[str] = field(default_factory=frozenset)


def find_cycles(graph: DependencyGraph, order: Optional[List[str]] = None) -> CycleReport:
    """
    Encontra o primeiro ciclo alcançável de cada raiz da DFS.

    Args:
        graph: mapa node → sucessores.
        order: ordem de declaração dos nodes; por padrão, a ordem das chaves.

    Returns:
        CycleReport: cada ciclo é o caminho desde a raiz até o vizinho
        repetido, ex.: `(a, b, c, b)`.
    """
    order = list(order) if order is not None else list(graph.keys())
    rank: Dict[str, int] = {nid: i for i, nid in enumerate(order)}

    def neighbours(node_id: str) -> Iterator[str]:
        succ = graph.get(node_id, set())
        return iter(sorted(succ, key=lambda n: (rank.get(n, len(rank)), n)))

    visited: Set[str] = set()
    seen_keys: Set[Tuple[str, ...]] = set()
    cycles: List[Tuple[str, ...]] = []

    for start in order:
        if start in visited:
            continue

        visited.add(start)
        path: List[str] = [start]
        on_stack: Set[str] = {start}
        stack: List[Iterator[str]] = [neighbours(start)]

        while stack:
            nxt = next(stack[-1], None)
            if nxt is None:
                stack.pop()
                on_stack.discard(path.pop())
                continue

            if nxt in on_stack:
                cycle = tuple(path) + (nxt,)
                key = tuple(sorted(set(cycle)))
                if key not in seen_keys:
                    seen_keys.add(key)
                    cycles.append(cycle)
                break

            if nxt in visited:
                continue

            visited.add(nxt)
            path.append(nxt)
            on_stack.add(nxt)
            stack.append(neighbours(nxt))

    return CycleReport(cycles=tuple(cycles), visited=frozenset(visited))


def _cycle_finding(cycle: Tuple[str, ...], names: Dict[str, str]) -> Finding:
    labels = " → ".join(names.get(nid) or nid for nid in cycle)
    return error(
        f"error-circular-{cycle[0]}",
        cycle[0],
        ComponentType.PIPELINE,
        f"Circular dependency detected: {labels}",
        CYCLE_SUGGESTION,
    )


def detect_cycles(snapshot: Snapshot) -> Tuple[List[Finding], FrozenSet[str]]:
    """
    Roda a detecção de ciclos sobre o snapshot.

    Returns:
        `(findings, visited)`: um erro por ciclo distinto e o conjunto de
        nodes cobertos pela busca.
    """
    graph = build_dependency_graph(snapshot)
    report = find_cycles(graph, order=list(snapshot.node_ids))
    names = {n.id: n.name for n in snapshot.nodes}
    return [_cycle_finding(c, names) for c in report.cycles], report.visited
