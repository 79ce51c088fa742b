# src/kedro_builder/core/graph/__init__.py
"""
Grafo implícito node → node.

O modelo de conexões só liga nodes a datasets. A alcançabilidade entre
nodes é derivada (produtores × consumidores de cada dataset) a cada
chamada, nunca armazenada.
"""
from .builder import DependencyGraph, build_dependency_graph
from .cycles import CycleReport, detect_cycles, find_cycles

__all__ = [
    "DependencyGraph",
    "build_dependency_graph",
    "CycleReport",
    "detect_cycles",
    "find_cycles",
]
