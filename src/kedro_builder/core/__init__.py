# src/kedro_builder/core/__init__.py
"""
Core do Kedro Builder.

Este pacote reúne a implementação canônica e independente de UI do
Kedro Builder: o modelo de entidades, o grafo de dependências derivado,
as regras de validação estrutural e a camada de configuração.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada com grafos sintéticos
    - livre de dependências de canvas, formulários ou armazenamento
    - tolerante a snapshots transitoriamente inconsistentes

Componentes principais:
    - model      → Node, Dataset, Connection, ProjectMetadata e Snapshot
    - graph      → grafo node → node e detecção de ciclos
    - validation → findings, regras estruturais e agregador
    - config     → defaults + overrides locais, deep-merge e hashing

Limites explícitos:
    - Não gera arquivos (responsabilidade de `codegen`)
    - Não materializa projetos (responsabilidade de `export`)
"""
