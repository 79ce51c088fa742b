# src/kedro_builder/__init__.py
"""
Kedro Builder — compilação determinística de grafos visuais em projetos Kedro.

Este pacote raiz define o namespace público do Kedro Builder, o núcleo que
recebe um snapshot do grafo montado visualmente (nodes, datasets e conexões)
e produz um scaffold completo de projeto Kedro.

Princípios centrais:
    - O grafo de execução é derivado (node → dataset → node), nunca armazenado
    - Validação estrutural é o único portão antes da geração
    - A geração é determinística: mesmo snapshot, mesmos bytes
    - Nenhum estado global: toda função recebe um snapshot explícito

Arquitetura em alto nível:
    - core.model      → entidades imutáveis, endpoints e carregamento de snapshots
    - core.graph      → grafo de dependências derivado e detecção de ciclos
    - core.validation → regras estruturais e agregador de findings
    - core.config     → carregamento, merge e hashing de configuração
    - codegen         → geradores puros de cada artefato do projeto
    - export          → montagem do mapa path → conteúdo e materialização

Limites explícitos:
    - Não executa o pipeline gerado
    - Não valida o conteúdo das funções escritas pelo usuário
    - Não depende de UI, canvas ou armazenamento do navegador
"""
# src/kedro_builder/__init__.py
from .core.validation import validate_pipeline, ValidationResult
from .export.assembler import assemble_project

__version__ = "0.1.0"

__all__ = ["validate_pipeline", "ValidationResult", "assemble_project", "__version__"]
