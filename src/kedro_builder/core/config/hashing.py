# src/kedro_builder/core/config/hashing.py
"""
Hashing canônico de configuração do Kedro Builder.

O hash identifica a configuração efetiva usada em um export e é registrado
no log estruturado do `BuildContext`, permitindo associar um projeto gerado
às opções que o produziram.

Política (v1):
    - JSON canônico (chaves ordenadas, separadores compactos, UTF-8)
    - SHA-256, hexadecimal de 64 caracteres
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera o hash determinístico de uma configuração.

    Configurações estruturalmente equivalentes (mesmas chaves e valores,
    em qualquer ordem de inserção) produzem o mesmo hash.

    Raises:
        TypeError: Se `config` não for um dicionário.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
