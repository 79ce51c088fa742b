# src/kedro_builder/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Kedro Builder.

Todas as falhas de carregamento e merge de configuração herdam de
`ConfigError`, permitindo captura genérica sem confundir erros de
configuração com findings de validação do grafo.
"""


class ConfigError(Exception):
    """
    Exceção base para erros de configuração do Kedro Builder.

    Limites explícitos:
        - Não representa problema no grafo do usuário
        - Não representa falha de geração
    """


class DefaultsNotFoundError(ConfigError):
    """
    Arquivo de configuração base (defaults) inexistente.

    O arquivo de defaults é obrigatório: sem ele não há versão de Kedro,
    dependências ou type hint para a geração.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato de arquivo de configuração não suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Conteúdo raiz da configuração não é um dicionário.

    Listas ou escalares no root são rejeitados sem tentativa de
    normalização.
    """


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"project": {"dependencies": ["kedro"]}}
        - override: {"project": "kedro"}

    Nenhum merge parcial é produzido em caso de conflito.
    """
