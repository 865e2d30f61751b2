# src/dimensional_config/core/config/errors.py
"""
Exceções da camada de configuração declarativa (taxonomias).

As exceções aqui definidas representam falhas estruturais ao carregar,
mesclar ou validar arquivos de taxonomia, antes que qualquer grafo seja
construído. Todas herdam de `ConfigError`.

Limites explícitos:
    - Não representam falhas do grafo em tempo de execução (ver `core.exceptions`)
    - Não realizam fallback ou recovery
"""


class ConfigError(Exception):
    """Base para erros de carregamento, merge e validação de taxonomia."""


class DefaultsNotFoundError(ConfigError):
    """
    O arquivo de defaults informado não existe.

    Quando um caminho de defaults é passado explicitamente, ele é obrigatório:
    não há inferência nem criação automática.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Extensão de arquivo não suportada.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz do arquivo não é um mapa (`dict`)."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo:
        - base:     {"world_types": {"FANTASY": {...}}}
        - override: {"world_types": "FANTASY"}

    Inteiros e floats são considerados compatíveis entre si; qualquer outro
    par de tipos distintos interrompe o merge sem resultado parcial.
    """


class InvalidTaxonomyError(ConfigError):
    """A taxonomia carregada não respeita o formato esperado."""
