"""
layerconf — composição de configuração declarativa via `$include`.

Este pacote raiz define o namespace público do layerconf, uma biblioteca
para montar um documento de configuração a partir de múltiplos arquivos,
com semântica de merge determinística.

Princípios centrais:
    - Includes são resolvidos de forma recursiva, síncrona e em ordem declarada
    - O merge é puramente funcional (nenhum input é mutado)
    - Ciclos e profundidade excessiva são erros explícitos
    - Nenhuma resolução parcial é devolvida ao chamador

Arquitetura em alto nível:
    - core.config.includes → motor de resolução de `$include`
    - core.config.merge    → política de deep-merge
    - core.config.sources  → leitura e parse de arquivos (JSON / YAML)
    - core.config.loader   → carregamento de um documento raiz completo
    - core.config.hashing  → identidade estrutural da configuração resolvida

Limites explícitos:
    - Não valida schema da configuração final
    - Não interpreta o conteúdo da configuração para a aplicação
"""

from .core.config import (
    CircularIncludeError,
    ConfigError,
    ConfigIncludeError,
    FileSourceReader,
    IncludeTrace,
    compute_config_hash,
    deep_merge,
    load_config,
    resolve_config_includes,
)

__version__ = "0.1.0"

__all__ = [
    "CircularIncludeError",
    "ConfigError",
    "ConfigIncludeError",
    "FileSourceReader",
    "IncludeTrace",
    "compute_config_hash",
    "deep_merge",
    "load_config",
    "resolve_config_includes",
]
