# src/layerconf/core/config/__init__.py

"""
Camada de configuração do layerconf.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
compor via `$include`, mesclar e identificar configurações.

A configuração no layerconf é:
    - declarativa
    - determinística
    - composta explicitamente (nenhum include implícito)

Responsabilidades do pacote:
    - Resolução recursiva da diretiva `$include` (string ou lista de strings)
    - Resolução de caminhos relativos ao documento que declara o include
    - Deep-merge determinístico entre includes e chaves irmãs
    - Detecção de ciclos e limite de profundidade de includes
    - Carregamento de arquivos JSON / YAML e hashing canônico

Invariantes:
    - Nenhum `$include` permanece na árvore resolvida
    - A mesma entrada sempre produz a mesma configuração final
    - Qualquer falha aborta a resolução inteira

Limites explícitos:
    - Não valida semântica de domínio
    - Não mantém cache entre resoluções independentes
"""

from .errors import (
    CircularIncludeError,
    ConfigError,
    ConfigFileNotFoundError,
    ConfigIncludeError,
    ConfigParseError,
    ConfigReadError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .includes import (
    INCLUDE_KEY,
    MAX_INCLUDE_DEPTH,
    ResolutionContext,
    resolve_config_includes,
)
from .loader import load_config
from .merge import deep_merge
from .paths import resolve_include_path
from .sources import FileSourceReader, SourceReader
from .trace import IncludeTrace

__all__ = [
    "CircularIncludeError",
    "ConfigError",
    "ConfigFileNotFoundError",
    "ConfigIncludeError",
    "ConfigParseError",
    "ConfigReadError",
    "FileSourceReader",
    "INCLUDE_KEY",
    "IncludeTrace",
    "InvalidConfigRootTypeError",
    "MAX_INCLUDE_DEPTH",
    "ResolutionContext",
    "SourceReader",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "deep_merge",
    "load_config",
    "resolve_config_includes",
    "resolve_include_path",
]
