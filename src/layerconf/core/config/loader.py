# src/layerconf/core/config/loader.py
"""
Loader canônico de configuração do layerconf.

Este módulo é responsável por carregar um documento raiz de configuração,
validar sua estrutura mínima e resolver todas as diretivas `$include`
nele contidas, produzindo a configuração efetiva.

Responsabilidades do módulo:
    - Carregar o documento raiz em JSON ou YAML
    - Validar requisitos estruturais mínimos (tipo raiz)
    - Resolver includes usando o caminho do documento raiz como base

Princípios fundamentais:
    - Erros estruturais são tratados como falhas fatais
    - Nenhuma configuração parcial é devolvida
    - A mesma entrada sempre produz a mesma configuração final

Invariantes:
    - O documento raiz é obrigatório
    - O resultado é sempre um dicionário puro (`dict`)

Limites explícitos:
    - Não valida semântica de domínio
    - Não persiste configuração ou hash
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from .errors import (
    ConfigFileNotFoundError,
    ConfigParseError,
    ConfigReadError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .includes import MAX_INCLUDE_DEPTH, resolve_config_includes
from .sources import FileSourceReader, SourceReader
from .trace import IncludeTrace
from .values import type_name

SUPPORTED_SUFFIXES = {".json", ".yaml", ".yml"}


def _load_root(path: Path, reader: SourceReader) -> Dict[str, Any]:
    """
    Lê e interpreta o documento raiz, validando sua estrutura básica.

    Decisões arquiteturais:
        - O formato é determinado pela extensão do arquivo
        - Arquivos ausentes geram `ConfigFileNotFoundError`
        - Demais falhas de leitura geram `ConfigReadError`
        - O conteúdo raiz deve ser um dicionário (`dict`)

    Raises:
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        ConfigFileNotFoundError: Se o arquivo não existir.
        ConfigReadError: Se o arquivo existir mas não puder ser lido.
        ConfigParseError: Se o conteúdo não puder ser interpretado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise UnsupportedConfigFormatError(f"Unsupported config format: {path.suffix}")

    try:
        raw = reader.read_file(str(path))
    except FileNotFoundError as exc:
        raise ConfigFileNotFoundError(f"Config file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigReadError(f"Failed to read config file: {path}") from exc

    try:
        data = reader.parse(raw)
    except Exception as exc:
        raise ConfigParseError(f"Failed to parse config file: {path}") from exc

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root must be an object, got {type_name(data)}"
        )

    return data


def load_config(
    path: Union[str, Path],
    *,
    reader: Optional[SourceReader] = None,
    max_depth: int = MAX_INCLUDE_DEPTH,
    trace: Optional[IncludeTrace] = None,
) -> Dict[str, Any]:
    """
    Carrega um documento de configuração e resolve seus includes.

    Política de resolução:
        - O caminho é convertido para absoluto antes da leitura
        - Includes relativos partem do diretório do documento raiz
        - Após a resolução, a raiz ainda deve ser um dicionário

    Args:
        path (str | Path): Caminho do documento raiz.
        reader (Optional[SourceReader]): Leitor de fontes; padrão `FileSourceReader()`.
        max_depth (int): Profundidade máxima de includes.
        trace (Optional[IncludeTrace]): Destino opcional dos eventos da resolução.

    Returns:
        Dict[str, Any]: Configuração final resolvida.

    Raises:
        ConfigFileNotFoundError: Se o documento raiz não existir.
        ConfigReadError: Se o documento raiz não puder ser lido.
        UnsupportedConfigFormatError: Se o formato não for suportado.
        ConfigParseError: Se o documento raiz não puder ser interpretado.
        InvalidConfigRootTypeError: Se a raiz não for um dicionário.
        ConfigIncludeError: Se a resolução de algum include falhar.
        CircularIncludeError: Se houver include circular.
    """
    root_path = Path(path).absolute()
    if reader is None:
        reader = FileSourceReader()

    data = _load_root(root_path, reader)

    resolved = resolve_config_includes(
        data,
        str(root_path),
        reader,
        max_depth=max_depth,
        trace=trace,
    )

    if not isinstance(resolved, dict):
        raise InvalidConfigRootTypeError(
            f"Resolved config root must be an object, got {type_name(resolved)}"
        )

    return resolved
