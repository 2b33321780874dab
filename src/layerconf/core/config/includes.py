# src/layerconf/core/config/includes.py
"""
Motor canônico de resolução de `$include`.

Este módulo resolve a diretiva `$include` embutida em uma árvore de
configuração já parseada, produzindo uma nova árvore sem nenhuma diretiva
remanescente.

Formas aceitas da diretiva:
    - string            → um único arquivo
    - lista de strings  → vários arquivos, mesclados na ordem declarada

Política de resolução (v1):
    - primitivos são devolvidos sem alteração
    - listas e dicts são percorridos recursivamente, preservando ordem
    - um dict com `$include` é substituído pelo conteúdo incluído,
      mesclado com as chaves irmãs (irmãs têm precedência)
    - includes dentro de arquivos incluídos são resolvidos antes do merge

Princípios fundamentais:
    - Resolução síncrona, depth-first e estritamente sequencial
    - O contexto (cadeia, profundidade, documento atual) é imutável e
      copiado a cada salto; não existe estado global
    - Qualquer falha aborta a resolução inteira

Invariantes:
    - Um caminho absoluto nunca aparece duas vezes na cadeia ativa
    - A profundidade aumenta exatamente 1 por salto de include
    - A profundidade máxima (10) é permitida; 11 não é

Limites explícitos:
    - Não realiza I/O diretamente (delegado ao SourceReader)
    - Não mantém cache de arquivos entre resoluções
    - Não valida schema da árvore resolvida
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any, Dict, List, Optional, Tuple

from .errors import CircularIncludeError, ConfigIncludeError
from .merge import deep_merge
from .paths import resolve_include_path
from .sources import SourceReader
from .trace import (
    INCLUDE_FAILED_EVENT,
    INCLUDE_READ_EVENT,
    INCLUDE_RESOLVED_EVENT,
    IncludeTrace,
)
from .values import type_name

INCLUDE_KEY = "$include"
MAX_INCLUDE_DEPTH = 10


@dataclass(frozen=True)
class ResolutionContext:
    """
    Estado de uma descida recursiva de includes.

    Campos canônicos:
    - current_path: caminho absoluto do documento sendo expandido
    - chain: caminhos absolutos abertos na descida (raiz primeiro)
    - depth: número de saltos de include desde a raiz (raiz = 0)
    """

    current_path: str
    chain: Tuple[str, ...]
    depth: int = 0

    @classmethod
    def root(cls, path: str) -> "ResolutionContext":
        path = os.path.normpath(path)
        return cls(current_path=path, chain=(path,), depth=0)

    def descend(self, path: str) -> "ResolutionContext":
        return ResolutionContext(
            current_path=path,
            chain=self.chain + (path,),
            depth=self.depth + 1,
        )


class _IncludeResolver:
    """Percorre uma árvore com um SourceReader e limites fixos por chamada."""

    def __init__(
        self,
        reader: SourceReader,
        *,
        max_depth: int,
        trace: Optional[IncludeTrace],
    ) -> None:
        self.reader = reader
        self.max_depth = max_depth
        self.trace = trace

    # -----------------------------
    # Walk
    # -----------------------------
    def resolve_value(self, value: Any, ctx: ResolutionContext) -> Any:
        if isinstance(value, list):
            return [self.resolve_value(item, ctx) for item in value]

        if isinstance(value, dict):
            if INCLUDE_KEY in value:
                return self._resolve_include_object(value, ctx)
            return {key: self.resolve_value(item, ctx) for key, item in value.items()}

        return value

    def _resolve_include_object(self, obj: Dict[str, Any], ctx: ResolutionContext) -> Any:
        include_result = self._expand_directive(obj[INCLUDE_KEY], ctx)

        sibling_keys = [key for key in obj if key != INCLUDE_KEY]
        if not sibling_keys:
            return include_result

        if not isinstance(include_result, dict):
            raise ConfigIncludeError(
                "Sibling keys require included content to be an object, "
                f"got {type_name(include_result)}"
            )

        siblings = {key: self.resolve_value(obj[key], ctx) for key in sibling_keys}
        return deep_merge(include_result, siblings)

    # -----------------------------
    # Include expansion
    # -----------------------------
    def _expand_directive(self, directive: Any, ctx: ResolutionContext) -> Any:
        paths = _directive_paths(directive)

        resolved: List[Tuple[str, Any]] = [self._load_include(path, ctx) for path in paths]

        if not resolved:
            return {}
        if len(resolved) == 1:
            return resolved[0][1]

        first_kind = _target_kind(resolved[0][1])
        result: Any = {}
        for path, value in resolved:
            kind = _target_kind(value)
            if kind != first_kind:
                raise ConfigIncludeError(
                    "Cannot merge include targets of different types: "
                    f"{first_kind} and {kind} ({path})",
                    include_path=path,
                )
            result = deep_merge(result, value)
        return result

    def _load_include(self, candidate: str, ctx: ResolutionContext) -> Tuple[str, Any]:
        path = resolve_include_path(candidate, ctx.current_path)

        if path in ctx.chain:
            raise CircularIncludeError(ctx.chain + (path,))

        if ctx.depth + 1 > self.max_depth:
            raise ConfigIncludeError(
                f"Maximum include depth ({self.max_depth}) exceeded at: {path}",
                include_path=path,
            )

        self._log("INFO", INCLUDE_READ_EVENT, path=path, depth=ctx.depth + 1, parent=ctx.current_path)

        try:
            raw = self.reader.read_file(path)
        except Exception as exc:
            self._log("ERROR", INCLUDE_FAILED_EVENT, path=path, error=str(exc))
            raise ConfigIncludeError(
                f"Failed to read include file: {path}",
                include_path=path,
                cause=exc,
            ) from exc

        try:
            parsed = self.reader.parse(raw)
        except Exception as exc:
            self._log("ERROR", INCLUDE_FAILED_EVENT, path=path, error=str(exc))
            raise ConfigIncludeError(
                f"Failed to parse include file: {path}",
                include_path=path,
                cause=exc,
            ) from exc

        value = self.resolve_value(parsed, ctx.descend(path))
        self._log("INFO", INCLUDE_RESOLVED_EVENT, path=path, depth=ctx.depth + 1)
        return path, value

    def _log(self, level: str, message: str, **extra: Any) -> None:
        if self.trace is not None:
            self.trace.log(level=level, message=message, **extra)


def _target_kind(value: Any) -> str:
    # null não se mistura com objetos no fold de alvos
    if value is None:
        return "null"
    return type_name(value)


def _directive_paths(directive: Any) -> List[str]:
    """Valida a diretiva e a normaliza para uma lista ordenada de caminhos."""
    if isinstance(directive, str):
        return [directive]

    if not isinstance(directive, list):
        raise ConfigIncludeError(
            "Invalid $include value: expected string or array of strings, "
            f"got {type_name(directive)}"
        )

    for index, item in enumerate(directive):
        if not isinstance(item, str):
            raise ConfigIncludeError(
                f"Invalid $include array item at index {index}: "
                f"expected string, got {type_name(item)}"
            )
    return list(directive)


def resolve_config_includes(
    value: Any,
    root_path: str,
    reader: SourceReader,
    *,
    max_depth: int = MAX_INCLUDE_DEPTH,
    trace: Optional[IncludeTrace] = None,
) -> Any:
    """
    Resolve todas as diretivas `$include` de uma árvore de configuração.

    A árvore raiz é fornecida já parseada; `root_path` não é lido, servindo
    apenas como base para includes relativos e como primeiro elemento da
    cadeia de detecção de ciclos.

    Args:
        value (Any): Árvore de configuração parseada.
        root_path (str): Caminho absoluto do documento de origem da árvore.
        reader (SourceReader): Leitura e parse dos arquivos incluídos.
        max_depth (int): Número máximo de saltos de include.
        trace (Optional[IncludeTrace]): Destino opcional dos eventos da resolução.

    Returns:
        Any: Nova árvore, sem nenhuma chave `$include` alcançável.

    Raises:
        ConfigIncludeError: Diretiva inválida, falha de leitura/parse,
            chaves irmãs sobre conteúdo não-objeto ou profundidade excedida.
        CircularIncludeError: Um caminho reaparece na cadeia ativa.
    """
    resolver = _IncludeResolver(reader, max_depth=max_depth, trace=trace)
    return resolver.resolve_value(value, ResolutionContext.root(root_path))
