# src/layerconf/core/config/sources.py
"""
Contrato de leitura de fontes de configuração.

Este módulo define o protocolo `SourceReader`, a única via pela qual o
motor de includes acessa arquivos, e a implementação padrão baseada em
filesystem (`FileSourceReader`).

Responsabilidades de um SourceReader:
    - ler o conteúdo bruto (texto) de um caminho absoluto
    - interpretar texto bruto como uma árvore de valores

Princípios fundamentais:
    - O motor de includes não realiza I/O diretamente
    - Leitura e parse são operações bloqueantes e síncronas
    - Falhas são propagadas; o motor as classifica e encadeia

Formatos suportados por `FileSourceReader` (v1):
    - JSON (`json.loads`)
    - YAML (`yaml.safe_load`)
    - auto: `json.loads` primeiro, `yaml.safe_load` se o texto não for JSON
      (YAML 1.1 lê `1e3` como string e rejeita indentação com tab)

Limites explícitos:
    - Não mantém cache de conteúdo entre leituras
    - Não valida schema do conteúdo parseado
"""

from __future__ import annotations

from pathlib import Path
import json
from typing import Any, Protocol, runtime_checkable

import yaml  # PyYAML

SUPPORTED_FORMATS = ("auto", "json", "yaml")


@runtime_checkable
class SourceReader(Protocol):
    """
    Capacidade de leitura usada pelo motor de includes.

    A conformidade é estrutural (duck typing); nenhuma herança é exigida.
    Qualquer exceção levantada por `read_file` ou `parse` é convertida em
    `ConfigIncludeError` pelo motor, com a causa original encadeada.
    """

    def read_file(self, path: str) -> str:
        """Lê o conteúdo bruto de um caminho absoluto."""
        ...

    def parse(self, raw: str) -> Any:
        """Interpreta o texto bruto como árvore de valores."""
        ...


class FileSourceReader:
    """
    SourceReader padrão baseado em filesystem.

    Args:
        fmt (str): `"json"`, `"yaml"` ou `"auto"` (JSON; YAML quando o
            texto não é JSON válido).
        encoding (str): Encoding usado na leitura dos arquivos.

    Documentos vazios são interpretados como dicionários vazios.
    """

    def __init__(self, fmt: str = "auto", encoding: str = "utf-8") -> None:
        if fmt not in SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported source format: {fmt!r} (expected one of {SUPPORTED_FORMATS})"
            )
        self.fmt = fmt
        self.encoding = encoding

    def read_file(self, path: str) -> str:
        return Path(path).read_text(encoding=self.encoding)

    def parse(self, raw: str) -> Any:
        if self.fmt == "json":
            if not raw.strip():
                return {}
            return json.loads(raw)

        if self.fmt == "auto":
            try:
                return json.loads(raw)
            except json.JSONDecodeError:
                pass

        data = yaml.safe_load(raw)
        if data is None:
            data = {}
        return data
