# tests/conftest.py
"""
Fixtures compartilhados para testes do layerconf.

Este módulo define fixtures reutilizáveis que fornecem:
- um SourceReader em memória (mapa caminho -> valor)
- um atalho de resolução com documento raiz padrão
- árvores de arquivos reais em `tmp_path` para testes do loader

O objetivo destas fixtures é permitir testes do motor de includes sem
depender de filesystem, e testes do loader com filesystem isolado.

Invariantes:
    - Nenhuma fixture mantém estado entre testes
    - O reader em memória serializa via JSON, como um arquivo real faria
"""

import json

import pytest


ROOT_DOCUMENT = "/config/app.json"


class DictSourceReader:
    """SourceReader em memória: cada leitura serializa o valor registrado."""

    def __init__(self, files):
        self.files = dict(files)
        self.reads = []

    def read_file(self, path):
        self.reads.append(path)
        if path in self.files:
            return json.dumps(self.files[path])
        raise FileNotFoundError(f"ENOENT: no such file: {path}")

    def parse(self, raw):
        return json.loads(raw)


@pytest.fixture
def make_reader():
    """Fábrica de `DictSourceReader` a partir de um mapa caminho -> valor."""

    def _make(files=None):
        return DictSourceReader(files or {})

    return _make


@pytest.fixture
def resolve(make_reader):
    """
    Atalho para `resolve_config_includes` com reader em memória.

    O documento raiz padrão é `/config/app.json`; includes relativos
    partem de `/config/`.
    """
    from layerconf.core.config.includes import resolve_config_includes

    def _resolve(value, files=None, root_path=ROOT_DOCUMENT, **kwargs):
        return resolve_config_includes(value, root_path, make_reader(files), **kwargs)

    return _resolve


@pytest.fixture
def write_tree(tmp_path):
    """
    Escreve uma árvore de arquivos de configuração em `tmp_path`.

    Valores `str` são gravados como texto bruto; demais valores são
    serializados como JSON.
    """

    def _write(files):
        for rel, content in files.items():
            target = tmp_path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, str):
                target.write_text(content, encoding="utf-8")
            else:
                target.write_text(json.dumps(content, indent=2), encoding="utf-8")
        return tmp_path

    return _write
