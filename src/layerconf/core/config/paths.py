# src/layerconf/core/config/paths.py
"""
Resolução de caminhos de `$include`.

Caminhos absolutos são usados como declarados; caminhos relativos são
resolvidos a partir do diretório do documento que declara o include.
O resultado é sempre normalizado, de modo que grafias diferentes do mesmo
caminho (`./a/../b.json`, `b.json`) produzam a mesma string. A detecção de
ciclos depende dessa igualdade.
"""

import os


def resolve_include_path(candidate: str, current_path: str) -> str:
    """
    Resolve `candidate` para um caminho absoluto normalizado.

    Args:
        candidate (str): Caminho declarado na diretiva `$include`.
        current_path (str): Caminho absoluto do documento que contém o include.

    Returns:
        str: Caminho absoluto normalizado.

    Segmentos `..` podem subir acima do diretório do documento raiz.
    """
    if os.path.isabs(candidate):
        return os.path.normpath(candidate)
    base_dir = os.path.dirname(current_path)
    return os.path.normpath(os.path.join(base_dir, candidate))
