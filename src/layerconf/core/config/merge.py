# src/layerconf/core/config/merge.py
"""
Utilitário canônico de deep-merge de configuração.

Este módulo implementa a política de deep-merge usada pelo layerconf tanto
para combinar múltiplos alvos de um `$include` quanto para aplicar chaves
irmãs sobre o conteúdo incluído.

Política de merge (v1):
    - dict + dict → merge recursivo por chave
    - list + list → concatenação (base antes do override)
    - qualquer outro caso → override substitui a base
    - override omitido → base preservada; `None` explícito é null e substitui

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado durante o processo
    - O merge é total: não existe caso de erro

Invariantes:
    - Chaves presentes em qualquer operando aparecem no resultado
    - Ordem de chaves: chaves da base, seguidas das chaves exclusivas do override
    - O resultado não compartilha containers mutáveis com os inputs

Limites explícitos:
    - Não carrega arquivos de configuração
    - Não realiza coerção de tipos
"""

from copy import deepcopy
from typing import Any, Dict

# Marcador privado de override ausente; `None` é o valor null da árvore.
_ABSENT = object()


def deep_merge(base: Any, override: Any = _ABSENT) -> Any:
    """
    Realiza um deep-merge determinístico entre dois valores de configuração.

    Omitir `override` significa override ausente: a base é devolvida.
    `None` passado explicitamente é o valor null e substitui a base,
    como qualquer outro escalar.

    Args:
        base (Any): Valor base (ex.: resultado acumulado dos includes).
        override (Any): Valor com precedência sobre a base (opcional).

    Returns:
        Any: Novo valor resultante do merge.
    """
    if override is _ABSENT:
        return deepcopy(base)
    return _merge_values(base, override)


def _merge_values(base: Any, override: Any) -> Any:
    if isinstance(base, dict) and isinstance(override, dict):
        return _merge_objects(base, override)

    if isinstance(base, list) and isinstance(override, list):
        return deepcopy(base) + deepcopy(override)

    return deepcopy(override)


def _merge_objects(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}

    for key, base_value in base.items():
        if key in override:
            result[key] = _merge_values(base_value, override[key])
        else:
            result[key] = deepcopy(base_value)

    for key, override_value in override.items():
        if key not in base:
            result[key] = deepcopy(override_value)

    return result
