# src/layerconf/core/config/values.py
"""
Classificação dos valores de uma árvore de configuração.

Uma árvore de configuração parseada é composta apenas por:
    - None (null), bool, int/float, str
    - list (sequência ordenada de valores)
    - dict (mapa str -> valor, com ordem de inserção)

Os nomes de tipo usados nas mensagens de erro seguem o vocabulário dos
formatos serializados (`object`, `array`, `string`, ...), e não os nomes
das classes Python.
"""

from typing import Any


def type_name(value: Any) -> str:
    """
    Retorna o nome de tipo reportado em mensagens de erro.

    `None` é reportado como `object`, mantendo o vocabulário estável das
    mensagens (`expected string, got object`). `bool` é testado antes de
    `int` porque `bool` é subclasse de `int`.
    """
    if value is None or isinstance(value, dict):
        return "object"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return type(value).__name__
