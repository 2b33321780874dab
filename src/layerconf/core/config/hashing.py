# src/layerconf/core/config/hashing.py
"""
Hashing canônico de configuração do layerconf.

Este módulo gera um hash determinístico da configuração resolvida (após
todos os `$include`), representando sua **identidade estrutural**.

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Datas e timestamps vindos de YAML são serializados em ISO-8601
    - Codificação UTF-8
    - Algoritmo SHA-256

Invariantes:
    - Configurações estruturalmente equivalentes produzem o mesmo hash,
      independentemente de quais arquivos as compuseram
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres

Limites explícitos:
    - Não carrega nem resolve configuração
    - Não persiste o hash
"""

from datetime import date
import hashlib
import json
from typing import Any, Dict


def _json_default(value: Any) -> str:
    # yaml.safe_load produz date/datetime para escalares de timestamp
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Value of type {type(value).__name__} is not hashable as config")


def canonical_json(config: Dict[str, Any]) -> str:
    return json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=_json_default,
    )


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico da configuração resolvida.

    Args:
        config (Dict[str, Any]): Configuração efetiva.

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário, ou se
            contiver valores sem representação JSON.
    """
    if not isinstance(config, dict):
        raise TypeError(f"Config to hash must be a dict, got: {type(config).__name__}")

    return hashlib.sha256(canonical_json(config).encode("utf-8")).hexdigest()
