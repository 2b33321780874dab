# src/layerconf/core/config/trace.py
"""
IncludeTrace — log estruturado de uma resolução de includes.

O trace é criado pelo chamador, passado explicitamente para a resolução e
preenchido com eventos (dicts) à medida que arquivos são lidos e
resolvidos. Cada resolução possui o seu próprio trace; nada é mantido em
estado global.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

INCLUDE_READ_EVENT = "include.read"
INCLUDE_RESOLVED_EVENT = "include.resolved"
INCLUDE_FAILED_EVENT = "include.failed"


@dataclass
class IncludeTrace:
    """
    Eventos de uma resolução de `$include`.

    Campos canônicos de cada evento:
    - level: "INFO" ou "ERROR"
    - message: código curto do evento (ex.: `include.read`)
    - timestamp: UTC em ISO-8601
    - extras: `path`, `depth`, `parent`, `error` conforme o evento
    """

    events: List[Dict[str, Any]] = field(default_factory=list)

    def log(self, *, level: str, message: str, **extra: Any) -> None:
        event = {
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def files(self) -> List[str]:
        """Retorna os caminhos incluídos, na ordem em que foram lidos."""
        return [e["path"] for e in self.events if e["message"] == INCLUDE_READ_EVENT]

    def errors(self) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["level"] == "ERROR"]
