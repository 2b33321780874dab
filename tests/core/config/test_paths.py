# tests/core/config/test_paths.py
"""Testes da resolução de caminhos de `$include`."""

from layerconf.core.config.paths import resolve_include_path


def test_relative_path_resolves_from_document_directory():
    assert resolve_include_path("./agents.json", "/config/app.json") == "/config/agents.json"
    assert resolve_include_path("agents.json", "/config/app.json") == "/config/agents.json"


def test_nested_relative_path():
    out = resolve_include_path("./clients/mueller/agents.json", "/config/app.json")
    assert out == "/config/clients/mueller/agents.json"


def test_absolute_path_used_verbatim():
    out = resolve_include_path("/etc/layerconf/agents.json", "/config/app.json")
    assert out == "/etc/layerconf/agents.json"


def test_parent_segments_climb_above_root_directory():
    out = resolve_include_path("../../shared/common.json", "/config/sub/app.json")
    assert out == "/shared/common.json"


def test_equivalent_spellings_normalize_to_same_path():
    """Grafias diferentes do mesmo arquivo devem ser o mesmo nó para detecção de ciclos."""
    a = resolve_include_path("./b.json", "/config/app.json")
    b = resolve_include_path("./sub/../b.json", "/config/app.json")
    c = resolve_include_path("/config/./b.json", "/config/app.json")
    assert a == b == c == "/config/b.json"
