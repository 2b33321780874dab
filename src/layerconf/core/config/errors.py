# src/layerconf/core/config/errors.py
"""
Exceções canônicas da camada de configuração do layerconf.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento de arquivos, a resolução de `$include` e a validação
estrutural da configuração.

As exceções aqui definidas representam **falhas terminais** da resolução:
nenhuma delas é tratada com retry, fallback ou recuperação parcial.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Mensagens possuem prefixos estáveis e pesquisáveis (grep)
    - A causa original é preservada via encadeamento (`raise ... from`)

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - `CircularIncludeError` é um caso particular de `ConfigIncludeError`

Limites explícitos:
    - Não decide como o erro é apresentado ao usuário final
    - Não realiza fallback ou recovery
"""

from typing import Optional, Sequence, Tuple


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do layerconf.

    Todas as exceções levantadas durante carregamento, resolução de
    includes e validação estrutural herdam desta classe, permitindo
    captura genérica pelo loader da aplicação consumidora.
    """


class ConfigIncludeError(ConfigError):
    """
    Exceção levantada quando a resolução de `$include` falha.

    Cobre:
        - diretiva com tipo inválido (nem string nem lista)
        - item de lista que não é string
        - falha de leitura do arquivo incluído
        - falha de parse do arquivo incluído
        - chaves irmãs com conteúdo incluído que não é objeto
        - profundidade máxima de includes excedida
        - merge de alvos de include com tipos diferentes

    Atributos:
        include_path: caminho absoluto do include envolvido (quando houver).
        cause: exceção original de leitura/parse (quando houver).
    """

    def __init__(
        self,
        message: str,
        *,
        include_path: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.include_path = include_path
        self.cause = cause


class CircularIncludeError(ConfigIncludeError):
    """
    Exceção levantada quando um caminho absoluto reaparece na cadeia ativa.

    A cadeia (`chain`) contém todos os caminhos desde o documento raiz até
    o caminho repetido, inclusive. A mensagem nomeia cada caminho do ciclo.

    Invariantes:
        - `chain[-1]` é o caminho que fechou o ciclo
        - `chain[-1]` também aparece em uma posição anterior da cadeia
    """

    def __init__(self, chain: Sequence[str]) -> None:
        self.chain: Tuple[str, ...] = tuple(chain)
        super().__init__(
            "Circular include detected: " + " -> ".join(self.chain),
            include_path=self.chain[-1] if self.chain else None,
        )


class ConfigFileNotFoundError(ConfigError):
    """
    Exceção levantada quando o documento raiz de configuração não existe.

    Decisões arquiteturais:
        - O documento raiz é obrigatório
        - Arquivos incluídos ausentes são reportados como `ConfigIncludeError`
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do documento raiz não é suportado.

    Formatos suportados (v1):
        - JSON (.json)
        - YAML (.yaml, .yml)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração não é um `dict`,
    seja no arquivo lido ou após a resolução dos includes.
    """


class ConfigReadError(ConfigError):
    """
    Exceção levantada quando o documento raiz existe mas não pode ser lido
    (diretório, permissão negada, encoding inválido).
    """


class ConfigParseError(ConfigError):
    """Exceção levantada quando o documento raiz não pode ser interpretado."""
