"""
Core do layerconf.

Este pacote reúne a implementação canônica da resolução de configuração,
independente de CLI, aplicação ou formato de serialização específico.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada (leitura de arquivos é injetável)
    - livre de estado global entre resoluções

Componentes principais:
    - config → resolução de `$include`, deep-merge, leitura de fontes e hashing

Limites explícitos:
    - Não contém lógica de domínio da aplicação consumidora
    - Não valida schema da configuração resolvida
"""
