# src/learnet/core/__init__.py
"""
Core do learnet.

Este pacote contém o engine de learning networks: nodes lazy, o
TrainableModel com seu protocolo fit/update/freeze, e a lógica de
dependências e agendamento que decide o que (re)treinar e em que ordem.

Componentes principais:
    - model      → contrato de Model (supervisão + capacidades)
    - network    → nodes, TrainableModels, tapes e operações
    - engine     → planner e driver de treino
    - config     → configuração resolvida e FitOptions
    - context    → TrainingContext (eventos estruturados e warnings)
    - errors     → payloads canônicos de erro
    - exceptions → hierarquia tipada de exceções

Limites explícitos:
    - Não implementa algoritmos de aprendizado concretos
    - Não carrega datasets, não faz tuning nem resampling
    - Não persiste grafos nem estado de treino
    - Não executa treino em paralelo
"""
