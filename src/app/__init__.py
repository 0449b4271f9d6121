"""App — autorização Google, leitura de calendário e geração de tasks.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (orquestração, sem IO direto)
- services/: regras de classificação de eventos
- domain/: modelos (TokenSet, AuthorizationRequest, Task)
- infra/: implementações concretas de IO (HTTP, OAuth, Calendar, stores)
- protocols/: contratos/interfaces injetados pelo host
- observability/: correlation_id e métricas via logs

Padrão: app executa; config configura; utils apoia.
"""
