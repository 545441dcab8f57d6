"""App — orquestração, casos de uso e infraestrutura do relay.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: tipos imutáveis do fluxo de upload
- use_cases/: casos de uso (relay de upload)
- services/: classificação, driver de upload e extração de referência
- infra/: implementações concretas de IO (KV stores)
- protocols/: contratos/interfaces e schema da Bot API
- observability/: correlation_id e métricas via logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
