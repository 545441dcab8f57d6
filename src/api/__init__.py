"""API — camada de borda.

Responsabilidades:
- Receber uploads de clientes (multipart)
- Falar com a Telegram Bot API (connectors)
- Respostas JSON e health checks

Subpastas:
- connectors/: adapters HTTP para plataformas externas
- routes/: endpoints HTTP (upload, health)

NÃO PODE conter: política de retry, persistência de metadados, orquestração de use cases.
"""
