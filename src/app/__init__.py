"""App — orquestração, domínio e infraestrutura do client LINE.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- constants/: enums e constantes da LINE
- domain/: modelos de request/response
- infra/: implementações concretas de IO (secrets, tokens)
- observability/: correlation_id para logs estruturados
- protocols/: contratos/interfaces

Padrão: app executa; api adapta; config configura; utils apoia.
"""
