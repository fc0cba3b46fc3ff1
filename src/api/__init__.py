"""API — camada de borda e adapters de canais.

Responsabilidades:
- Executar chamadas HTTP contra APIs externas
- Construir payloads para APIs externas
- Classificar erros devolvidos pelos providers

Subpastas:
- connectors/: adapters HTTP por canal
- payload_builders/: construção de payloads para APIs externas
"""
