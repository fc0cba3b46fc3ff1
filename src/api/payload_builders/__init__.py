"""Payload builders por canal — construção de payloads para APIs externas.

Estrutura:
- line/: LINE Messaging API (mensagens, envelopes e rich menu)

Cada canal tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
