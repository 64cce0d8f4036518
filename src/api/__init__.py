"""API: camada de borda.

Responsabilidades:
- Receber notificações do provedor de pagamento
- Validar assinaturas e decriptar payloads (connectors/)
- Endpoints HTTP e mapeamento de respostas (routes/)

NÃO PODE conter: regras de encaminhamento, orquestração de use cases.
"""
