"""Connectors: adapters de borda para provedores externos.

Estrutura:
- wechatpay/: notificações assinadas da WeChat Pay API v3

Cada provedor tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
