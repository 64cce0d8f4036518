"""Erros de criptografia das notificações.

Definido em app/infra para manter boundaries corretas.
O connector da WeChat Pay converte estes erros em motivos de verificação.
"""


class NotifyCryptoError(Exception):
    """Erro em operação criptográfica de notificação."""


class KeyMaterialError(NotifyCryptoError):
    """Chave pública ou APIv3 key inválida (fatal no startup)."""
