"""Use cases de notificação de pagamento."""

from .relay_notification import RelayNotificationUseCase, RelayResult

__all__ = ["RelayNotificationUseCase", "RelayResult"]
