"""Contratos do corpo da notificação WeChat Pay (antes da decriptação)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class NotifyResource(BaseModel):
    """Campo `resource`: transação cifrada com a APIv3 key."""

    model_config = ConfigDict(extra="ignore")

    algorithm: str
    ciphertext: str
    nonce: str
    associated_data: str = ""
    original_type: str = ""


class NotifyBody(BaseModel):
    """Corpo JSON da notificação."""

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    create_time: str = ""
    event_type: str = ""
    resource_type: str = ""
    summary: str = ""
    resource: NotifyResource
