"""Verificação e decriptação das notificações WeChat Pay (API v3).

Ordem das validações:
1. Headers obrigatórios presentes
2. Timestamp numérico e dentro da janela de 5 minutos
3. Wechatpay-Serial igual ao ID da chave configurada
4. Assinatura SHA256-RSA2048 sobre "timestamp\\nnonce\\nbody\\n"
5. Corpo JSON com `resource` AEAD_AES_256_GCM
6. Decriptação com a APIv3 key
7. Plaintext parseável como transação

O envelope nunca é alterado: os bytes encaminhados são os recebidos.
"""

from __future__ import annotations

import json
import time
from typing import TYPE_CHECKING

from pydantic import ValidationError

from api.connectors.wechatpay.headers import extract_signature_headers
from api.connectors.wechatpay.models import NotifyBody
from app.domain.notification import Transaction, VerifiedNotification
from app.infra.crypto import (
    NOTIFY_RESOURCE_ALGORITHM,
    SIGNATURE_TYPE,
    TIMESTAMP_TOLERANCE_SECONDS,
    NotifyCryptoError,
    build_signature_message,
    decrypt_notify_resource,
    verify_sha256_rsa,
)
from utils.errors import NotifyVerificationError, VerificationFailureReason

if TYPE_CHECKING:
    from collections.abc import Callable

    from api.connectors.wechatpay.headers import NotifySignatureHeaders
    from app.domain.notification import NotifyEnvelope
    from app.infra.crypto import NotifyKeyMaterial

Reason = VerificationFailureReason


class WeChatPayNotifyVerifier:
    """Verificador de notificações com material de chave imutável.

    Função pura do envelope e do material de chave; o relógio é
    injetável para testes.
    """

    def __init__(
        self,
        key_material: NotifyKeyMaterial,
        clock: Callable[[], float] = time.time,
        timestamp_tolerance_seconds: int = TIMESTAMP_TOLERANCE_SECONDS,
    ) -> None:
        self._key_material = key_material
        self._clock = clock
        self._tolerance = timestamp_tolerance_seconds

    def verify(self, envelope: NotifyEnvelope) -> VerifiedNotification:
        """Autentica e decripta a notificação.

        Raises:
            NotifyVerificationError: Com o motivo da falha.
        """
        headers = extract_signature_headers(envelope)
        self._check_timestamp(headers.timestamp)
        self._check_signature(headers, envelope.body)

        body = _parse_body(envelope.body)
        if body.resource.algorithm != NOTIFY_RESOURCE_ALGORITHM:
            raise NotifyVerificationError(
                Reason.MALFORMED_PAYLOAD,
                f"unsupported resource algorithm {body.resource.algorithm!r}",
            )

        try:
            plaintext = decrypt_notify_resource(
                api_v3_key=self._key_material.api_v3_key,
                nonce=body.resource.nonce,
                ciphertext_b64=body.resource.ciphertext,
                associated_data=body.resource.associated_data,
            )
        except NotifyCryptoError as exc:
            raise NotifyVerificationError(Reason.DECRYPT_FAILED, str(exc)) from exc

        return VerifiedNotification(
            id=body.id,
            create_time=body.create_time,
            event_type=body.event_type,
            resource_type=body.resource_type,
            summary=body.summary,
            transaction=_parse_transaction(plaintext),
        )

    def _check_timestamp(self, raw_timestamp: str) -> None:
        try:
            timestamp = int(raw_timestamp)
        except ValueError as exc:
            raise NotifyVerificationError(
                Reason.MALFORMED_PAYLOAD, f"invalid timestamp {raw_timestamp!r}"
            ) from exc

        if abs(self._clock() - timestamp) >= self._tolerance:
            raise NotifyVerificationError(
                Reason.TIMESTAMP_EXPIRED, f"timestamp={timestamp} outside tolerance"
            )

    def _check_signature(self, headers: NotifySignatureHeaders, body: bytes) -> None:
        if headers.signature_type and headers.signature_type != SIGNATURE_TYPE:
            raise NotifyVerificationError(
                Reason.SIGNATURE_MISMATCH,
                f"unsupported signature type {headers.signature_type!r}",
            )

        verification_key = self._key_material.verification_key
        if headers.serial != verification_key.key_id:
            raise NotifyVerificationError(
                Reason.UNKNOWN_KEY_ID,
                f"serial {headers.serial!r} does not match configured key id",
            )

        message = build_signature_message(headers.timestamp, headers.nonce, body)
        if not verify_sha256_rsa(verification_key.public_key, message, headers.signature):
            raise NotifyVerificationError(Reason.SIGNATURE_MISMATCH, "signature verification failed")


def _parse_body(raw_body: bytes) -> NotifyBody:
    try:
        payload = json.loads(raw_body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise NotifyVerificationError(Reason.MALFORMED_PAYLOAD, "invalid_json") from exc

    if not isinstance(payload, dict):
        raise NotifyVerificationError(Reason.MALFORMED_PAYLOAD, "payload_not_object")

    try:
        return NotifyBody.model_validate(payload)
    except ValidationError as exc:
        raise NotifyVerificationError(
            Reason.MALFORMED_PAYLOAD, f"invalid notify body: {exc.error_count()} error(s)"
        ) from exc


def _parse_transaction(plaintext: bytes) -> Transaction:
    try:
        payload = json.loads(plaintext)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise NotifyVerificationError(Reason.MALFORMED_PAYLOAD, "invalid_resource_json") from exc

    if not isinstance(payload, dict):
        raise NotifyVerificationError(Reason.MALFORMED_PAYLOAD, "resource_not_object")

    try:
        return Transaction.model_validate(payload)
    except ValidationError as exc:
        raise NotifyVerificationError(
            Reason.MALFORMED_PAYLOAD, f"invalid transaction: {exc.error_count()} error(s)"
        ) from exc
