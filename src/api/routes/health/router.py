"""Probes de liveness e readiness do gateway."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.logging.config import DEFAULT_SERVICE_NAME

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Estado de um pré-requisito do relay."""

    ok: bool
    detail: str

    def as_dict(self) -> dict[str, Any]:
        return {"status": "ok" if self.ok else "failed", "detail": self.detail}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness: o processo responde."""
    return HealthResponse(
        status="healthy",
        service=DEFAULT_SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness: material de chave carregado e ao menos um alvo estático.

    Ambos são montados no lifespan; sem eles /notify não funciona.
    """
    state = request.app.state
    checks = {
        "key_material": _check_key_material(getattr(state, "key_material", None)),
        "forward_targets": _check_forward_targets(getattr(state, "relay_use_case", None)),
    }
    ready = all(check.ok for check in checks.values())

    if not ready:
        logger.warning(
            "readiness_check_failed",
            extra={name: check.detail for name, check in checks.items() if not check.ok},
        )

    return JSONResponse(
        content={
            "status": "ready" if ready else "not_ready",
            "checks": {name: check.as_dict() for name, check in checks.items()},
            "timestamp": datetime.now(UTC).isoformat(),
        },
        status_code=200 if ready else 503,
    )


def _check_key_material(key_material: Any | None) -> DependencyCheck:
    if key_material is None:
        return DependencyCheck(ok=False, detail="not_loaded")
    return DependencyCheck(ok=True, detail=key_material.verification_key.key_id)


def _check_forward_targets(relay_use_case: Any | None) -> DependencyCheck:
    if relay_use_case is None:
        return DependencyCheck(ok=False, detail="not_configured")
    count = len(relay_use_case.static_targets)
    if count == 0:
        return DependencyCheck(ok=False, detail="empty")
    return DependencyCheck(ok=True, detail=f"{count} target(s)")
