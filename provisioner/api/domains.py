"""
REST hook for the tenant-creation workflow.

Attaches a tenant's custom domain to the platform project configured for
this deployment.
"""

import logging
import secrets
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from ..domains import (
    ApiError,
    ProvisioningRequest,
    TransportError,
    ValidationError,
)

logger = logging.getLogger("domain_provisioner.api.domains")

router = APIRouter(prefix="/api/domains", tags=["domains"])

security = HTTPBearer()


# ── Auth dependency ──────────────────────────────────────────────────

async def require_admin_key(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> None:
    """Accept only callers presenting the configured admin key."""
    admin_key = request.app.state.settings.admin_key
    if not admin_key:
        raise HTTPException(status_code=503, detail="Admin key not configured")
    if not secrets.compare_digest(credentials.credentials, admin_key):
        raise HTTPException(status_code=401, detail="Invalid admin key")


# ── Request models ───────────────────────────────────────────────────

class DomainAddRequest(BaseModel):
    domain: str
    project_id: Optional[str] = None
    team_id: Optional[str] = None


def upstream_status_code(status: int) -> int:
    """Status returned to the caller for a platform rejection."""
    # Platform auth failures mean our token is bad, not the caller's key
    if status in (401, 403) or not 400 <= status < 500:
        return 502
    return status


# ── Routes ───────────────────────────────────────────────────────────

@router.post("", status_code=201, dependencies=[Depends(require_admin_key)])
async def add_domain(body: DomainAddRequest, request: Request):
    """Attach a custom domain to a platform project."""
    settings = request.app.state.settings
    client = request.app.state.provisioning_client

    try:
        provisioning_request = ProvisioningRequest(
            project_id=body.project_id or settings.project_id,
            domain=body.domain.strip(),
            token=settings.api_token,
            team_id=body.team_id or settings.team_id or None,
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=400,
            detail={"error": str(e), "missing": e.missing},
        )

    try:
        result = await client.add_project_domain(provisioning_request)
    except ApiError as e:
        logger.warning(
            f"Platform rejected domain {provisioning_request.domain}: "
            f"{e.status} {e.body}"
        )
        raise HTTPException(
            status_code=upstream_status_code(e.status),
            detail={"upstream_status": e.status, "body": e.body},
        )
    except TransportError as e:
        logger.error(f"Platform unreachable for {provisioning_request.domain}: {e}")
        raise HTTPException(status_code=503, detail=str(e))

    logger.info(
        f"Added domain {provisioning_request.domain} "
        f"to project {provisioning_request.project_id}"
    )
    return result
