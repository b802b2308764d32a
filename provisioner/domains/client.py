"""
Hosting platform client for attaching custom domains to projects.

One call issues exactly one POST. Nothing is retried, cached or persisted;
repeated calls re-issue the request and the platform decides idempotency.
"""

import asyncio
import json
from typing import Optional

import aiohttp
from yarl import URL

from .errors import ApiError, TransportError
from .models import ProvisioningRequest, ProvisioningResult

DEFAULT_API_BASE = "https://api.vercel.com"


class DomainProvisioningClient:
    """Registers domains against platform projects over the REST API."""

    def __init__(
        self,
        api_base: str = DEFAULT_API_BASE,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.api_base = URL(api_base.rstrip("/"))
        self._session = session

    def build_url(self, request: ProvisioningRequest) -> URL:
        """Project-scoped domains endpoint, team scoped only when a team is given."""
        url = self.api_base / "v9" / "projects" / request.project_id / "domains"
        if request.team_id:
            url = url.with_query(teamId=request.team_id)
        return url

    async def add_project_domain(
        self, request: ProvisioningRequest
    ) -> ProvisioningResult:
        """
        Attach request.domain to request.project_id.

        Returns the platform's JSON response unmodified.

        Raises:
            ApiError: the platform answered with a non-2xx status
            TransportError: the request could not be completed
        """
        url = self.build_url(request)

        if self._session is not None:
            return await self._post(self._session, url, request)

        async with aiohttp.ClientSession() as session:
            return await self._post(session, url, request)

    async def _post(
        self,
        session: aiohttp.ClientSession,
        url: URL,
        request: ProvisioningRequest,
    ) -> ProvisioningResult:
        try:
            async with session.post(
                url,
                data=json.dumps(request.payload),
                headers=request.headers,
            ) as response:
                status = response.status
                body = await response.text(errors="replace")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(
                f"Request to {url.with_query(None)} failed: {e!r}"
            ) from e

        if not 200 <= status < 300:
            raise ApiError(status, body)

        try:
            return json.loads(body)
        except ValueError as e:
            raise ApiError(status, body, reason="returned invalid JSON") from e


async def add_project_domain(
    project_id: str,
    domain: str,
    token: str,
    team_id: Optional[str] = None,
    *,
    api_base: str = DEFAULT_API_BASE,
    session: Optional[aiohttp.ClientSession] = None,
) -> ProvisioningResult:
    """
    Attach a domain to a platform project in one call.

    Raises ValidationError before any network activity when project_id,
    domain or token is missing.
    """
    request = ProvisioningRequest(
        project_id=project_id,
        domain=domain,
        token=token,
        team_id=team_id,
    )
    client = DomainProvisioningClient(api_base=api_base, session=session)
    return await client.add_project_domain(request)
