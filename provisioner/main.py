"""
Domain Provisioner service entry point.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import aiohttp
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api.domains import router as domains_router
from .config import Settings, get_settings
from .domains import DomainProvisioningClient

logger = logging.getLogger("domain_provisioner")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or get_settings()

    logging.basicConfig(level=settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        session = aiohttp.ClientSession()
        app.state.provisioning_client = DomainProvisioningClient(
            api_base=settings.api_base,
            session=session,
        )
        logger.info(f"Domain provisioner started against {settings.api_base}")
        try:
            yield
        finally:
            await session.close()
            logger.info("Domain provisioner stopped")

    app = FastAPI(
        title="Domain Provisioner",
        description="Attaches tenant custom domains to hosting platform projects",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(domains_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "ok"}

    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
