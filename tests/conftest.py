"""
Pytest configuration for Domain Provisioner tests.
"""

import asyncio
import os
import socket
import sys

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables
os.environ["PROVISIONER_DEBUG"] = "true"


class FakePlatform:
    """Local stand-in for the hosting platform's domains endpoint."""

    def __init__(self):
        self.requests = []
        self.status = 200
        self.body = '{"name":"example.com","verified":false}'
        self.content_type = "application/json"
        self.api_base = ""
        # Set release to an Event to hold responses until it is set
        self.release = None
        self.entered = asyncio.Event()

    async def handle(self, request: web.Request) -> web.Response:
        self.requests.append({
            "method": request.method,
            "path": request.path,
            "project_id": request.match_info["project_id"],
            "query": dict(request.query),
            "query_string": request.query_string,
            "headers": dict(request.headers),
            "body": await request.text(),
        })
        if self.release is not None:
            self.entered.set()
            await self.release.wait()
        if isinstance(self.body, bytes):
            return web.Response(
                status=self.status,
                body=self.body,
                content_type=self.content_type,
            )
        return web.Response(
            status=self.status,
            text=self.body,
            content_type=self.content_type,
        )


@pytest_asyncio.fixture
async def platform():
    """Provide a running fake platform."""
    fake = FakePlatform()
    app = web.Application()
    app.router.add_post("/v9/projects/{project_id}/domains", fake.handle)
    server = TestServer(app)
    await server.start_server()
    fake.api_base = str(server.make_url("/"))
    yield fake
    if fake.release is not None:
        fake.release.set()
    await server.close()


@pytest.fixture
def closed_port_url():
    """Base URL of a local port with nothing listening."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return f"http://127.0.0.1:{port}"


@pytest.fixture
def test_settings():
    """Provide test settings."""
    from provisioner.config import Settings
    return Settings(
        api_token="tok_test",
        admin_key="admin_test",
        project_id="prj_default",
        debug=True,
    )
