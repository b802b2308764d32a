"""
Failures raised while provisioning a domain.
"""

from typing import List


class ProvisioningError(Exception):
    """Base class for every provisioning failure."""


class ValidationError(ProvisioningError, ValueError):
    """Required request fields are missing. Raised before any network call."""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required params: {', '.join(self.missing)}")


class ApiError(ProvisioningError):
    """The platform answered with a non-2xx status (or an unparseable body)."""

    def __init__(self, status: int, body: str, reason: str = "add domain failed"):
        self.status = status
        self.body = body
        super().__init__(f"Platform {reason}: {status} {body}")


class TransportError(ProvisioningError):
    """The HTTP exchange itself could not complete."""
