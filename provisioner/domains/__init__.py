"""Custom domain provisioning for Domain Provisioner."""

from .client import DEFAULT_API_BASE, DomainProvisioningClient, add_project_domain
from .errors import ApiError, ProvisioningError, TransportError, ValidationError
from .models import ProvisioningRequest, ProvisioningResult

__all__ = [
    "DEFAULT_API_BASE",
    "DomainProvisioningClient",
    "add_project_domain",
    "ProvisioningError",
    "ValidationError",
    "ApiError",
    "TransportError",
    "ProvisioningRequest",
    "ProvisioningResult",
]
