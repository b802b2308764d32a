"""
Request and result types for domain provisioning.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .errors import ValidationError

# Parsed JSON returned by the platform, passed through without a schema.
ProvisioningResult = Dict[str, Any]

REQUIRED_FIELDS = ("project_id", "domain", "token")


@dataclass(frozen=True)
class ProvisioningRequest:
    """A single add-domain call against a platform project."""

    project_id: str
    domain: str
    token: str = field(repr=False)
    team_id: Optional[str] = None

    def __post_init__(self):
        missing = [name for name in REQUIRED_FIELDS if not getattr(self, name)]
        if missing:
            raise ValidationError(missing)
        if not self.team_id:
            object.__setattr__(self, "team_id", None)

    @property
    def payload(self) -> dict:
        """JSON body sent to the platform."""
        return {"name": self.domain}

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
        }
