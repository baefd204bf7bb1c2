"""
crates.io Client

This module provides the registry client used to look up crate metadata.
"""

import httpx
from pydantic import ValidationError

from .config import Settings, crates_logger
from .models import CrateInfo, CrateResponse


class CratesInfoError(Exception):
    """Base error for the crates lookup tool."""


class RegistryError(CratesInfoError):
    """The registry could not be reached or returned an unusable body."""


class CratesClient:
    """Client for crates.io registry operations."""

    def __init__(self, settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None):
        """
        Initialize the registry client.

        Args:
            settings: Registry settings (defaults used if not provided)
            transport: Optional httpx transport, mainly for tests
        """
        self.settings = settings or Settings()
        self.api_url = self.settings.api_url
        self.timeout = self.settings.timeout
        self.transport = transport

    def crate_url(self, crate_id: str) -> str:
        """Build the lookup URL, the identifier is used as given."""
        return f"{self.api_url}/crates/{crate_id}"

    async def get_crate(self, crate_id: str) -> CrateInfo | None:
        """Get crate information, None when the registry has no match."""
        url = self.crate_url(crate_id)
        headers = {"user-agent": self.settings.user_agent}
        crates_logger.debug("Fetching crate", crate_id=crate_id, url=url)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, headers=headers)
                data = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            crates_logger.error("Request to registry failed", crate_id=crate_id, error=str(e))
            raise RegistryError(f"request to {url} failed: {e}") from e
        except ValueError as e:
            crates_logger.error("Registry returned invalid JSON", crate_id=crate_id, error=str(e))
            raise RegistryError(f"invalid JSON from {url}: {e}") from e

        try:
            result = CrateResponse.model_validate(data)
        except ValidationError as e:
            crates_logger.error("Unexpected registry response", crate_id=crate_id, error=str(e))
            raise RegistryError(f"unexpected response from {url}: {e}") from e

        if result.crate is None:
            crates_logger.debug("No crate in registry response", crate_id=crate_id, status=response.status_code)
        return result.crate


async def fetch_crate(
    crate_id: str,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> CrateInfo | None:
    """Look up a single crate with a fresh client."""
    client = CratesClient(settings, transport=transport)
    return await client.get_crate(crate_id)
