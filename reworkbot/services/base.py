"""
Base service class for the external API services.

Owns the transport and provides the shared fetch-and-decode step. Subclasses
catch ProviderError at their public methods and turn it into an explicit
absence.
"""

import logging
from typing import Any, Mapping, Optional

from reworkbot.services.transport import ApiResponse, ApiTransport
from reworkbot.utils.exceptions import UnexpectedResponseError

logger = logging.getLogger(__name__)

class BaseApiService:
    """Base class for services talking to one external provider."""

    def __init__(self, transport: ApiTransport):
        """
        Initialize base service with a transport.

        Args:
            transport: Transport bound to the provider's base URL
        """
        self.transport = transport

    async def fetch(self, path: str, params: Optional[Mapping[str, Any]] = None) -> ApiResponse:
        """GET a path and require a 2xx status."""
        response = await self.transport.get(path, params)
        if not response.ok:
            raise UnexpectedResponseError(response.url, "non-success status code", response.status)
        return response

    async def fetch_json(self, path: str, entity: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """GET a path and decode the JSON body."""
        response = await self.fetch(path, params)
        return response.json(entity)

    def describe(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        return self.transport.describe(path, params)

    async def close(self):
        """Close the underlying transport."""
        await self.transport.close()
