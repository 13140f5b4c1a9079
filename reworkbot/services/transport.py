"""
HTTP transport abstraction for the external API services.

The services only depend on ``ApiTransport``; ``AiohttpTransport`` is the
production implementation and tests substitute a scripted fake.
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional
from urllib.parse import urlencode

import aiohttp

from reworkbot.utils.exceptions import DeserializationError, TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiResponse:
    """Status and raw body of a completed request."""
    status: int
    body: str
    url: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self, entity: str = "response") -> Any:
        """Decode the body, raising DeserializationError on invalid JSON."""
        try:
            return json.loads(self.body)
        except (json.JSONDecodeError, TypeError) as e:
            raise DeserializationError(entity, f"invalid JSON from {self.url}: {e}")


class ApiTransport(ABC):
    """Minimal GET-only transport bound to one provider's base URL."""

    def __init__(self, base_url: str, redact_params: Iterable[str] = ()):
        self.base_url = base_url
        self.redact_params = frozenset(redact_params)

    def build_url(self, path: str) -> str:
        if not path:
            return self.base_url
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def describe(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """URL for log lines, with credential parameters masked."""
        url = self.build_url(path)
        if not params:
            return url
        shown = {
            key: ('***' if key in self.redact_params else value)
            for key, value in params.items()
        }
        return f"{url}?{urlencode(shown, safe='*')}"

    @abstractmethod
    async def get(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        allow_redirects: bool = True,
    ) -> ApiResponse:
        """Issue a GET request.

        Raises TransportError if no response arrived and DeserializationError
        if the body cannot be decoded as text.
        """

    async def close(self) -> None:
        """Release any held connections."""


class AiohttpTransport(ApiTransport):
    """ApiTransport backed by a lazily created aiohttp.ClientSession."""

    def __init__(
        self,
        base_url: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = 30.0,
        redact_params: Iterable[str] = (),
    ):
        super().__init__(base_url, redact_params)
        self.headers = dict(headers or {})
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    def _get_session(self) -> aiohttp.ClientSession:
        # Created on first use so it binds to the running event loop
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers=self.headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )
        return self._session

    async def get(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        allow_redirects: bool = True,
    ) -> ApiResponse:
        url = self.build_url(path)
        described = self.describe(path, params)
        query = {key: str(value) for key, value in (params or {}).items()}
        try:
            async with self._get_session().get(url, params=query, allow_redirects=allow_redirects) as response:
                body = await response.text()
                logger.debug(f"GET {described} -> {response.status}")
                return ApiResponse(status=response.status, body=body, url=described)
        except asyncio.TimeoutError:
            raise TransportError(described, f"timed out after {self.timeout}s")
        except aiohttp.ClientError as e:
            raise TransportError(described, f"{type(e).__name__}: {e}")
        except UnicodeDecodeError as e:
            raise DeserializationError("response body", f"undecodable body from {described}: {e}")

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None
