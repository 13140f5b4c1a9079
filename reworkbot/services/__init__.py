"""
Services package for the rework bot.

External API access: the Huis rework API and the osu! v1 API.
"""

from .base import BaseApiService
from .cache import ExpiringCache
from .huis_api import HuisApiService
from .osu_api import OsuApiService
from .transport import AiohttpTransport, ApiResponse, ApiTransport

__all__ = [
    'AiohttpTransport', 'ApiResponse', 'ApiTransport', 'BaseApiService',
    'ExpiringCache', 'HuisApiService', 'OsuApiService',
]
