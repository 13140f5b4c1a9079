"""
Huis API service.

Talks to the Huis pp-rework API @ https://pp-api.huismetbenen.nl/. The rework
list is cached for a few minutes; player snapshots are always fetched.

Concurrent ``get_reworks`` calls on an expired cache may both hit the API and
both write the cache. The last write wins and both callers get a valid list.
"""

import logging
import time
from typing import Callable, List, Optional

from reworkbot.constants import ApiConstants, CacheConstants
from reworkbot.data_models.huis import HuisPlayer, Rework
from reworkbot.services.base import BaseApiService
from reworkbot.services.cache import ExpiringCache
from reworkbot.services.transport import ApiTransport
from reworkbot.utils.exceptions import (
    DeserializationError, ProviderError, UnexpectedResponseError
)

logger = logging.getLogger(__name__)

class HuisApiService(BaseApiService):
    """Read access to reworks and player snapshots on the Huis API."""

    def __init__(
        self,
        transport: ApiTransport,
        reworks_ttl: float = CacheConstants.REWORKS_CACHE_TTL,
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__(transport)
        self._reworks: ExpiringCache[List[Rework]] = ExpiringCache(reworks_ttl, clock)

    async def is_available(self) -> bool:
        """Whether the Huis API answers its root path with the expected sentinel body."""
        try:
            response = await self.transport.get("/")
            if not response.ok:
                raise UnexpectedResponseError(response.url, "non-success status code", response.status)
            if response.body != ApiConstants.HUIS_AVAILABILITY_SENTINEL:
                raise UnexpectedResponseError(
                    response.url,
                    f"body does not match \"{ApiConstants.HUIS_AVAILABILITY_SENTINEL}\"",
                    response.status,
                )
            return True
        except Exception as e:
            logger.error(f"Huis API is_available() returned false: {e}")
            return False

    async def get_reworks(self) -> Optional[List[Rework]]:
        """
        Get all reworks, served from cache while it is fresh.

        Returns:
            A non-empty list of reworks, or None if they could not be fetched
        """
        if not self._reworks.is_expired:
            logger.debug("Rework cache hit")
            return self._reworks.value

        logger.debug("Rework cache miss, fetching from the Huis API")
        path = ApiConstants.HUIS_REWORKS_PATH
        try:
            data = await self.fetch_json(path, "rework list")
            reworks = Rework.list_from_json(data)

            # An empty rework list is never a legitimate state
            if not reworks:
                raise DeserializationError("rework list", "the API returned an empty list")
        except DeserializationError as e:
            logger.error(f"Failed to deserialize the reworks from the Huis API: {e}\n{self.describe(path)}")
            return None
        except ProviderError as e:
            logger.error(f"Failed to get the list of reworks from the Huis API: {e}")
            return None
        except Exception as e:
            logger.error(
                f"Unexpected error getting the list of reworks from the Huis API: {e}\n{self.describe(path)}",
                exc_info=True
            )
            return None

        self._reworks.set(reworks)
        logger.info(f"Cached {len(reworks)} reworks from the Huis API")
        return reworks

    async def get_rework(self, code_or_id: str) -> Optional[Rework]:
        """Find a rework by code (case-insensitive) or numeric id."""
        reworks = await self.get_reworks()
        if reworks is None:
            return None
        return find_rework(reworks, code_or_id)

    async def get_player(self, player_id: int, rework_id: int) -> Optional[HuisPlayer]:
        """
        Get a player's snapshot in a rework. Never cached.

        Args:
            player_id: The osu! user id of the player
            rework_id: The id of the rework

        Returns:
            The player snapshot, or None if it could not be fetched
        """
        # TODO: cache snapshots per (player_id, rework_id)
        path = ApiConstants.HUIS_PLAYER_PATH.format(player_id=player_id, rework_id=rework_id)
        try:
            data = await self.fetch_json(path, "player")
            return HuisPlayer.from_dict(data)
        except DeserializationError as e:
            logger.error(
                f"Failed to deserialize player {player_id} in rework {rework_id} from the Huis API: {e}\n"
                f"{self.describe(path)}"
            )
            return None
        except ProviderError as e:
            logger.error(f"Failed to get player {player_id} in rework {rework_id} from the Huis API: {e}")
            return None
        except Exception as e:
            logger.error(
                f"Unexpected error getting player {player_id} in rework {rework_id} from the Huis API: {e}\n"
                f"{self.describe(path)}",
                exc_info=True
            )
            return None


def find_rework(reworks: List[Rework], code_or_id: str) -> Optional[Rework]:
    """Match a code (case-insensitive) first, then a numeric id."""
    key = code_or_id.strip()
    for rework in reworks:
        if rework.code is not None and rework.code.lower() == key.lower():
            return rework
    if key.isdigit():
        for rework in reworks:
            if rework.id == int(key):
                return rework
    return None
