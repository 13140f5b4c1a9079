"""
osu! API service.

Talks to the osu! v1 API @ https://osu.ppy.sh/api/ for user id resolution and
beatmap metadata. The API key is sent as the ``k`` query parameter and is
masked in every log line.
"""

import logging
from typing import Optional

from reworkbot.constants import ApiConstants
from reworkbot.data_models.osu import OsuBeatmap, OsuUser, UserLookup
from reworkbot.services.base import BaseApiService
from reworkbot.services.transport import ApiTransport
from reworkbot.utils.exceptions import (
    DeserializationError, EntityValidationError, ProviderError, UnexpectedResponseError
)

logger = logging.getLogger(__name__)

class OsuApiService(BaseApiService):
    """Read access to users and beatmaps on the osu! v1 API."""

    def __init__(self, transport: ApiTransport, api_key: str):
        super().__init__(transport)
        self._api_key = api_key

    async def is_available(self) -> bool:
        """Whether the osu! API root answers with its usual redirect."""
        try:
            response = await self.transport.get("", allow_redirects=False)
            if response.status != ApiConstants.OSU_AVAILABILITY_STATUS:
                raise UnexpectedResponseError(
                    response.url,
                    f"expected redirect ({ApiConstants.OSU_AVAILABILITY_STATUS})",
                    response.status,
                )
            return True
        except Exception as e:
            logger.error(f"osu! API is_available() returned false: {e}")
            return False

    async def resolve_user_id(self, name: str) -> UserLookup:
        """
        Resolve a username to an osu! user.

        The API answers "[]" for unknown users, which is reported as
        NOT_FOUND. Anything that keeps the API from answering is ERROR.

        Args:
            name: The username to look up

        Returns:
            UserLookup with the user when found
        """
        path = ApiConstants.OSU_USER_PATH
        params = {"u": name, "type": "string", "k": self._api_key}
        try:
            data = await self.fetch_json(path, "user list", params)
            if not isinstance(data, list):
                raise DeserializationError("user list", f"expected a JSON array, got {type(data).__name__}")
            if not data:
                logger.info(f"osu! user \"{name}\" does not exist")
                return UserLookup.not_found()
            return UserLookup.of(OsuUser.from_dict(data[0]))
        except ProviderError as e:
            logger.error(f"Failed to get the user with name \"{name}\" from the osu! API: {e}\n{self.describe(path, params)}")
            return UserLookup.error()
        except Exception as e:
            logger.error(f"Unexpected error getting the user with name \"{name}\" from the osu! API: {e}", exc_info=True)
            return UserLookup.error()

    async def get_beatmap(self, beatmap_id: int) -> Optional[OsuBeatmap]:
        """
        Get the beatmap with exactly the given id.

        get_beatmaps may hand back other difficulties, so the result is
        filtered for a matching beatmap_id.

        Args:
            beatmap_id: The beatmap (difficulty) id

        Returns:
            The beatmap, or None if it could not be fetched or did not match
        """
        path = ApiConstants.OSU_BEATMAPS_PATH
        params = {"b": beatmap_id, "k": self._api_key}
        try:
            data = await self.fetch_json(path, "beatmap list", params)
            if not isinstance(data, list):
                raise DeserializationError("beatmap list", f"expected a JSON array, got {type(data).__name__}")

            candidates = [OsuBeatmap.from_dict(item) for item in data]
            beatmap = next((candidate for candidate in candidates if candidate.id == beatmap_id), None)
            if beatmap is None:
                raise EntityValidationError(
                    "Beatmap", beatmap_id, [candidate.id for candidate in candidates]
                )
            return beatmap
        except ProviderError as e:
            logger.error(f"Failed to get the beatmap with ID {beatmap_id} from the osu! API: {e}\n{self.describe(path, params)}")
            return None
        except Exception as e:
            logger.error(f"Unexpected error getting the beatmap with ID {beatmap_id} from the osu! API: {e}", exc_info=True)
            return None
