"""
Bot-wide constants for the rework bot.

This module contains the fixed values used by the API services and the
Discord layer, so they are not scattered as magic numbers.
"""

class CacheConstants:
    """Constants for caching behavior."""

    # TTL for the cached rework list (seconds)
    REWORKS_CACHE_TTL = 300  # 5 minutes

class ApiConstants:
    """Constants describing the external provider contracts."""

    # Exact body the Huis API serves on its root path
    HUIS_AVAILABILITY_SENTINEL = "Cannot GET /"

    # The osu! API root redirects to the website
    OSU_AVAILABILITY_STATUS = 302

    # Huis API endpoints
    HUIS_REWORKS_PATH = "/reworks/list"
    HUIS_PLAYER_PATH = "/player/userdata/{player_id}/{rework_id}"

    # osu! v1 API endpoints
    OSU_USER_PATH = "get_user"
    OSU_BEATMAPS_PATH = "get_beatmaps"

class UIConstants:
    """Constants for Discord UI elements."""

    # Discord caps autocomplete suggestions
    AUTOCOMPLETE_LIMIT = 25

    # Maximum reworks listed in one embed
    MAX_REWORK_DISPLAY = 25

    # Embed colors
    DEFAULT_EMBED_COLOR = 0x3498db  # Blue
    ERROR_COLOR = 0xe74c3c         # Red for errors
    SUCCESS_COLOR = 0x2ecc71       # Green for success

    # Emoji for UI elements
    ONLINE_EMOJI = "✅"
    OFFLINE_EMOJI = "❌"
