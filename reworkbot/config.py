import os
from dotenv import load_dotenv

from reworkbot import __version__

load_dotenv()

class Config:
    """Bot configuration settings"""

    # Discord settings
    DISCORD_TOKEN = os.getenv('DISCORD_TOKEN')
    DISCORD_GUILD_ID = int(os.getenv('DISCORD_GUILD_ID', 0))
    DISCORD_GUILD_IDS = os.getenv('DISCORD_GUILD_IDS', '')  # Comma-separated for multi-guild support

    # osu! v1 API settings
    OSU_API_URL = os.getenv('OSU_API_URL', 'https://osu.ppy.sh/api/')
    OSU_API_KEY = os.getenv('OSU_API_KEY')

    # Huis API settings
    HUIS_API_URL = os.getenv('HUIS_API_URL', 'https://pp-api.huismetbenen.nl/')
    HUIS_ONION_KEY = os.getenv('HUIS_ONION_KEY')  # Optional, unlocks onion-level reworks

    # HTTP settings
    HTTP_TIMEOUT = float(os.getenv('HTTP_TIMEOUT', 30))
    USER_AGENT = f"reworkbot/{__version__}"

    # Bot settings
    COMMAND_PREFIX = os.getenv('COMMAND_PREFIX', '!')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    @classmethod
    def get_guild_ids(cls):
        """Get list of guild IDs for command syncing"""
        if cls.DISCORD_GUILD_IDS:
            # Multi-guild support: comma-separated IDs
            try:
                return [int(guild_id.strip()) for guild_id in cls.DISCORD_GUILD_IDS.split(',') if guild_id.strip()]
            except ValueError:
                raise ValueError("DISCORD_GUILD_IDS must be comma-separated integers")
        elif cls.DISCORD_GUILD_ID:
            return [cls.DISCORD_GUILD_ID]
        else:
            # Global sync
            return []

    @classmethod
    def huis_headers(cls):
        """Default request headers for the Huis API"""
        headers = {'User-Agent': cls.USER_AGENT}
        if cls.HUIS_ONION_KEY:
            headers['x-onion-key'] = cls.HUIS_ONION_KEY
        return headers

    @classmethod
    def osu_headers(cls):
        """Default request headers for the osu! API"""
        return {'User-Agent': cls.USER_AGENT}

    @classmethod
    def validate(cls):
        """Validate that required configuration is present"""
        if not cls.DISCORD_TOKEN:
            raise ValueError("DISCORD_TOKEN is required")
        if not cls.OSU_API_KEY:
            raise ValueError("OSU_API_KEY is required")
        if cls.HTTP_TIMEOUT <= 0:
            raise ValueError("HTTP_TIMEOUT must be a positive number of seconds")
