"""
reworkbot: Discord bot fronting the Huis pp-rework API and the osu! v1 API.
"""

__version__ = "1.1.0"
