"""
Centralized error embeds for consistent error handling across the rework bot.

Keeps the wording for provider outages and bad input in one place.
"""

import discord


class ErrorEmbeds:
    """Centralized error embed factory for consistent error handling."""

    @staticmethod
    def huis_unavailable() -> discord.Embed:
        """Create embed for when the Huis API could not deliver data."""
        return discord.Embed(
            title="Huis API Unavailable",
            description="The Huis API could not be reached or returned invalid data. Please try again later.",
            color=discord.Color.red()
        )

    @staticmethod
    def osu_unavailable() -> discord.Embed:
        """Create embed for when the osu! API could not deliver data."""
        return discord.Embed(
            title="osu! API Unavailable",
            description="The osu! API could not be reached or returned invalid data. Please try again later.",
            color=discord.Color.red()
        )

    @staticmethod
    def user_not_found(name: str) -> discord.Embed:
        """Create embed for when an osu! user does not exist."""
        return discord.Embed(
            title="User Not Found",
            description=f"No osu! user with the name `{name}` exists.",
            color=discord.Color.orange()
        )

    @staticmethod
    def rework_not_found(rework: str) -> discord.Embed:
        """Create embed for when a rework is not in the rework list."""
        return discord.Embed(
            title="Rework Not Found",
            description=f"The rework `{rework}` could not be found.\n\nUse `/reworks` to list all reworks.",
            color=discord.Color.orange()
        )

    @staticmethod
    def beatmap_not_found(beatmap_id: int) -> discord.Embed:
        """Create embed for when no beatmap matches the requested id."""
        return discord.Embed(
            title="Beatmap Not Found",
            description=f"No beatmap with the ID `{beatmap_id}` could be found.",
            color=discord.Color.orange()
        )

    @staticmethod
    def invalid_input(message: str) -> discord.Embed:
        """Create embed for invalid user input."""
        return discord.Embed(
            title="Invalid Input",
            description=message,
            color=discord.Color.red()
        )
