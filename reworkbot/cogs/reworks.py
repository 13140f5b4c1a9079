"""
ReworkCommands cog

Slash commands for browsing Huis reworks, player rework snapshots, osu!
beatmaps and the ranking sort options.
"""

import asyncio
import logging
from typing import Optional

import discord
from discord import app_commands
from discord.ext import commands

from reworkbot.constants import UIConstants
from reworkbot.data_models.osu import LookupStatus
from reworkbot.data_models.ranking_sort import PlayerRankingSort
from reworkbot.services.huis_api import find_rework
from reworkbot.utils.embeds import (
    build_beatmap_embed, build_player_embed, build_reworks_embed, build_sorts_embed, build_status_embed
)
from reworkbot.utils.error_embeds import ErrorEmbeds
from reworkbot.utils.exceptions import SortOptionNotFoundError

logger = logging.getLogger(__name__)

class ReworkCommands(commands.Cog):
    """Read-only commands backed by the Huis and osu! APIs."""

    def __init__(self, bot):
        self.bot = bot
        self.huis_api = bot.huis_api
        self.osu_api = bot.osu_api

    @app_commands.command(name="status", description="Check whether the Huis and osu! APIs are reachable")
    async def status(self, interaction: discord.Interaction):
        await interaction.response.defer()
        huis_online, osu_online = await asyncio.gather(
            self.huis_api.is_available(),
            self.osu_api.is_available(),
        )
        await interaction.followup.send(embed=build_status_embed(huis_online, osu_online))

    @app_commands.command(name="reworks", description="List all reworks on Huis")
    async def reworks(self, interaction: discord.Interaction):
        await interaction.response.defer()
        reworks = await self.huis_api.get_reworks()
        if reworks is None:
            await interaction.followup.send(embed=ErrorEmbeds.huis_unavailable())
            return
        await interaction.followup.send(embed=build_reworks_embed(reworks))

    @app_commands.command(name="player", description="Show a player's pp in a rework")
    @app_commands.describe(
        name="The osu! username of the player",
        rework="The rework code (e.g. live)"
    )
    async def player(self, interaction: discord.Interaction, name: str, rework: str):
        await interaction.response.defer()

        lookup = await self.osu_api.resolve_user_id(name)
        if lookup.status is LookupStatus.NOT_FOUND:
            await interaction.followup.send(embed=ErrorEmbeds.user_not_found(name))
            return
        if lookup.status is LookupStatus.ERROR:
            await interaction.followup.send(embed=ErrorEmbeds.osu_unavailable())
            return

        reworks = await self.huis_api.get_reworks()
        if reworks is None:
            await interaction.followup.send(embed=ErrorEmbeds.huis_unavailable())
            return
        rework_obj = find_rework(reworks, rework)
        if rework_obj is None or rework_obj.id is None:
            await interaction.followup.send(embed=ErrorEmbeds.rework_not_found(rework))
            return

        player = await self.huis_api.get_player(lookup.user_id, rework_obj.id)
        if player is None:
            await interaction.followup.send(embed=ErrorEmbeds.huis_unavailable())
            return

        await interaction.followup.send(embed=build_player_embed(player, rework_obj))

    @app_commands.command(name="beatmap", description="Show an osu! beatmap by its ID")
    @app_commands.describe(beatmap_id="The beatmap (difficulty) ID")
    async def beatmap(self, interaction: discord.Interaction, beatmap_id: app_commands.Range[int, 1]):
        await interaction.response.defer()
        beatmap = await self.osu_api.get_beatmap(beatmap_id)
        if beatmap is None:
            await interaction.followup.send(embed=ErrorEmbeds.beatmap_not_found(beatmap_id))
            return
        await interaction.followup.send(embed=build_beatmap_embed(beatmap))

    @app_commands.command(name="sorts", description="List the player ranking sort options")
    @app_commands.describe(sort="Show the details of one sort option")
    async def sorts(self, interaction: discord.Interaction, sort: Optional[str] = None):
        if sort is None:
            await interaction.response.send_message(embed=build_sorts_embed(), ephemeral=True)
            return

        try:
            option = PlayerRankingSort.from_id(sort)
        except SortOptionNotFoundError as e:
            await interaction.response.send_message(embed=ErrorEmbeds.invalid_input(e.user_message), ephemeral=True)
            return
        await interaction.response.send_message(embed=build_sorts_embed(option), ephemeral=True)

    @player.autocomplete('rework')
    async def rework_autocomplete(
        self,
        interaction: discord.Interaction,
        current: str,
    ) -> list[app_commands.Choice[str]]:
        """Provide rework code suggestions from the cached rework list."""
        try:
            reworks = await self.huis_api.get_reworks()
            if not reworks:
                return []
            return [
                app_commands.Choice(name=rework.display_name[:100], value=rework.code)
                for rework in reworks
                if rework.code and (
                    current.lower() in rework.code.lower()
                    or current.lower() in rework.display_name.lower()
                )
            ][:UIConstants.AUTOCOMPLETE_LIMIT]
        except Exception as e:
            logger.error(f"Error in rework autocomplete: {e}")
            return []

    @sorts.autocomplete('sort')
    async def sort_autocomplete(
        self,
        interaction: discord.Interaction,
        current: str,
    ) -> list[app_commands.Choice[str]]:
        """Provide sort option suggestions, showing the display name and submitting the id."""
        return [
            app_commands.Choice(name=option.display_name, value=option.id)
            for option in PlayerRankingSort.all()
            if current.lower() in option.display_name.lower() or current.lower() in option.id
        ][:UIConstants.AUTOCOMPLETE_LIMIT]

async def setup(bot):
    await bot.add_cog(ReworkCommands(bot))
