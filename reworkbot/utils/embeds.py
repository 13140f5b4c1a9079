"""
Shared embed builders for the rework bot.

Turns the API data models into Discord embeds so the cog stays focused on
the command flow.
"""

from typing import List, Optional

import discord

from reworkbot.constants import UIConstants
from reworkbot.data_models.huis import HuisPlayer, Rework
from reworkbot.data_models.osu import OsuBeatmap
from reworkbot.data_models.ranking_sort import PlayerRankingSort


def _pp(value: Optional[float]) -> str:
    return f"{value:,.2f}pp" if value is not None else "N/A"


def build_status_embed(huis_online: bool, osu_online: bool) -> discord.Embed:
    """Embed showing whether both providers are reachable."""
    all_online = huis_online and osu_online
    embed = discord.Embed(
        title="API Status",
        color=UIConstants.SUCCESS_COLOR if all_online else UIConstants.ERROR_COLOR
    )
    for name, online in (("Huis API", huis_online), ("osu! API", osu_online)):
        emoji = UIConstants.ONLINE_EMOJI if online else UIConstants.OFFLINE_EMOJI
        embed.add_field(name=name, value=f"{emoji} {'Online' if online else 'Offline'}", inline=True)
    return embed


def build_reworks_embed(reworks: List[Rework]) -> discord.Embed:
    """
    Embed listing the reworks.

    Embeds are capped at 25 fields, so longer lists are cut off and the
    footer says how many were left out.
    """
    embed = discord.Embed(title="Reworks", color=UIConstants.DEFAULT_EMBED_COLOR)
    shown = reworks[:UIConstants.MAX_REWORK_DISPLAY]
    for rework in shown:
        flags = []
        if rework.is_active is False:
            flags.append("inactive")
        if rework.is_historic:
            flags.append("historic")
        if rework.is_confirmed:
            flags.append("confirmed")
        details = f"Code: `{rework.code or '-'}`"
        if flags:
            details += f" ({', '.join(flags)})"
        if rework.url:
            details += f"\n[Source]({rework.url})"
        embed.add_field(name=rework.display_name, value=details, inline=False)

    if len(reworks) > len(shown):
        embed.set_footer(text=f"Showing {len(shown)} of {len(reworks)} reworks")
    else:
        embed.set_footer(text=f"{len(reworks)} reworks")
    return embed


def build_player_embed(player: HuisPlayer, rework: Rework) -> discord.Embed:
    """Embed with a player's pp breakdown in one rework."""
    embed = discord.Embed(
        title=f"{player.name or player.id} in {rework.display_name}",
        url=f"https://osu.ppy.sh/u/{player.id}",
        color=UIConstants.DEFAULT_EMBED_COLOR,
        timestamp=player.last_updated
    )

    difference = player.pp_difference
    change = f"{difference:+,.2f}pp" if difference is not None else "N/A"
    embed.add_field(
        name="PP",
        value=(
            f"**Live:** {_pp(player.old_pp)}\n"
            f"**Rework:** {_pp(player.new_pp)}\n"
            f"**Change:** {change}\n"
            f"**Excl. Bonus:** {_pp(player.new_pp_excl_bonus)}"
        ),
        inline=True
    )
    embed.add_field(
        name="Weighted",
        value=(
            f"**Aim:** {_pp(player.weighted_aim_pp)}\n"
            f"**Tap:** {_pp(player.weighted_tap_pp)}\n"
            f"**Acc:** {_pp(player.weighted_acc_pp)}\n"
            f"**FL:** {_pp(player.weighted_fl_pp)}\n"
            f"**Bonus:** {_pp(player.bonus_pp)}"
        ),
        inline=True
    )
    embed.set_footer(text="Last updated on Huismetbenen")
    return embed


def build_beatmap_embed(beatmap: OsuBeatmap) -> discord.Embed:
    embed = discord.Embed(title=beatmap.display_name, url=beatmap.url, color=UIConstants.DEFAULT_EMBED_COLOR)
    if beatmap.creator:
        embed.add_field(name="Mapper", value=beatmap.creator, inline=True)
    if beatmap.difficulty_rating is not None:
        embed.add_field(name="Star Rating", value=f"{beatmap.difficulty_rating:.2f}★", inline=True)
    if beatmap.bpm is not None:
        embed.add_field(name="BPM", value=f"{beatmap.bpm:g}", inline=True)
    if beatmap.total_length is not None:
        minutes, seconds = divmod(beatmap.total_length, 60)
        embed.add_field(name="Length", value=f"{minutes}:{seconds:02d}", inline=True)
    if beatmap.max_combo is not None:
        embed.add_field(name="Max Combo", value=f"{beatmap.max_combo}x", inline=True)
    if beatmap.beatmapset_id is not None:
        embed.set_footer(text=f"Beatmap ID {beatmap.id} | Set ID {beatmap.beatmapset_id}")
    return embed


def build_sorts_embed(selected: Optional[PlayerRankingSort] = None) -> discord.Embed:
    """Embed listing all ranking sort options, or describing one of them."""
    if selected is not None:
        embed = discord.Embed(title=selected.display_name, color=UIConstants.DEFAULT_EMBED_COLOR)
        embed.add_field(name="Sort Code", value=f"`{selected.code}`", inline=True)
        embed.add_field(name="Order", value=selected.order, inline=True)
        embed.set_footer(text=f"ID: {selected.id}")
        return embed

    lines = [f"`{option.id}` - {option.display_name}" for option in PlayerRankingSort.all()]
    return discord.Embed(
        title="Player Ranking Sort Options",
        description="\n".join(lines),
        color=UIConstants.DEFAULT_EMBED_COLOR
    )
