"""Embed builder functions for the voidstats bot."""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

import discord

from .stats import MODES, ModeCounters, PlayerStats

FOOTER_TEXT = "void | made by mtnk"

Ratio = Union[int, Decimal]

CENTS = Decimal("0.01")


def kill_ratio(kills: int, deaths: int) -> Ratio:
    """Kills per death, or the raw kill count when there are no deaths."""
    if deaths == 0:
        return kills
    return (Decimal(kills) / Decimal(deaths)).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_ratio(ratio: Ratio) -> str:
    """Raw kill counts print as is, quotients always with two decimals."""
    return str(ratio)


def format_cooldown(seconds: float) -> str:
    """Render a wait time as ``"2s, 512ms"``."""
    total_ms = int(seconds * 1000)
    return f"{total_ms // 1000}s, {total_ms % 1000}ms"


def build_void_embed(username: str, mode_key: str, stats: PlayerStats) -> discord.Embed:
    """
    Build the void stats card of one mode.

    Args:
        username: The name the player was looked up by.
        mode_key: A key of ``MODES``.
        stats: Aggregated stats of the player.

    Returns:
        A Discord embed with kills, deaths and ratios for the mode.
    """
    s = stats.get(mode_key, ModeCounters())
    kdr = kill_ratio(s.kills, s.deaths)
    fkdr = kill_ratio(s.final_kills, s.final_deaths)

    embed = discord.Embed(
        title=f"``{username}``",
        description=f"{MODES.get(mode_key, mode_key)} mode",
        color=discord.Color.from_rgb(0, 0, 0),
        timestamp=datetime.now(timezone.utc),
    )
    embed.add_field(name="Void Kills", value=f"{s.kills}", inline=True)
    embed.add_field(name="Void Deaths", value=f"{s.deaths}", inline=True)
    embed.add_field(name="Void KDR", value=format_ratio(kdr), inline=True)
    embed.add_field(name="Void Final Kills", value=f"{s.final_kills}", inline=True)
    embed.add_field(name="Void Final Deaths", value=f"{s.final_deaths}", inline=True)
    embed.add_field(name="Void FKDR", value=format_ratio(fkdr), inline=True)
    embed.set_footer(text=FOOTER_TEXT)
    return embed


def build_cooldown_embed(command_name: str, remaining: float) -> discord.Embed:
    embed = discord.Embed(
        title="Cooldown",
        description=(
            f"Please wait `{format_cooldown(remaining)}` before reusing `{command_name}`."
        ),
        color=discord.Color.red(),
        timestamp=datetime.now(timezone.utc),
    )
    embed.set_footer(text=FOOTER_TEXT)
    return embed
