"""Void stats command cog."""

import discord
from discord.ext import commands

from ..api import HypixelClient, MojangClient, StatsFetcher
from ..cache import StatsCache
from ..config import config, load_privileged_users
from ..controller import VoidController
from ..cooldowns import CooldownTracker


class Void(commands.Cog):
    """Hypixel Bed Wars void stats."""

    def __init__(self, bot: discord.Bot, controller: VoidController, fetcher: StatsFetcher) -> None:
        self.bot = bot
        self.controller = controller
        self.fetcher = fetcher

    @discord.slash_command(
        name="void",
        description="Show player's void stats",
    )
    @discord.option(
        "player",
        str,
        description="Minecraft Username",
        required=True,
    )
    async def void(self, ctx: discord.ApplicationContext, player: str) -> None:
        await self.controller.handle_command(ctx, player)

    def cog_unload(self) -> None:
        self.bot.loop.create_task(self.fetcher.close())


def setup(bot: discord.Bot) -> None:
    fetcher = StatsFetcher(MojangClient(), HypixelClient(config.HYPIXEL_KEY))
    controller = VoidController(
        StatsCache(fetcher),
        CooldownTracker(privileged=load_privileged_users(config.PREMIUM_FILE)),
    )
    bot.add_cog(Void(bot, controller, fetcher))
