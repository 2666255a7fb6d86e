"""Main bot setup and event handlers for voidstats."""

import asyncio
import logging
import traceback

import discord

from .config import config

logging.basicConfig(
    level=logging.INFO, format="[%(asctime)s] %(levelname)s:%(name)s: %(message)s"
)
logger = logging.getLogger("voidstats")

bot = discord.Bot(debug_guilds=config.DEBUG_GUILDS or None)

COGS = [
    "voidstats.cogs.void",
]


@bot.event
async def on_ready() -> None:
    logger.info(f"Logged in as {bot.user}. Registering commands...")
    await bot.sync_commands()
    logger.info(f"{bot.user} commands synced!")


@bot.event
async def on_error(event: str, *args, **kwargs) -> None:
    error_text = traceback.format_exc()
    logger.error(f"Error in event {event}:\n{error_text}")
    if not config.BOT_ERRORS_CHANNEL:
        return
    try:
        channel = bot.get_channel(config.BOT_ERRORS_CHANNEL)
        if channel:
            error_msg = f"⚠️ Error in event `{event}`:\n```py\n{error_text[:1800]}```"
            await asyncio.wait_for(channel.send(error_msg), timeout=5.0)
    except Exception as send_error:
        logger.error(f"Failed to send error notification: {send_error}")


@bot.event
async def on_application_command(ctx: discord.ApplicationContext) -> None:
    logger.info(
        f"/{ctx.command.name} used by {ctx.author} in {getattr(ctx.guild, 'name', 'DM')}"
    )


def load_cogs() -> None:
    """Load all cogs."""
    for cog in COGS:
        bot.load_extension(cog)
        logger.info(f"Loaded cog: {cog}")


def run() -> None:
    """Run the bot."""
    load_cogs()
    bot.run(config.TOKEN)
