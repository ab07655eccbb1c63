import asyncio
import logging
import os
import sys
from pathlib import Path

import discord
from discord.ext import commands

# Ensure repo root is importable so that 'cogs' and 'lifegrid' (at project root) can be found
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from lifegrid.config import configure_logging, load_environment_variables  # noqa: E402

EXTENSIONS = ["cogs.wallpaper_cog"]


async def run_startup_checks() -> None:
    required_vars = [
        "DISCORD_BOT_TOKEN",
    ]
    missing = [name for name in required_vars if not os.getenv(name)]
    if missing:
        logging.warning("Missing environment variables: %s", ", ".join(missing))


async def main() -> None:
    load_environment_variables()
    configure_logging()
    await run_startup_checks()

    intents = discord.Intents.default()
    intents.message_content = False

    bot = commands.Bot(command_prefix="!", intents=intents)

    @bot.event
    async def on_ready():
        logging.info("Logged in as %s (ID: %s)", bot.user, bot.user.id)
        try:
            dev_guild_id = os.getenv("DEV_GUILD_ID")
            if dev_guild_id and dev_guild_id.isdigit():
                guild = discord.Object(id=int(dev_guild_id))
                bot.tree.copy_global_to(guild=guild)
                await bot.tree.sync(guild=guild)
                logging.info("Slash commands synced to guild %s", dev_guild_id)
            else:
                await bot.tree.sync()
                logging.info("Global slash commands sync requested")
        except Exception as exc:
            logging.warning("Failed to sync commands: %s", exc)

    token = os.getenv("DISCORD_BOT_TOKEN", "")
    if not token:
        logging.info("No DISCORD_BOT_TOKEN provided. Starting dummy loop then exit.")
        # Short no-op to validate event loop run
        await asyncio.sleep(0.1)
        return

    for ext in EXTENSIONS:
        try:
            await bot.load_extension(ext)
            logging.info("Loaded extension %s", ext)
        except Exception as exc:
            logging.warning("Failed to load extension %s: %s", ext, exc)

    await bot.start(token)


if __name__ == "__main__":
    asyncio.run(main())
