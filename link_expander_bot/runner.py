"""Async bootstrapper for LinkExpanderBot."""

from __future__ import annotations

import asyncio
import logging

import discord
from discord.ext import commands
from dotenv import load_dotenv

from link_expander_bot.config import LinkExpanderConfig
from link_expander_bot.core.error_engine import ErrorEngine
from link_expander_bot.core.logging_utils import configure_library_logging
from link_expander_bot.core.page_fetcher import PageFetcher
from link_expander_bot.core.preview_ui_engine import PreviewUIEngine
from link_expander_bot.cogs.threads_link_cog import ThreadsLinkCog
from link_expander_bot.cogs.twitter_link_cog import TwitterLinkCog


logger = logging.getLogger(__name__)


class LinkExpanderRunner:
    """Full lifecycle manager for the discord.py bot instance."""

    def __init__(self, config: LinkExpanderConfig | None = None) -> None:
        load_dotenv()
        self.config = config or LinkExpanderConfig.from_env()
        configure_library_logging(level=self.config.log_level)
        self.error_engine = ErrorEngine(log_file=self.config.error_log_file)
        self.error_engine.catch_uncaught()

        # Application commands only; no gateway intents are needed.
        self.bot = commands.Bot(
            command_prefix=commands.when_mentioned,
            intents=discord.Intents.none(),
            help_command=None,
        )

        fetcher = PageFetcher(user_agent=self.config.user_agent, timeout=self.config.http_timeout)
        ui_engine = PreviewUIEngine()

        async def setup_hook() -> None:
            try:
                if self.config.wipe_commands:
                    logger.warning(
                        "LINK_EXPANDER_WIPE_COMMANDS is enabled – clearing all registered "
                        "application commands for LinkExpanderBot from Discord."
                    )
                    self.bot.tree.clear_commands(guild=None)
                    await self.bot.tree.sync()
                    for gid in self.config.test_guild_ids:
                        guild = discord.Object(id=gid)
                        self.bot.tree.clear_commands(guild=guild)
                        await self.bot.tree.sync(guild=guild)
                    logger.info(
                        "Application commands wiped from Discord. "
                        "Restart without LINK_EXPANDER_WIPE_COMMANDS to resync fresh commands."
                    )
                    return

                twitter_cog = TwitterLinkCog(self.bot, self.error_engine)
                threads_cog = ThreadsLinkCog(self.bot, fetcher, ui_engine, self.error_engine)
                await self.bot.add_cog(twitter_cog)
                await self.bot.add_cog(threads_cog)
                twitter_cog.setup_slash(self.bot)
                threads_cog.setup_slash(self.bot)

                if self.config.test_guild_ids:
                    for gid in self.config.test_guild_ids:
                        guild = discord.Object(id=gid)
                        self.bot.tree.copy_global_to(guild=guild)
                        await self.bot.tree.sync(guild=guild)
                else:
                    await self.bot.tree.sync()
                logger.info("Application commands synced")
            except discord.HTTPException as exc:
                logger.warning("Failed to sync application commands: %s", exc)
                self.error_engine.log_exception(exc, context="command sync")

        self.bot.setup_hook = setup_hook  # type: ignore[assignment]

        @self.bot.event  # type: ignore[misc]
        async def on_ready() -> None:
            bot_user = self.bot.user
            user_id = bot_user.id if bot_user else "unknown"
            logger.info("LinkExpanderBot connected as %s (%s)", bot_user, user_id)

    async def start(self) -> None:
        await self.bot.start(self.config.discord_token)

    async def close(self) -> None:
        await self.bot.close()


def run_link_expander_bot() -> None:
    runner = LinkExpanderRunner()
    try:
        asyncio.run(runner.start())
    except KeyboardInterrupt:
        logger.info("LinkExpanderBot interrupted by user")


__all__ = ["LinkExpanderRunner", "run_link_expander_bot"]
