"""Discord cog that expands a Threads link into a rich embed preview."""

from __future__ import annotations

import logging

import discord
from discord import app_commands
from discord.ext import commands

from link_expander_bot.core.error_engine import ErrorEngine
from link_expander_bot.core.invocation import resolve_invocation
from link_expander_bot.core.link_matcher import LinkFamily, find_links
from link_expander_bot.core.metadata_extractor import extract_metadata, parse_html
from link_expander_bot.core.page_fetcher import FetchError, PageFetcher
from link_expander_bot.core.preview_assembler import EmbedBuildError, build_preview
from link_expander_bot.core.preview_ui_engine import PreviewUIEngine


logger = logging.getLogger(__name__)

CONTEXT_MENU_NAME = "Expand Threads link"
NO_LINKS_MESSAGE = "Sorry, there are no Threads links in this message."
WORKING_MESSAGE = "Loading Threads link info..."
FAILURE_MESSAGE = "Sorry, I couldn't load a preview for that Threads link."


class ThreadsLinkCog(commands.Cog):
    """Answers the "Expand Threads link" context menu."""

    def __init__(
        self,
        bot: commands.Bot,
        fetcher: PageFetcher,
        ui_engine: PreviewUIEngine,
        error_engine: ErrorEngine,
    ) -> None:
        self.bot = bot
        self.fetcher = fetcher
        self.ui = ui_engine
        self.error_engine = error_engine

    async def expand_message_context(
        self,
        interaction: discord.Interaction,
        message: discord.Message,
    ) -> None:
        """Right-click message → Apps → Expand Threads link."""

        payload = resolve_invocation(message=message)
        matches = find_links(payload.text if payload else "", LinkFamily.THREADS)

        try:
            if not matches:
                await interaction.response.send_message(NO_LINKS_MESSAGE, ephemeral=True)
                return

            await interaction.response.send_message(WORKING_MESSAGE)
        except discord.HTTPException as exc:
            logger.warning("Failed to acknowledge Threads link interaction: %s", exc)
            self.error_engine.log_exception(exc, context="expand Threads link")
            return

        # Only the first link is previewed.
        target = matches[0].url.geturl()
        try:
            html = await self.fetcher.fetch_text(target)
            record = build_preview(extract_metadata(parse_html(html)))
        except (FetchError, EmbedBuildError) as exc:
            logger.warning("Unable to build a preview for %s: %s", target, exc)
            await self._report_failure(interaction)
            return

        try:
            await interaction.edit_original_response(content=None, embed=self.ui.build_embed(record))
        except discord.HTTPException as exc:
            logger.warning("Failed to send Threads preview for %s: %s", target, exc)
            self.error_engine.log_exception(exc, context="expand Threads link")
            await self._report_failure(interaction)

    def setup_slash(self, bot: commands.Bot) -> None:
        """Register the context-menu command idempotently."""

        async def _context_callback(
            interaction: discord.Interaction,
            message: discord.Message,
        ) -> None:
            await self.expand_message_context(interaction, message)

        if bot.tree.get_command(CONTEXT_MENU_NAME, type=discord.AppCommandType.message) is None:
            bot.tree.add_command(
                app_commands.ContextMenu(name=CONTEXT_MENU_NAME, callback=_context_callback)
            )

    async def _report_failure(self, interaction: discord.Interaction) -> None:
        """Swap the public placeholder for a private failure notice."""

        try:
            await interaction.delete_original_response()
            await interaction.followup.send(FAILURE_MESSAGE, ephemeral=True)
        except discord.HTTPException as exc:
            logger.warning("Failed to report Threads preview failure: %s", exc)
            self.error_engine.log_exception(exc, context="report Threads failure")


async def setup(bot: commands.Bot) -> None:  # pragma: no cover - dynamic loading guard
    raise RuntimeError("Use LinkExpanderRunner to load ThreadsLinkCog")


__all__ = ["ThreadsLinkCog"]
