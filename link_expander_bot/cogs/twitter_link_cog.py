"""Discord cog that rewrites Twitter/X links to embed-friendly mirrors."""

from __future__ import annotations

import logging
from typing import Optional

import discord
from discord import app_commands
from discord.ext import commands

from link_expander_bot.core.domain_rewriter import RewriteRule, TWITTER_REWRITE_RULE, rewrite
from link_expander_bot.core.error_engine import ErrorEngine
from link_expander_bot.core.invocation import resolve_invocation
from link_expander_bot.core.link_matcher import LinkFamily, find_links


logger = logging.getLogger(__name__)

CONTEXT_MENU_NAME = "Fix Twitter link"
NO_LINKS_MESSAGE = "Sorry, there are no Twitter links in this message."
WORKING_MESSAGE = "Fixing Twitter links..."


class TwitterLinkCog(commands.Cog):
    """Answers ``/fx`` and the "Fix Twitter link" context menu."""

    def __init__(
        self,
        bot: commands.Bot,
        error_engine: ErrorEngine,
        rule: RewriteRule = TWITTER_REWRITE_RULE,
    ) -> None:
        self.bot = bot
        self.error_engine = error_engine
        self.rule = rule

    # --------------------------------------------------------------
    # Slash & context menu commands
    # --------------------------------------------------------------

    @app_commands.command(
        name="fx",
        description="twitter.com -> fxtwitter.com and etc.",
    )
    @app_commands.describe(
        message="Enter a Twitter link or a message containing one or more twitter links",
    )
    async def fx_slash(self, interaction: discord.Interaction, message: str) -> None:
        await self.fix_links(interaction, text=message)

    async def fix_message_context(
        self,
        interaction: discord.Interaction,
        message: discord.Message,
    ) -> None:
        """Right-click message → Apps → Fix Twitter link."""

        await self.fix_links(interaction, message=message)

    def setup_slash(self, bot: commands.Bot) -> None:
        """Register slash and context-menu commands idempotently."""

        if bot.tree.get_command("fx") is None:
            bot.tree.add_command(self.fx_slash)

        # Context menus can't be declared on a cog; forward to the cog method.
        async def _context_callback(
            interaction: discord.Interaction,
            message: discord.Message,
        ) -> None:
            await self.fix_message_context(interaction, message)

        if bot.tree.get_command(CONTEXT_MENU_NAME, type=discord.AppCommandType.message) is None:
            bot.tree.add_command(
                app_commands.ContextMenu(name=CONTEXT_MENU_NAME, callback=_context_callback)
            )

    # --------------------------------------------------------------
    # Internal helpers
    # --------------------------------------------------------------

    async def fix_links(
        self,
        interaction: discord.Interaction,
        *,
        text: Optional[str] = None,
        message: Optional[discord.Message] = None,
    ) -> None:
        payload = resolve_invocation(text=text, message=message)
        content = payload.text if payload else ""
        matches = find_links(content, LinkFamily.TWITTER)

        try:
            if not matches:
                await interaction.response.send_message(NO_LINKS_MESSAGE, ephemeral=True)
                return

            await interaction.response.send_message(WORKING_MESSAGE)
            fixed = rewrite(content, matches, self.rule)
            await interaction.edit_original_response(content=fixed)
        except discord.HTTPException as exc:
            logger.warning("Failed to answer Twitter link interaction: %s", exc)
            self.error_engine.log_exception(exc, context="fix Twitter links")


async def setup(bot: commands.Bot) -> None:  # pragma: no cover - dynamic loading guard
    raise RuntimeError("Use LinkExpanderRunner to load TwitterLinkCog")


__all__ = ["TwitterLinkCog"]
