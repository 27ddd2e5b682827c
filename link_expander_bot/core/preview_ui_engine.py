"""UI helpers for presenting link previews back to Discord users."""

from __future__ import annotations

import discord

from .metadata_extractor import ImageKind
from .preview_assembler import PreviewRecord


class PreviewUIEngine:
    """Formatting helpers that keep discord.py concerns outside the engine."""

    def build_embed(self, record: PreviewRecord) -> discord.Embed:
        """Return a Discord embed mirroring the page's own preview card."""

        embed = discord.Embed(
            title=record.title or None,
            url=record.url or None,
            description=record.description or None,
        )
        if record.image.kind is ImageKind.THUMBNAIL:
            embed.set_thumbnail(url=record.image.url)
        elif record.image.kind is ImageKind.CONTENT:
            embed.set_image(url=record.image.url)
        return embed


__all__ = ["PreviewUIEngine"]
