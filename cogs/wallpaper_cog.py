from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from io import BytesIO

import discord
from discord import app_commands
from discord.ext import commands

from lifegrid.params import DEFAULT_MONTH_STYLE, DEVICE_PRESETS, MONTH_STYLES, PRESET_THEMES, RenderParams
from lifegrid.render import FORMAT_PNG, MODE_MONTH, MODE_YEAR, render_image

MODE_CHOICES = [
    app_commands.Choice(name="Year", value=MODE_YEAR),
    app_commands.Choice(name="Month", value=MODE_MONTH),
]
STYLE_CHOICES = [app_commands.Choice(name=label, value=key) for key, label in MONTH_STYLES.items()]
THEME_CHOICES = [app_commands.Choice(name=t["name"], value=key) for key, t in PRESET_THEMES.items()]
DEVICE_CHOICES = [app_commands.Choice(name=d["name"], value=key) for key, d in DEVICE_PRESETS.items()]

MAX_CAPTION_LENGTH = 80


def build_params(
    style: str | None = None,
    theme: str | None = None,
    device: str | None = None,
    caption: str | None = None,
) -> RenderParams:
    """Params for one command invocation; unknown keys keep the defaults."""
    params = RenderParams(month_style=style or DEFAULT_MONTH_STYLE)
    if device:
        params = params.with_device(device)
    if theme:
        params = params.with_theme(theme)
    caption = (caption or "").strip()[:MAX_CAPTION_LENGTH]
    if caption:
        params = replace(params, show_caption=True, caption=caption)
    return params


def render_png(mode: str, params: RenderParams) -> BytesIO:
    buf = BytesIO(render_image(mode, params, params.month_style, fmt=FORMAT_PNG))
    buf.seek(0)
    return buf


def _value(choice: app_commands.Choice[str] | None) -> str | None:
    return choice.value if choice is not None else None


class WallpaperCog(commands.Cog):
    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @app_commands.command(name="wallpaper", description="Render a year or month progress wallpaper")
    @app_commands.describe(
        mode="Year dot grid or month calendar",
        style="Month calendar style",
        theme="Color theme",
        device="Screen size preset",
        caption="Text shown near the bottom",
    )
    @app_commands.choices(mode=MODE_CHOICES, style=STYLE_CHOICES, theme=THEME_CHOICES, device=DEVICE_CHOICES)
    async def wallpaper(
        self,
        interaction: discord.Interaction,
        mode: app_commands.Choice[str] | None = None,
        style: app_commands.Choice[str] | None = None,
        theme: app_commands.Choice[str] | None = None,
        device: app_commands.Choice[str] | None = None,
        caption: str | None = None,
    ) -> None:
        await interaction.response.defer(thinking=True)
        selected_mode = _value(mode) or MODE_YEAR
        params = build_params(_value(style), _value(theme), _value(device), caption)
        try:
            # Rendering is CPU-bound; keep it off the event loop
            buf = await asyncio.to_thread(render_png, selected_mode, params)
        except Exception as exc:
            logging.warning("Failed to render wallpaper for user %s: %s", interaction.user.id, exc)
            await interaction.followup.send("Could not render the wallpaper. Please try again.", ephemeral=True)
            return
        logging.info("Rendered %s wallpaper for user %s", selected_mode, interaction.user.id)
        await interaction.followup.send(file=discord.File(buf, filename="wallpaper.png"))


async def setup(bot: commands.Bot) -> None:
    await bot.add_cog(WallpaperCog(bot))
