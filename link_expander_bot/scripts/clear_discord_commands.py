# clear_discord_commands.py
# Removes all Discord application commands registered for LinkExpanderBot.

import os
import discord
from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(__file__), '../.env'))
TOKEN = os.getenv('DISCORD_TOKEN')

client = discord.Client(intents=discord.Intents.none())


async def clear_commands():
    app_info = await client.application_info()
    app_id = app_info.id
    guilds = os.getenv('TEST_GUILDS', '').replace(';', ',').split(',')
    for guild_id in guilds:
        if guild_id.strip():
            await client.http.bulk_upsert_guild_commands(app_id, int(guild_id.strip()), [])
    await client.http.bulk_upsert_global_commands(app_id, [])
    print('All LinkExpanderBot commands cleared.')


@client.event
async def on_ready():
    await clear_commands()
    await client.close()


if __name__ == '__main__':
    client.run(TOKEN)
