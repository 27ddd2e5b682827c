# register_discord_commands.py
# Registers LinkExpanderBot's application commands without starting the bot.

import os
import discord
from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(__file__), '../.env'))
TOKEN = os.getenv('DISCORD_TOKEN')

client = discord.Client(intents=discord.Intents.none())

# Application command types: 1 = slash, 3 = message context menu.
# Option type 3 = string.
COMMANDS = [
    {"name": "Expand Threads link", "description": "", "type": 3},
    {"name": "Fix Twitter link", "description": "", "type": 3},
    {
        "name": "fx",
        "description": "twitter.com -> fxtwitter.com and etc.",
        "type": 1,
        "dm_permission": True,
        "options": [
            {
                "name": "message",
                "description": "Enter a Twitter link or a message containing one or more twitter links",
                "type": 3,
                "required": True,
            }
        ],
    },
]


async def register_commands():
    app_info = await client.application_info()
    app_id = app_info.id
    guilds = os.getenv('TEST_GUILDS', '').replace(';', ',').split(',')
    for guild_id in guilds:
        if guild_id.strip():
            await client.http.bulk_upsert_guild_commands(app_id, int(guild_id.strip()), COMMANDS)
    await client.http.bulk_upsert_global_commands(app_id, COMMANDS)
    print('LinkExpanderBot commands registered.')


@client.event
async def on_ready():
    await register_commands()
    await client.close()


if __name__ == '__main__':
    client.run(TOKEN)
